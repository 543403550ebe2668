"""Error taxonomy for the proposal extraction pipeline."""


class ExtractionError(Exception):
    """Base class for every failure raised by the extraction pipeline."""


class UnreachableSource(ExtractionError):
    """The document could not be retrieved from its location."""

    def __init__(self, location: str, message: str = None):
        self.location = location
        super().__init__(message or f"Could not retrieve document from {location!r}")


class UnsupportedFormat(ExtractionError):
    """Neither the PDF nor the Word interpreter could read the document."""

    def __init__(self, pdf_error: Exception, word_error: Exception):
        self.pdf_error = pdf_error
        self.word_error = word_error
        super().__init__(
            "Unsupported document format or failed to load document "
            f"(pdf: {pdf_error!r}; word: {word_error!r})"
        )


class NoContent(ExtractionError):
    """The document was parsed but holds no text."""


class ModelInvocationError(ExtractionError):
    """The language model call failed or returned a non-conforming object."""


class UnknownSchemaVariant(ExtractionError):
    """The requested schema variant is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown schema variant: {name!r}")


class InvalidRequest(ExtractionError):
    """The inbound request lacks a field the pipeline needs."""
