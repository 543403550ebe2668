"""Request orchestration: fetch, parse, compose, extract, and map failures."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import Settings
from ..exceptions import (
    InvalidRequest,
    ModelInvocationError,
    NoContent,
    UnknownSchemaVariant,
    UnreachableSource,
    UnsupportedFormat,
)
from ..schemas import get_schema
from ..utils.document_fetcher import DocumentFetcher
from ..utils.document_parser import DocumentParser
from .extractor import StructuredExtractor
from .prompt_composer import compose_messages

logger = logging.getLogger(__name__)

NO_DOCUMENTS_MESSAGE = "No documents found"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"
MISSING_LOCATION_MESSAGE = "Missing document location"
UNKNOWN_SCHEMA_MESSAGE = "Unknown schema variant"


class RequestState(str, Enum):
    RECEIVED = "received"
    FETCHING = "fetching"
    PARSING = "parsing"
    EMPTY_CHECK = "empty_check"
    COMPOSING = "composing"
    EXTRACTING = "extracting"
    COMPLETED = "completed"
    ERRORED = "errored"


class ErrorKind(str, Enum):
    INVALID_REQUEST = "invalid_request"
    UNREACHABLE_SOURCE = "unreachable_source"
    UNSUPPORTED_FORMAT = "unsupported_format"
    NO_CONTENT = "no_content"
    MODEL_INVOCATION = "model_invocation"
    INTERNAL = "internal"


@dataclass
class ExtractionOutcome:
    """Status code and JSON body handed back to the HTTP layer."""

    status_code: int
    body: dict
    error_kind: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


@dataclass
class ExtractionRequest:
    pdfpath: Optional[str] = None
    docname: Optional[str] = None
    schema: Optional[str] = None


@dataclass
class _RequestTrace:
    """Tracks the state of a single request for logging."""

    location: Optional[str]
    state: RequestState = RequestState.RECEIVED

    def advance(self, state: RequestState) -> None:
        logger.debug("%s: %s -> %s", self.location, self.state.value, state.value)
        self.state = state


class ExtractionService:
    """Runs the fetch → parse → compose → extract pipeline for one request at a time.

    Holds only read-only collaborators, so one instance serves concurrent
    requests.
    """

    def __init__(self,
                 fetcher: DocumentFetcher,
                 parser: DocumentParser,
                 extractor: StructuredExtractor,
                 default_schema: str = "sales_proposal"):
        self.fetcher = fetcher
        self.parser = parser
        self.extractor = extractor
        self.default_schema = default_schema

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExtractionService":
        """Build the service and its collaborators from process settings."""
        return cls(
            fetcher=DocumentFetcher(timeout=settings.fetch_timeout),
            parser=DocumentParser(),
            extractor=StructuredExtractor(
                model=settings.openai_model,
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url,
            ),
            default_schema=settings.default_schema,
        )

    async def run(self, location: str, schema_name: Optional[str] = None) -> dict:
        """
        Extract structured proposal data from the document at ``location``.

        Args:
            location: URL or path of the document
            schema_name: Variant identifier or alias; the default variant when omitted

        Returns:
            Extraction result conforming to the selected variant

        Raises:
            InvalidRequest, UnknownSchemaVariant, UnreachableSource,
            UnsupportedFormat, NoContent, ModelInvocationError
        """
        return await self._run(location, schema_name, _RequestTrace(location))

    async def _run(self, location: str, schema_name: Optional[str], trace: _RequestTrace) -> dict:
        if not location:
            raise InvalidRequest("pdfpath is required")
        schema = get_schema(schema_name or self.default_schema)

        trace.advance(RequestState.FETCHING)
        raw = await self.fetcher.fetch(location)

        trace.advance(RequestState.PARSING)
        parsed = self.parser.parse(raw)

        trace.advance(RequestState.EMPTY_CHECK)
        if parsed.is_empty():
            raise NoContent(f"No text found in document at {location!r}")

        trace.advance(RequestState.COMPOSING)
        messages = compose_messages(schema, parsed.text)

        trace.advance(RequestState.EXTRACTING)
        result = await self.extractor.extract(messages, schema)

        trace.advance(RequestState.COMPLETED)
        return result

    async def handle(self, request: ExtractionRequest) -> ExtractionOutcome:
        """Run the pipeline and translate its outcome into a status code and body."""
        trace = _RequestTrace(request.pdfpath)
        if request.docname:
            logger.info("Extracting %r from %s", request.docname, request.pdfpath)

        try:
            result = await self._run(request.pdfpath, request.schema, trace)
        except InvalidRequest:
            return self._fail(trace, ErrorKind.INVALID_REQUEST, 400, MISSING_LOCATION_MESSAGE)
        except UnknownSchemaVariant as e:
            logger.warning("Rejected request for %s: %s", request.pdfpath, e)
            return self._fail(trace, ErrorKind.INVALID_REQUEST, 400, UNKNOWN_SCHEMA_MESSAGE)
        except NoContent:
            logger.info("No documents found.")
            return self._fail(trace, ErrorKind.NO_CONTENT, 400, NO_DOCUMENTS_MESSAGE)
        except UnreachableSource:
            logger.exception("Document retrieval failed for %s", request.pdfpath)
            return self._fail(trace, ErrorKind.UNREACHABLE_SOURCE, 500, INTERNAL_ERROR_MESSAGE)
        except UnsupportedFormat:
            logger.exception("Unsupported document format for %s", request.pdfpath)
            return self._fail(trace, ErrorKind.UNSUPPORTED_FORMAT, 500, INTERNAL_ERROR_MESSAGE)
        except ModelInvocationError:
            logger.exception("Model invocation failed for %s", request.pdfpath)
            return self._fail(trace, ErrorKind.MODEL_INVOCATION, 500, INTERNAL_ERROR_MESSAGE)
        except Exception:
            logger.exception("Unhandled error while extracting %s", request.pdfpath)
            return self._fail(trace, ErrorKind.INTERNAL, 500, INTERNAL_ERROR_MESSAGE)

        return ExtractionOutcome(status_code=200, body=result)

    @staticmethod
    def _fail(trace: _RequestTrace, kind: ErrorKind, status_code: int, message: str) -> ExtractionOutcome:
        failed_at = trace.state
        trace.advance(RequestState.ERRORED)
        logger.debug("%s failed at %s with %s", trace.location, failed_at.value, kind.value)
        return ExtractionOutcome(status_code=status_code, body={"message": message}, error_kind=kind)
