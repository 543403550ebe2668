from .extractor import StructuredExtractor
from .prompt_composer import compose_messages
from .service import ErrorKind, ExtractionOutcome, ExtractionRequest, ExtractionService

__all__ = [
    'ErrorKind',
    'ExtractionOutcome',
    'ExtractionRequest',
    'ExtractionService',
    'StructuredExtractor',
    'compose_messages',
]
