"""Proposal Extraction Service - structured data from PDF and Word sales proposals."""

from .config import Settings, get_settings
from .core import ExtractionOutcome, ExtractionRequest, ExtractionService, StructuredExtractor, compose_messages
from .exceptions import (
    ExtractionError,
    InvalidRequest,
    ModelInvocationError,
    NoContent,
    UnknownSchemaVariant,
    UnreachableSource,
    UnsupportedFormat,
)
from .schemas import BaseProposalSchema, NarrativeProposalSchema, SalesProposalSchema, get_schema, list_schemas
from .utils import DocumentFetcher, DocumentParser, ParsedDocument

__version__ = "1.0.0"
__all__ = [
    'BaseProposalSchema',
    'DocumentFetcher',
    'DocumentParser',
    'ExtractionError',
    'ExtractionOutcome',
    'ExtractionRequest',
    'ExtractionService',
    'InvalidRequest',
    'ModelInvocationError',
    'NarrativeProposalSchema',
    'NoContent',
    'ParsedDocument',
    'SalesProposalSchema',
    'Settings',
    'StructuredExtractor',
    'UnknownSchemaVariant',
    'UnreachableSource',
    'UnsupportedFormat',
    'compose_messages',
    'get_schema',
    'get_settings',
    'list_schemas',
]
