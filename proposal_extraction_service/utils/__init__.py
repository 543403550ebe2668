from .document_fetcher import DocumentFetcher
from .document_parser import DocumentParser, ParsedDocument

__all__ = ['DocumentFetcher', 'DocumentParser', 'ParsedDocument']
