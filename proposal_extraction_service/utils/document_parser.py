"""Plain-text extraction from PDF and Word documents."""

import io
import logging
from dataclasses import dataclass
from typing import Tuple

from docx import Document as DocxDocument
from docx.table import Table
from pypdf import PdfReader

from ..exceptions import UnsupportedFormat

logger = logging.getLogger(__name__)

PDF_INTERPRETER = "pdf"
WORD_INTERPRETER = "docx"


@dataclass(frozen=True)
class ParsedDocument:
    """Text of a document with page and section boundaries collapsed."""

    segments: Tuple[str, ...]
    interpreter: str

    @property
    def text(self) -> str:
        return "\n\n".join(self.segments)

    def is_empty(self) -> bool:
        return not self.segments


class DocumentParser:
    """Turns raw document bytes into text, trying PDF first and Word second."""

    def parse(self, raw: bytes) -> ParsedDocument:
        """
        Parse document bytes of unknown format.

        Args:
            raw: Document content as bytes

        Returns:
            ParsedDocument with zero segments if the document holds no text

        Raises:
            UnsupportedFormat: If neither interpreter can read the bytes
        """
        try:
            return self._single_segment(PDF_INTERPRETER, self.extract_pdf_text(raw))
        except Exception as pdf_error:
            logger.warning("Failed to load as PDF, attempting to load as Word document: %s", pdf_error)
            pdf_failure = pdf_error

        try:
            return self._single_segment(WORD_INTERPRETER, self.extract_docx_text(raw))
        except Exception as word_error:
            logger.error("Failed to load as Word document: %s", word_error)
            raise UnsupportedFormat(pdf_failure, word_error) from word_error

    @staticmethod
    def extract_pdf_text(raw: bytes) -> str:
        """Extract the text of every page of a PDF as one unit."""
        reader = PdfReader(io.BytesIO(raw))
        if len(reader.pages) == 0:
            raise ValueError("PDF has no pages")

        # Page boundaries are not kept: the whole PDF is one text unit.
        pages = [page.extract_text() or "" for page in reader.pages]
        return "\n\n".join(page for page in pages if page.strip())

    @staticmethod
    def extract_docx_text(raw: bytes) -> str:
        """Extract paragraphs and table cells of a .docx in body order."""
        document = DocxDocument(io.BytesIO(raw))
        blocks = []
        for block in document.iter_inner_content():
            if isinstance(block, Table):
                for row in block.rows:
                    cells = [cell.text.strip() for cell in row.cells]
                    line = "\t".join(cell for cell in cells if cell)
                    if line:
                        blocks.append(line)
            elif block.text.strip():
                blocks.append(block.text)
        return "\n".join(blocks)

    @staticmethod
    def _single_segment(interpreter: str, text: str) -> ParsedDocument:
        segments = (text,) if text.strip() else ()
        return ParsedDocument(segments=segments, interpreter=interpreter)
