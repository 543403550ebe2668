"""Pytest configuration and fixtures."""

import io
from typing import Callable, List, Optional

import pytest
from docx import Document
from langchain_core.runnables import RunnableLambda
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from proposal_extraction_service import DocumentFetcher, DocumentParser, ExtractionService, StructuredExtractor

SALES_PROPOSAL_PAYLOAD = {
    "customer": "Acme Insurance",
    "industry": "Insurance",
    "projectTitle": "Claims Analytics Platform v2",
    "objectives": ["Reduce claim processing time", "Centralize reporting"],
    "scope": ["Data warehouse design", "Dashboard development"],
    "technologies": ["Power BI", "Azure Data Factory", ".NET"],
    "solutionSummary": "A cloud data platform feeding Power BI dashboards for claims managers.",
}

NARRATIVE_PROPOSAL_PAYLOAD = {
    "customer": "Acme Insurance",
    "industry": "Seguros",
    "objectives": "El cliente busca reducir el tiempo de gestión de siniestros.",
    "scope": "El proyecto cubre el diseño del almacén de datos y los tableros.",
    "technologies": ["Power BI"],
    "solutionSummary": "Una plataforma de datos en la nube con tableros de Power BI.",
}


class FakeStructuredChatModel:
    """Stands in for ChatOpenAI: records calls and answers with a fixed payload."""

    def __init__(self, payload: Optional[dict] = None, error: Optional[Exception] = None, as_model: bool = False):
        self.payload = payload
        self.error = error
        self.as_model = as_model
        self.bound = []
        self.calls = []

    def with_structured_output(self, schema, **kwargs):
        self.bound.append((schema, kwargs))

        def respond(messages):
            self.calls.append(messages)
            if self.error is not None:
                raise self.error
            if self.payload is not None and self.as_model:
                return schema.model_validate(self.payload)
            return self.payload

        return RunnableLambda(respond)


def build_pdf(pages: List[List[str]]) -> bytes:
    """Render a PDF with one page per entry, each line drawn as text."""
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            pdf.drawString(72, y, line)
            y -= 18
        pdf.showPage()
    pdf.save()
    return buffer.getvalue()


def build_docx(paragraphs: List[str], table: Optional[List[List[str]]] = None) -> bytes:
    """Build a .docx with the given paragraphs followed by an optional table."""
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    if table:
        grid = document.add_table(rows=len(table), cols=len(table[0]))
        for row_index, row in enumerate(table):
            for col_index, value in enumerate(row):
                grid.cell(row_index, col_index).text = value
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return build_pdf([
        ["Sales Proposal for Acme Insurance", "Project: Claims Analytics Platform v2"],
        ["Technologies: PowerBI, Azure Data Factory, dotnet"],
    ])


@pytest.fixture
def empty_pdf_bytes() -> bytes:
    """A valid one-page PDF with no text on it."""
    return build_pdf([[]])


@pytest.fixture
def sample_docx_bytes() -> bytes:
    return build_docx(
        ["Sales Proposal for Acme Insurance", "Objectives: reduce claim processing time"],
        table=[["Phase", "Deliverable"], ["1", "Data warehouse"]],
    )


@pytest.fixture
def invalid_file_bytes() -> bytes:
    """Bytes neither interpreter accepts."""
    return b"This is not a PDF file"


@pytest.fixture
def write_document(tmp_path) -> Callable[[str, bytes], str]:
    """Write bytes under tmp_path and return the path as a location string."""
    def write(name: str, content: bytes) -> str:
        path = tmp_path / name
        path.write_bytes(content)
        return str(path)
    return write


@pytest.fixture
def fake_llm() -> FakeStructuredChatModel:
    return FakeStructuredChatModel(payload=SALES_PROPOSAL_PAYLOAD)


@pytest.fixture
def make_service() -> Callable[..., ExtractionService]:
    """Build an ExtractionService around a fake chat model."""
    def make(llm: FakeStructuredChatModel, default_schema: str = "sales_proposal") -> ExtractionService:
        return ExtractionService(
            fetcher=DocumentFetcher(timeout=5),
            parser=DocumentParser(),
            extractor=StructuredExtractor(model="gpt-test", llm=llm),
            default_schema=default_schema,
        )
    return make
