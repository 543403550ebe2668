"""Tests for the Proposal Extraction API endpoints."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.main import app, get_extraction_service


class SpyService:
    """Records whether the pipeline was reached."""

    def __init__(self):
        self.requests = []

    async def handle(self, request):
        self.requests.append(request)
        raise AssertionError("pipeline should not run")


@pytest.fixture
def client(make_service, fake_llm) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_extraction_service] = lambda: make_service(fake_llm)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def spy_client() -> Generator[tuple, None, None]:
    spy = SpyService()
    app.dependency_overrides[get_extraction_service] = lambda: spy
    with TestClient(app) as test_client:
        yield test_client, spy
    app.dependency_overrides.clear()


class TestHealthEndpoints:
    def test_health_endpoint(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_schemas_endpoint(self, client: TestClient):
        response = client.get("/schemas")
        assert response.status_code == 200
        names = [entry["name"] for entry in response.json()]
        assert "sales_proposal" in names
        assert "narrative_proposal_es" in names


class TestExtractEndpoint:
    """Tests for POST /extract."""

    def test_pdf_returns_every_required_field(self, client: TestClient, write_document, sample_pdf_bytes):
        response = client.post("/extract", json={"pdfpath": write_document("proposal.pdf", sample_pdf_bytes)})

        assert response.status_code == 200
        data = response.json()
        for field in ("customer", "industry", "objectives", "scope", "technologies", "solutionSummary"):
            assert field in data

    def test_docx_bytes_succeed(self, client: TestClient, write_document, sample_docx_bytes):
        response = client.post("/extract", json={
            "pdfpath": write_document("proposal.docx", sample_docx_bytes),
            "docname": "Acme proposal",
        })

        assert response.status_code == 200
        assert response.json()["customer"] == "Acme Insurance"

    def test_unparseable_document_returns_generic_500(self, client: TestClient, write_document, invalid_file_bytes):
        response = client.post("/extract", json={"pdfpath": write_document("notes.txt", invalid_file_bytes)})

        assert response.status_code == 500
        assert response.json() == {"message": "Internal Server Error"}

    def test_textless_document_returns_400(self, client: TestClient, write_document, empty_pdf_bytes):
        response = client.post("/extract", json={"pdfpath": write_document("blank.pdf", empty_pdf_bytes)})

        assert response.status_code == 400
        assert response.json() == {"message": "No documents found"}

    def test_missing_pdfpath_returns_400(self, client: TestClient):
        response = client.post("/extract", json={"docname": "orphan"})

        assert response.status_code == 400
        assert response.json() == {"message": "Missing document location"}

    def test_non_object_body_returns_400(self, client: TestClient):
        response = client.post("/extract", json=["not", "an", "object"])

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid request body"}

    def test_schema_key_selects_variant(self, client: TestClient, write_document, sample_pdf_bytes):
        response = client.post("/extract", json={
            "pdfpath": write_document("proposal.pdf", sample_pdf_bytes),
            "schema": "unknown",
        })

        assert response.status_code == 400
        assert response.json() == {"message": "Unknown schema variant"}


class TestMethodNotAllowed:
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH", "OPTIONS"])
    def test_non_post_is_rejected_before_pipeline(self, spy_client, method):
        client, spy = spy_client
        response = client.request(method, "/extract")

        assert response.status_code == 405
        assert response.json() == {"message": "Method not allowed"}
        assert spy.requests == []

    def test_unknown_route_keeps_default_404(self, spy_client):
        client, _ = spy_client
        response = client.get("/nowhere")

        assert response.status_code == 404

    def test_cors_preflight_is_rejected_before_pipeline(self, spy_client):
        client, spy = spy_client
        response = client.options("/extract", headers={
            "Origin": "https://portal.example.com",
            "Access-Control-Request-Method": "POST",
        })

        assert response.status_code == 405
        assert response.json() == {"message": "Method not allowed"}
        assert spy.requests == []
