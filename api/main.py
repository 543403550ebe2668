import logging
from functools import lru_cache
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from proposal_extraction_service import ExtractionRequest, ExtractionService, get_settings, list_schemas

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Proposal Extraction API",
    description="Extracts structured sales proposal data from PDF and Word documents",
    version="1.0.0"
)


class ExtractBody(BaseModel):
    """JSON body of POST /extract."""
    model_config = ConfigDict(populate_by_name=True)

    pdfpath: Optional[str] = Field(default=None, description="URL or path of the document to extract")
    docname: Optional[str] = Field(default=None, description="Display name of the document (logged only)")
    variant: Optional[str] = Field(default=None, alias="schema", description="Schema variant identifier or alias")


@lru_cache
def get_extraction_service() -> ExtractionService:
    """Build the extraction service once per process."""
    return ExtractionService.from_settings(get_settings())


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request, exc: StarletteHTTPException):
    """Answer non-POST calls before any extraction work happens."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return JSONResponse(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            content={"message": "Method not allowed"},
        )
    return await http_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request, exc: RequestValidationError):
    logger.warning("Rejected malformed request body: %s", exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request body"},
    )


@app.exception_handler(Exception)
async def internal_error_handler(request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


# Health check
@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "Proposal Extraction API"}


@app.get("/schemas")
async def get_schemas():
    """List the registered schema variants"""
    return list_schemas()


@app.post("/extract")
async def extract_proposal(
    body: ExtractBody,
    service: ExtractionService = Depends(get_extraction_service)
):
    """Extract structured proposal data from the document at pdfpath"""
    outcome = await service.handle(ExtractionRequest(
        pdfpath=body.pdfpath,
        docname=body.docname,
        schema=body.variant,
    ))
    return JSONResponse(status_code=outcome.status_code, content=outcome.body)


if __name__ == "__main__":
    logger.info("Server is running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
