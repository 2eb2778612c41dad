"""FastAPI application for the Legal Document Analysis API.

Provides the document upload/analysis endpoint and a health check.
Every error response carries a ``{"error": message}`` body.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.analysis.analyzer import (
    DocumentAnalyzer,
    NoExtractableTextError,
    build_analyzer,
)
from src.utils.config import load_config
from src.utils.logger import get_logger

from .schemas import AnalysisResponse, ErrorResponse, HealthResponse

logger = get_logger(__name__)

VERSION = "1.0.0"
_DEFAULT_MIME_TYPE = "application/octet-stream"
NO_FILE_MESSAGE = "No file uploaded"

app = FastAPI(
    title="Legal Document Analysis API",
    description="Summarize legal documents and assess their key terms and risks",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors with the ``{"error": ...}`` envelope."""
    if exc.status_code == 405:
        message = f"Method {request.method} not allowed"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject form data the upload route cannot bind.

    The only bound parameter is the ``file`` part, so a non-file value under
    that name is treated the same as a missing upload.
    """
    logger.info("Rejected malformed request: %s", exc.errors())
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=NO_FILE_MESSAGE).model_dump(),
    )


@lru_cache(maxsize=1)
def _get_analyzer() -> DocumentAnalyzer:
    """Build the analysis pipeline once per process.

    Failed builds are not cached, so a fixed configuration is picked up on
    the next request.
    """
    return build_analyzer(load_config())


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return service health and configuration status."""
    config = load_config()
    return HealthResponse(
        status="healthy",
        version=VERSION,
        ocr_configured=config.google.is_complete,
        generation_model=config.generation.model_name,
    )


@app.post(
    "/api/upload",
    response_model=AnalysisResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def upload_document(
    file: Annotated[UploadFile | None, File()] = None,
) -> AnalysisResponse:
    """Extract text from an uploaded document and analyze it.

    Args:
        file: Uploaded document (any type the Document AI processor accepts).

    Returns:
        Extracted text with summary, key terms, and risk assessment.
    """
    if file is None:
        raise HTTPException(status_code=400, detail=NO_FILE_MESSAGE)

    try:
        analyzer = _get_analyzer()
        content = await file.read()
        mime_type = file.content_type or _DEFAULT_MIME_TYPE
        logger.info(
            "Analyzing upload %s (%s, %d bytes)",
            file.filename or "document",
            mime_type,
            len(content),
        )
        result = await run_in_threadpool(analyzer.analyze, content, mime_type)

    except NoExtractableTextError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Upload & analyze failed")
        raise HTTPException(
            status_code=500, detail="Failed to analyze document"
        ) from exc

    return AnalysisResponse(**result.to_dict())
