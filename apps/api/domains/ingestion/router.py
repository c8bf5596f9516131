"""Ingestion router — CSV statement upload endpoints."""

import structlog
from fastapi import APIRouter, Depends, File, UploadFile

from apps.api.core.config import Settings, get_settings
from apps.api.core.errors import PayloadTooLargeError, UnsupportedMediaError
from apps.api.domains.ingestion.schemas import IngestResponse, IngestTextRequest
from apps.api.domains.ingestion.service import decode_statement, ingest_statement
from packages.statement_engine import is_csv_file

router = APIRouter(prefix="/ingest", tags=["ingestion"])
logger = structlog.get_logger()


def _check_size(size: int, settings: Settings) -> None:
    if size > settings.MAX_UPLOAD_BYTES:
        limit_mb = settings.MAX_UPLOAD_BYTES / (1024 * 1024)
        raise PayloadTooLargeError(f"File too large (max {limit_mb:g}MB)")


@router.post("/csv", response_model=IngestResponse)
async def ingest_csv(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_settings),
):
    """Accept a CSV bank statement and return parsed transactions."""
    filename = file.filename or ""
    if not is_csv_file(filename, file.content_type):
        raise UnsupportedMediaError("Unsupported file type. Accepted: .csv")

    contents = await file.read()
    _check_size(len(contents), settings)

    response = ingest_statement(decode_statement(contents), filename)
    logger.info("ingest_complete", count=response.count, bank=response.bank_detected, filename=filename)
    return response


@router.post("/csv/text", response_model=IngestResponse)
async def ingest_csv_text(
    request: IngestTextRequest,
    settings: Settings = Depends(get_settings),
):
    """Same as /csv, for callers that already hold the decoded text."""
    _check_size(len(request.content.encode("utf-8")), settings)

    response = ingest_statement(request.content, request.filename)
    logger.info("ingest_complete", count=response.count, bank=response.bank_detected, filename=request.filename)
    return response
