"""Ingestion service — decode, parse, summarize and reconcile a statement.

The statement engine never raises; a failed parse is turned into a 422
problem here so the client sees the engine's error message verbatim.
"""

import structlog

from apps.api.core.errors import ValidationError
from apps.api.domains.ingestion.schemas import (
    IngestResponse,
    ReconciliationOut,
    SummaryOut,
    TransactionOut,
)
from packages.statement_engine import parse_csv, reconcile, summarize

logger = structlog.get_logger()


def decode_statement(file_bytes: bytes) -> str:
    """Decode uploaded bytes as UTF-8 (BOM tolerated), falling back to latin-1.

    Older bank exports are frequently latin-1 encoded.
    """
    try:
        return file_bytes.decode("utf-8-sig")
    except UnicodeDecodeError:
        return file_bytes.decode("latin-1")


def ingest_statement(content: str, filename: str = "") -> IngestResponse:
    """Parse statement text and build the API response.

    Raises:
        ValidationError: if no transaction could be extracted.
    """
    result = parse_csv(content)
    bank = result.bank_detected.value if result.bank_detected else None

    if not result.success:
        logger.warning("statement_parse_failed", error=result.error, bank=bank, filename=filename)
        raise ValidationError(result.error or "Could not parse statement")

    summary = summarize(result)
    recon = reconcile(result)
    if recon.ok is False:
        logger.warning("balance_mismatch", delta=recon.delta, bank=bank, filename=filename)

    logger.info("statement_parsed", bank=bank, count=len(result.transactions), filename=filename)

    body = result.to_dict()
    return IngestResponse(
        success=True,
        transactions=[TransactionOut(**tx) for tx in body["transactions"]],
        bank_detected=bank,
        opening_balance=result.opening_balance,
        closing_balance=result.closing_balance,
        count=len(result.transactions),
        summary=SummaryOut(**summary.to_dict()),
        reconciliation=ReconciliationOut(**recon.to_dict()),
    )
