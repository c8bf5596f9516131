"""
CSV Statement Parser - ingestion entry point for Singapore bank exports.

Supports: DBS/POSB, OCBC, UOB and a generic fallback layout.
Features: header-based format detection, date and amount normalization,
          opening/closing balance reconstruction, keyword categorization.

parse_csv() never raises: structural problems come back as a failed
CSVParseResult with an error message.
"""

import logging
import re
from typing import List, Optional

from .detector import BankFormatDetector
from .models import BankFormat, CSVParseResult
from .parsers import get_parser

logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r"\r?\n")


class StatementParseError(ValueError):
    """The file as a whole cannot be parsed."""


class CSVStatementParser:
    """
    Parser for one CSV statement.

    The bank format is detected once from the header and kept for the
    whole parse.
    """

    def __init__(self, content: str):
        self.content = content or ""
        self.bank_format: Optional[BankFormat] = None

    def _split_lines(self) -> List[str]:
        lines = _LINE_SPLIT_RE.split(self.content.strip())
        if len(lines) < 2:
            raise StatementParseError("CSV has no data rows")
        return lines

    def parse(self) -> CSVParseResult:
        """
        Parse the statement.

        Returns:
            CSVParseResult; success is False when no row could be parsed.

        Raises:
            StatementParseError: if the content has no data rows.
        """
        lines = self._split_lines()
        header = lines[0]

        self.bank_format = BankFormatDetector.detect(header)
        logger.info(f"Detected bank format: {self.bank_format.value}")

        statement = get_parser(self.bank_format, header).parse(lines[1:])

        if not statement.transactions:
            logger.warning(
                f"No valid transactions in {self.bank_format.value} statement "
                f"({statement.skipped_rows} rows skipped)"
            )
            return CSVParseResult(
                success=False,
                bank_detected=self.bank_format,
                error=f"No valid transactions found in {self.bank_format.value} statement",
            )

        logger.info(
            f"Parsed {len(statement.transactions)} transactions, "
            f"skipped {statement.skipped_rows} rows"
        )
        return CSVParseResult(
            success=True,
            transactions=statement.transactions,
            bank_detected=self.bank_format,
            opening_balance=statement.opening_balance,
            closing_balance=statement.closing_balance,
        )


def parse_csv(content: str) -> CSVParseResult:
    """
    Parse a CSV bank statement.

    Args:
        content: Full file content, already decoded to text.

    Returns:
        CSVParseResult. Never raises.
    """
    parser = CSVStatementParser(content)
    try:
        return parser.parse()
    except Exception as e:
        logger.warning(f"Statement parse failed: {e}")
        return CSVParseResult.failure(
            str(e) or "Unknown parsing error", bank_detected=parser.bank_format
        )


def is_csv_file(file_name: Optional[str], mime_type: Optional[str] = None) -> bool:
    """Check whether an upload looks like a CSV file."""
    extension = (file_name or "").lower().rsplit(".", 1)[-1]
    mime = (mime_type or "").lower()
    return extension == "csv" or "csv" in mime or "text/plain" in mime
