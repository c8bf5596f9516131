"""
Statement Ingestion Engine

Bank statement CSV parsing, normalization and categorization.
"""

__version__ = "0.1.0"

from .categorizer import CATEGORY_RULES, categorize
from .detector import BankFormatDetector, detect_format
from .models import BankFormat, Category, CSVParseResult, ParsedTransaction
from .normalizers import parse_amount, parse_date
from .parser import CSVStatementParser, StatementParseError, is_csv_file, parse_csv
from .reconcile import Reconciliation, reconcile
from .summary import StatementSummary, summarize, to_dataframe
from .tokenizer import split_csv_line

__all__ = [
    "BankFormat",
    "BankFormatDetector",
    "CATEGORY_RULES",
    "Category",
    "CSVParseResult",
    "CSVStatementParser",
    "ParsedTransaction",
    "Reconciliation",
    "StatementParseError",
    "StatementSummary",
    "categorize",
    "detect_format",
    "is_csv_file",
    "parse_amount",
    "parse_csv",
    "parse_date",
    "reconcile",
    "split_csv_line",
    "summarize",
    "to_dataframe",
]
