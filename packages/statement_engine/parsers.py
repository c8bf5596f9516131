"""
Per-bank statement parsers.

One parser class per BankFormat. Each maps the bank's column layout onto
ParsedTransaction and reports the running balance it sees; the shared
driver in StatementFormatParser.parse walks the rows, skips defective
ones and derives opening/closing balances.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Type

from .categorizer import categorize
from .models import BankFormat, ParsedTransaction, RowResult
from .normalizers import parse_amount, parse_date
from .tokenizer import split_csv_line

logger = logging.getLogger(__name__)


@dataclass
class ParsedStatement:
    transactions: List[ParsedTransaction] = field(default_factory=list)
    opening_balance: Optional[float] = None
    closing_balance: Optional[float] = None
    skipped_rows: int = 0


def _cell(cols: Sequence[str], index: int) -> str:
    return cols[index] if index < len(cols) else ""


def _optional_amount(cols: Sequence[str], index: int) -> Optional[float]:
    """Parse an optional column; a missing or blank cell means no value."""
    raw = _cell(cols, index)
    if not raw:
        return None
    return parse_amount(raw)


class StatementFormatParser(ABC):
    """Base class for bank statement layouts."""

    bank_format: BankFormat
    min_columns: int = 3

    @abstractmethod
    def parse_row(self, cols: List[str]) -> RowResult:
        """Map one tokenized row onto a RowResult."""

    def build_transaction(
        self, date: str, description: str, amount: float, balance: Optional[float] = None
    ) -> ParsedTransaction:
        return ParsedTransaction(
            date=date,
            description=description,
            amount=amount,
            category=categorize(description),
            balance=balance,
        )

    def parse(self, rows: Sequence[str]) -> ParsedStatement:
        """Parse the data rows (header already removed)."""
        statement = ParsedStatement()

        # Row numbers are 1-based and count the header
        for line_no, line in enumerate(rows, start=2):
            cols = split_csv_line(line)
            if len(cols) < self.min_columns:
                outcome = RowResult.skipped(
                    f"expected at least {self.min_columns} columns, got {len(cols)}"
                )
            else:
                outcome = self.parse_row(cols)

            if outcome.balance is not None:
                if statement.opening_balance is None:
                    statement.opening_balance = round(outcome.balance + outcome.reversal, 2)
                statement.closing_balance = outcome.balance

            if outcome.ok:
                statement.transactions.append(outcome.transaction)
            else:
                statement.skipped_rows += 1
                logger.debug(f"Skipping {self.bank_format.value} row {line_no}: {outcome.skip_reason}")

        return statement


class DBSParser(StatementFormatParser):
    """DBS/POSB: Date, Description, Debit, Credit, Balance."""

    bank_format = BankFormat.DBS
    min_columns = 4

    def parse_row(self, cols: List[str]) -> RowResult:
        date = parse_date(cols[0])
        if not date:
            return RowResult.skipped("unparsable date")

        # An explicit 0 is a real value; only two blank cells mean no amount
        if not cols[2] and not cols[3]:
            return RowResult.skipped("no debit or credit")

        debit = parse_amount(cols[2])
        credit = parse_amount(cols[3])
        balance = _optional_amount(cols, 4)
        amount = credit if credit > 0 else (-debit or 0.0)

        return RowResult(
            transaction=self.build_transaction(date, cols[1], amount, balance),
            balance=balance,
            reversal=debit - credit,
        )


class OCBCParser(StatementFormatParser):
    """OCBC: Date, Description, Withdrawals, Deposits, Balance."""

    bank_format = BankFormat.OCBC
    min_columns = 4

    def parse_row(self, cols: List[str]) -> RowResult:
        date = parse_date(cols[0])
        if not date:
            return RowResult.skipped("unparsable date")

        withdrawal = parse_amount(cols[2])
        deposit = parse_amount(cols[3])
        balance = _optional_amount(cols, 4)
        reversal = withdrawal - deposit

        amount = deposit if deposit > 0 else (-withdrawal or 0.0)
        if amount == 0:
            # Still a balance observation even though no money moved
            return RowResult.skipped("zero amount", balance=balance, reversal=reversal)

        return RowResult(
            transaction=self.build_transaction(date, cols[1], amount, balance),
            balance=balance,
            reversal=reversal,
        )


class UOBParser(StatementFormatParser):
    """UOB credit card: Transaction Date, Description, ..., Amount."""

    bank_format = BankFormat.UOB
    min_columns = 3

    def parse_row(self, cols: List[str]) -> RowResult:
        date = parse_date(cols[0])
        amount = parse_amount(cols[-1] or cols[2])

        if not date:
            return RowResult.skipped("unparsable date")
        if amount == 0:
            return RowResult.skipped("zero amount")

        # Card statement: every line is a charge
        return RowResult(transaction=self.build_transaction(date, cols[1], -abs(amount)))


class GenericParser(StatementFormatParser):
    """Fallback for unknown layouts; columns are located from the header."""

    bank_format = BankFormat.GENERIC
    min_columns = 3

    def __init__(self, header: str = ""):
        columns = split_csv_line(header.lower())
        self.date_index = self._find(columns, ("date",), 0)
        self.description_index = self._find(columns, ("desc", "narration", "particular"), 1)
        self.amount_index = self._find(columns, ("amount", "value"), 2)

    @staticmethod
    def _find(columns: Sequence[str], needles: Sequence[str], default: int) -> int:
        for index, column in enumerate(columns):
            if any(needle in column for needle in needles):
                return index
        return default

    def parse_row(self, cols: List[str]) -> RowResult:
        date = parse_date(_cell(cols, self.date_index))
        if not date:
            return RowResult.skipped("unparsable date")

        description = _cell(cols, self.description_index)
        amount = parse_amount(_cell(cols, self.amount_index))
        return RowResult(transaction=self.build_transaction(date, description, amount))


PARSERS: Dict[BankFormat, Type[StatementFormatParser]] = {
    BankFormat.DBS: DBSParser,
    BankFormat.OCBC: OCBCParser,
    BankFormat.UOB: UOBParser,
    BankFormat.GENERIC: GenericParser,
}


def get_parser(bank_format: BankFormat, header: str = "") -> StatementFormatParser:
    """Instantiate the parser for a detected format."""
    if bank_format is BankFormat.GENERIC:
        return GenericParser(header)
    return PARSERS[bank_format]()
