"""
Canonical data model for parsed bank statements.

Every bank format converges on ParsedTransaction; CSVParseResult is the
only thing the rest of the app reads back from the engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

HOME_CURRENCY = "SGD"


class BankFormat(str, Enum):
    """Column layouts the format detector can select."""

    DBS = "DBS"
    OCBC = "OCBC"
    UOB = "UOB"
    GENERIC = "Generic"


class Category(str, Enum):
    """Spending categories, in matching priority order."""

    FOOD = "Food"
    TRANSPORT = "Transport"
    UTILITIES = "Utilities"
    SUBSCRIPTION = "Subscription"
    SHOPPING = "Shopping"
    INCOME = "Income"
    TRANSFER = "Transfer"
    OTHER = "Other"


@dataclass
class ParsedTransaction:
    """Standardized transaction structure."""

    date: str  # YYYY-MM-DD
    description: str
    amount: float  # negative = outflow, positive = inflow
    category: Category
    currency: str = HOME_CURRENCY
    balance: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "description": self.description,
            "amount": self.amount,
            "category": self.category.value,
            "currency": self.currency,
            "balance": self.balance,
        }


@dataclass(frozen=True)
class RowResult:
    """
    Outcome of parsing a single data row.

    A row either yields a transaction or a skip reason. Independently of
    that, it may carry a balance observation: the running balance after the
    row and the reversal that undoes the row's effect on it.
    """

    transaction: Optional[ParsedTransaction] = None
    skip_reason: str = ""
    balance: Optional[float] = None
    reversal: float = 0.0

    @property
    def ok(self) -> bool:
        return self.transaction is not None

    @classmethod
    def skipped(cls, reason: str, balance: Optional[float] = None, reversal: float = 0.0) -> "RowResult":
        return cls(skip_reason=reason, balance=balance, reversal=reversal)


@dataclass
class CSVParseResult:
    """The engine's output contract."""

    success: bool
    transactions: List[ParsedTransaction] = field(default_factory=list)
    bank_detected: Optional[BankFormat] = None
    opening_balance: Optional[float] = None
    closing_balance: Optional[float] = None
    error: Optional[str] = None

    @classmethod
    def failure(cls, error: str, bank_detected: Optional[BankFormat] = None) -> "CSVParseResult":
        return cls(success=False, bank_detected=bank_detected, error=error)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire shape consumed by the summary pipeline."""
        body = {
            "success": self.success,
            "transactions": [t.to_dict() for t in self.transactions],
            "bankDetected": self.bank_detected.value if self.bank_detected else None,
            "opening_balance": self.opening_balance,
            "closing_balance": self.closing_balance,
        }
        if self.error is not None:
            body["error"] = self.error
        return body
