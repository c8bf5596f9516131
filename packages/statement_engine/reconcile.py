"""
Balance reconciliation.

Checks that opening balance + sum of amounts lands on the closing
balance. A mismatch usually means rows were dropped or the statement is
not in chronological order, since the opening balance is back-computed
from the first balance-bearing row.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .models import CSVParseResult

DEFAULT_TOLERANCE = 0.05


@dataclass
class Reconciliation:
    method: str
    ok: Optional[bool]  # None when the statement has no balances
    opening: Optional[float] = None
    closing: Optional[float] = None
    total: Optional[float] = None
    expected_closing: Optional[float] = None
    delta: Optional[float] = None
    transaction_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _to_cents(value: float) -> int:
    return int(round(value * 100))


def _from_cents(cents: int) -> float:
    return round(cents / 100, 2)


def reconcile(result: CSVParseResult, tolerance: float = DEFAULT_TOLERANCE) -> Reconciliation:
    count = len(result.transactions)
    if result.opening_balance is None or result.closing_balance is None:
        return Reconciliation(method="balance_unavailable", ok=None, transaction_count=count)

    total_c = sum(_to_cents(t.amount) for t in result.transactions)
    expected_c = _to_cents(result.opening_balance) + total_c
    delta_c = _to_cents(result.closing_balance) - expected_c

    return Reconciliation(
        method="running_balance",
        ok=abs(delta_c) <= _to_cents(tolerance),
        opening=result.opening_balance,
        closing=result.closing_balance,
        total=_from_cents(total_c),
        expected_closing=_from_cents(expected_c),
        delta=_from_cents(delta_c),
        transaction_count=count,
    )
