"""
Statement summary - cashflow totals and category breakdown.

Money is summed in integer cents so totals match the statement to the
cent. Transfers are cash movement, not spending, and are left out of the
category breakdown.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from .models import CSVParseResult, Category

COLUMNS = ["date", "description", "amount", "category", "currency", "balance"]
TOP_CATEGORY_COUNT = 3
EXCLUDED_FROM_SPENDING = {Category.TRANSFER.value}


@dataclass
class StatementSummary:
    """Aggregated view of one parsed statement."""

    transaction_count: int = 0
    inflow: float = 0.0
    outflow: float = 0.0
    net_cashflow: float = 0.0
    savings_rate: Optional[float] = None  # percent of inflow kept
    category_totals: Dict[str, float] = field(default_factory=dict)
    top_categories: List[Dict[str, Any]] = field(default_factory=list)
    period_start: Optional[str] = None
    period_end: Optional[str] = None
    balance_coverage: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def to_dataframe(result: CSVParseResult) -> pd.DataFrame:
    """Convert parsed transactions to a DataFrame with a datetime date column."""
    df = pd.DataFrame([t.to_dict() for t in result.transactions], columns=COLUMNS)
    df["date"] = pd.to_datetime(df["date"], format="%Y-%m-%d")
    return df


def _from_cents(cents: int) -> float:
    return round(int(cents) / 100, 2)


def summarize(result: CSVParseResult) -> StatementSummary:
    """Compute inflow, outflow, net cashflow and spending per category."""
    df = to_dataframe(result)
    if df.empty:
        return StatementSummary()

    df["cents"] = (df["amount"] * 100).round().astype("int64")

    inflow_c = int(df.loc[df["cents"] > 0, "cents"].sum())
    outflow_c = int(-df.loc[df["cents"] < 0, "cents"].sum())
    net_c = inflow_c - outflow_c

    spending = df[(df["cents"] < 0) & ~df["category"].isin(EXCLUDED_FROM_SPENDING)]
    totals = (
        spending.groupby("category")["cents"]
        .sum()
        .abs()
        .sort_values(ascending=False, kind="mergesort")
    )
    category_totals = {name: _from_cents(cents) for name, cents in totals.items()}

    return StatementSummary(
        transaction_count=len(df),
        inflow=_from_cents(inflow_c),
        outflow=_from_cents(outflow_c),
        net_cashflow=_from_cents(net_c),
        savings_rate=round(net_c / inflow_c * 100, 2) if inflow_c > 0 else None,
        category_totals=category_totals,
        top_categories=[
            {"name": name, "amount": amount}
            for name, amount in list(category_totals.items())[:TOP_CATEGORY_COUNT]
        ],
        period_start=df["date"].min().date().isoformat(),
        period_end=df["date"].max().date().isoformat(),
        balance_coverage=round(float(df["balance"].notna().mean()), 2),
    )
