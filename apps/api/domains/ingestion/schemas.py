"""Pydantic schemas for the ingestion domain."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionOut(BaseModel):
    """A parsed, categorized transaction."""

    date: str
    description: str
    amount: float
    category: str = "Other"
    currency: str = "SGD"
    balance: Optional[float] = None


class CategoryTotal(BaseModel):
    name: str
    amount: float


class SummaryOut(BaseModel):
    """Cashflow totals for the statement."""

    transaction_count: int = 0
    inflow: float = 0.0
    outflow: float = 0.0
    net_cashflow: float = 0.0
    savings_rate: Optional[float] = None
    category_totals: dict[str, float] = Field(default_factory=dict)
    top_categories: list[CategoryTotal] = Field(default_factory=list)
    period_start: Optional[str] = None
    period_end: Optional[str] = None
    balance_coverage: float = 0.0


class ReconciliationOut(BaseModel):
    method: str
    ok: Optional[bool] = None
    opening: Optional[float] = None
    closing: Optional[float] = None
    total: Optional[float] = None
    expected_closing: Optional[float] = None
    delta: Optional[float] = None
    transaction_count: int = 0


class IngestTextRequest(BaseModel):
    """Statement content that the caller has already decoded."""

    content: str
    filename: str = "statement.csv"


class IngestResponse(BaseModel):
    """Response from statement ingestion."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    transactions: list[TransactionOut]
    bank_detected: Optional[str] = Field(default=None, alias="bankDetected")
    opening_balance: Optional[float] = None
    closing_balance: Optional[float] = None
    count: int
    summary: SummaryOut
    reconciliation: ReconciliationOut
