import pandas as pd
import pytest

from packages.statement_engine.models import CSVParseResult
from packages.statement_engine.parser import parse_csv
from packages.statement_engine.summary import summarize, to_dataframe

CSV_SAMPLE = """Date,Description,Debit,Credit,Balance
01/01/2024,SALARY ACME PTE LTD,,3000.00,4000.00
02/01/2024,GRAB *RIDE,12.50,,3987.50
03/01/2024,NETFLIX.COM,15.98,,3971.52
04/01/2024,PAYNOW TO MARY,100.00,,3871.52"""


@pytest.fixture
def result():
    return parse_csv(CSV_SAMPLE)


def test_to_dataframe_columns(result):
    df = to_dataframe(result)

    assert list(df.columns) == ["date", "description", "amount", "category", "currency", "balance"]
    assert len(df) == 4
    assert pd.api.types.is_datetime64_any_dtype(df["date"])


def test_summary_totals(result):
    summary = summarize(result)

    assert summary.transaction_count == 4
    assert summary.inflow == 3000.00
    assert summary.outflow == 128.48
    assert summary.net_cashflow == 2871.52
    assert summary.savings_rate == pytest.approx(95.72)
    assert summary.period_start == "2024-01-01"
    assert summary.period_end == "2024-01-04"
    assert summary.balance_coverage == 1.0


def test_transfers_are_not_spending(result):
    summary = summarize(result)

    assert summary.category_totals == {"Subscription": 15.98, "Transport": 12.50}
    assert summary.top_categories[0] == {"name": "Subscription", "amount": 15.98}


def test_empty_result_summary():
    summary = summarize(CSVParseResult(success=False))

    assert summary.transaction_count == 0
    assert summary.inflow == 0.0
    assert summary.savings_rate is None
    assert summary.category_totals == {}
    assert summary.to_dict()["period_start"] is None


def test_no_inflow_has_no_savings_rate():
    csv_data = """Transaction Date,Description,Card Member,Amount
09 Jan 2024,SHOPEE SINGAPORE,JOHN TAN,45.90"""

    summary = summarize(parse_csv(csv_data))

    assert summary.outflow == 45.90
    assert summary.savings_rate is None
    assert summary.balance_coverage == 0.0


def test_overflowing_amount_is_summarized_as_zero():
    csv_data = "Date,Description,Amount\n09/01/2024,X," + "9" * 400

    summary = summarize(parse_csv(csv_data))

    assert summary.transaction_count == 1
    assert summary.inflow == 0.0
    assert summary.outflow == 0.0
