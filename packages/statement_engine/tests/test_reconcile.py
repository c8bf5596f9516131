from packages.statement_engine.parser import parse_csv
from packages.statement_engine.reconcile import reconcile


def test_reconcile_balanced_statement():
    csv_data = """Date,Description,Debit,Credit,Balance
01/01/2024,SALARY ACME PTE LTD,,3000.00,4000.00
02/01/2024,GRAB *RIDE,12.50,,3987.50
03/01/2024,NETFLIX.COM,15.98,,3971.52"""

    recon = reconcile(parse_csv(csv_data))

    assert recon.method == "running_balance"
    assert recon.ok is True
    assert recon.opening == 1000.00
    assert recon.closing == 3971.52
    assert recon.total == 2971.52
    assert recon.expected_closing == 3971.52
    assert recon.delta == 0.0
    assert recon.transaction_count == 3


def test_reconcile_flags_dropped_middle_row():
    """A skipped row between balance-bearing rows shows up as a delta."""
    csv_data = """Date,Description,Debit,Credit,Balance
01/01/2024,KOPITIAM,5.00,,995.00
bad-date,LOST ROW,100.00,,895.00
03/01/2024,KOPITIAM,5.00,,890.00"""

    recon = reconcile(parse_csv(csv_data))

    assert recon.ok is False
    assert recon.expected_closing == 990.00
    assert recon.delta == -100.00


def test_reconcile_without_balances():
    csv_data = """Transaction Date,Description,Card Member,Amount
09 Jan 2024,SHOPEE SINGAPORE,JOHN TAN,45.90"""

    recon = reconcile(parse_csv(csv_data))

    assert recon.ok is None
    assert recon.method == "balance_unavailable"
    assert recon.transaction_count == 1
    assert recon.to_dict()["delta"] is None
