from typing import Optional, Tuple

from .models import BankFormat


class BankFormatDetector:
    """Detects bank format from the header row."""

    # Checked top to bottom; formats share vocabulary so order matters.
    # Each entry: (format, bank keywords, header term groups). A format
    # matches if any keyword is present or every term of any group is.
    RULES: Tuple[Tuple[BankFormat, Tuple[str, ...], Tuple[Tuple[str, ...], ...]], ...] = (
        (BankFormat.DBS, ("dbs",), (("debit", "credit", "balance"),)),
        (BankFormat.OCBC, ("ocbc",), (("withdrawals", "deposits"),)),
        (BankFormat.UOB, ("uob", "transaction date"), ()),
    )

    @classmethod
    def detect(cls, header: Optional[str]) -> BankFormat:
        """Return the format for a header line; unknown headers fall back to Generic."""
        if not header:
            return BankFormat.GENERIC

        header = header.lower()

        for bank_format, keywords, term_groups in cls.RULES:
            if any(keyword in header for keyword in keywords):
                return bank_format
            if any(all(term in header for term in group) for group in term_groups):
                return bank_format

        return BankFormat.GENERIC


def detect_format(header: Optional[str]) -> BankFormat:
    return BankFormatDetector.detect(header)
