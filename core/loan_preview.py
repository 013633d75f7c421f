"""
Loan figures shown on the client dashboard.

The loan service does not expose per-client loan data yet, so the
dashboard renders this fixed preview alongside the live client record.
"""

from datetime import date

from core.date_utils import add_months, format_display_date
from schemas.dashboard import ActivityItem, LoanSummary

CURRENT_LOAN = 150000
EMI_AMOUNT = 15000
DUE_DATE = date(2025, 5, 15)


def format_rupees(amount: int | float, decimals: int = 0) -> str:
    """
    Examples:
        >>> format_rupees(150000)
        'Rs 150,000'
        >>> format_rupees(15000, decimals=2)
        'Rs 15,000.00'
    """
    return f"Rs {amount:,.{decimals}f}"


def get_loan_summary() -> LoanSummary:
    return LoanSummary(
        current_loan=CURRENT_LOAN,
        current_loan_display=format_rupees(CURRENT_LOAN),
        emi_amount=EMI_AMOUNT,
        emi_amount_display=format_rupees(EMI_AMOUNT),
        due_date=format_display_date(DUE_DATE),
        next_due_date=format_display_date(add_months(DUE_DATE, 1)),
    )


def _activity(type_: str, status: str, amount: int, on: date) -> ActivityItem:
    return ActivityItem(
        type=type_,
        status=status,
        amount=format_rupees(amount, decimals=2),
        date=format_display_date(on),
        tone="danger" if status == "Due" else "success",
    )


def get_recent_activity() -> list[ActivityItem]:
    """Newest first: the EMI now due, the last one paid, the disbursement."""
    return [
        _activity("EMI Payment", "Due", EMI_AMOUNT, DUE_DATE),
        _activity("EMI Payment", "Paid", EMI_AMOUNT, add_months(DUE_DATE, -1)),
        _activity("Loan Disbursed", "Completed", CURRENT_LOAN, add_months(DUE_DATE, -2)),
    ]
