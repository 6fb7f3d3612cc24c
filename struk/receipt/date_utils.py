"""Date helpers for receipt parsing."""

from collections.abc import Callable
from datetime import date

Clock = Callable[[], date]


def fallback_receipt_date(today: Clock | None = None) -> date:
    """Return the date used when no receipt date could be parsed."""
    return (today or date.today)()


def normalize_two_digit_year(year: int) -> int:
    """Map two-digit years such as 24 onto 2024."""
    return year + 2000 if year < 100 else year
