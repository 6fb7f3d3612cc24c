"""Merchant/date/total extraction helpers."""

import re
from collections.abc import Callable, Sequence
from datetime import date
from decimal import Decimal

from dateutil import parser as date_parser

from struk.domain.receipt import UNKNOWN_MERCHANT

from ..amounts import normalize_amount
from ..date_utils import Clock, fallback_receipt_date, normalize_two_digit_year
from .common import (
    MERCHANT_HEADER_LINES,
    MERCHANT_KEYWORDS,
    MERCHANT_NAME_MAX_LENGTH,
    MERCHANT_NAME_MIN_LENGTH,
    _looks_like_total_line,
    contains_any,
)

INDONESIAN_MONTHS = {
    "januari": 1,
    "februari": 2,
    "maret": 3,
    "april": 4,
    "mei": 5,
    "juni": 6,
    "juli": 7,
    "agustus": 8,
    "september": 9,
    "oktober": 10,
    "november": 11,
    "desember": 12,
}

# Numeric patterns are digit-bounded so "2024-01-15" is not read as "24-01-15".
NUMERIC_DMY = re.compile(r"(?<!\d)(\d{1,2})[/-](\d{1,2})[/-](\d{2,4})(?!\d)")
INDONESIAN_MONTH_DMY = re.compile(
    r"(?<!\d)(\d{1,2})\s+(" + "|".join(INDONESIAN_MONTHS) + r")\s+(\d{2,4})(?!\d)",
    re.IGNORECASE,
)
ENGLISH_MONTH_DMY = re.compile(
    r"(?<!\d)(\d{1,2})\s+((?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*)\s+(\d{2,4})(?!\d)",
    re.IGNORECASE,
)
ISO_YMD = re.compile(r"(?<!\d)(\d{4})[/-](\d{1,2})[/-](\d{1,2})(?!\d)")
NUMERIC_DMY_TIME = re.compile(r"(?<!\d)(\d{1,2})[/-](\d{1,2})[/-](\d{2,4})\s+(\d{1,2}):(\d{2})")

# Number following a total label, e.g. "TOTAL BELANJA: 67,900"
TOTAL_LABEL_AMOUNT = re.compile(r"(?:total(?:\s+belanja)?|jumlah|rp)[:\s]*([\d.,]+)", re.IGNORECASE)


def _is_plausible_merchant_name(line: str) -> bool:
    """Business names are short and carry no digits."""
    return MERCHANT_NAME_MIN_LENGTH < len(line) < MERCHANT_NAME_MAX_LENGTH and not re.search(r"\d", line)


def extract_merchant(lines: Sequence[str], merchant_keywords: Sequence[str] | None = None) -> str:
    """
    Extract the merchant name from the receipt header.

    Only the first three lines are considered. A line wins if it contains a
    merchant keyword or looks like a business name; otherwise the first line
    is used.
    """
    if not lines:
        return UNKNOWN_MERCHANT

    keywords = tuple(k.lower() for k in (merchant_keywords or ())) + MERCHANT_KEYWORDS
    for line in lines[:MERCHANT_HEADER_LINES]:
        if contains_any(line, keywords) or _is_plausible_merchant_name(line):
            return line
    return lines[0]


def _parse_with_dateutil(text: str, **kwargs: bool) -> date | None:
    try:
        return date_parser.parse(text, **kwargs).date()
    except (ValueError, OverflowError):
        return None


def _date_from_numeric(match: re.Match[str]) -> date | None:
    return _parse_with_dateutil(match.group(0), dayfirst=True)


def _date_from_indonesian_month(match: re.Match[str]) -> date | None:
    day, month_name, year = match.groups()
    try:
        return date(normalize_two_digit_year(int(year)), INDONESIAN_MONTHS[month_name.lower()], int(day))
    except ValueError:
        return None


def _date_from_english_month(match: re.Match[str]) -> date | None:
    return _parse_with_dateutil(match.group(0))


def _date_from_iso(match: re.Match[str]) -> date | None:
    return _parse_with_dateutil(match.group(0), yearfirst=True)


# Tried in order on every line; first valid date wins.
DATE_STRATEGIES: tuple[tuple[re.Pattern[str], Callable[[re.Match[str]], date | None]], ...] = (
    (NUMERIC_DMY, _date_from_numeric),
    (INDONESIAN_MONTH_DMY, _date_from_indonesian_month),
    (ENGLISH_MONTH_DMY, _date_from_english_month),
    (ISO_YMD, _date_from_iso),
    (NUMERIC_DMY_TIME, _date_from_numeric),
)


def find_receipt_date(lines: Sequence[str]) -> date | None:
    """Return the first valid date found scanning lines top to bottom, or None."""
    for line in lines:
        for pattern, parse in DATE_STRATEGIES:
            match = pattern.search(line)
            if not match:
                continue
            parsed = parse(match)
            if parsed is not None:
                return parsed
    return None


def extract_date(lines: Sequence[str], today: Clock | None = None) -> date:
    """Extract the transaction date, falling back to the current date."""
    found = find_receipt_date(lines)
    if found is None:
        return fallback_receipt_date(today)
    return found


def _total_from_keyword_lines(lines: Sequence[str]) -> Decimal | None:
    """Totals are usually printed near the bottom, so scan in reverse."""
    for line in reversed(lines):
        if _looks_like_total_line(line):
            amount = normalize_amount(line)
            if amount > 0:
                return amount
    return None


def _total_from_labelled_amount(lines: Sequence[str]) -> Decimal | None:
    """Handle layouts like "TOTAL BELANJA: 67,900" where the line has extra digits."""
    for line in lines:
        lowered = line.lower()
        if "total belanja" not in lowered and "total:" not in lowered:
            continue
        match = TOTAL_LABEL_AMOUNT.search(line)
        if match:
            amount = normalize_amount(match.group(1))
            if amount > 0:
                return amount
    return None


def _total_from_largest_amount(lines: Sequence[str]) -> Decimal | None:
    """Last resort: the biggest number on the receipt is probably the total."""
    largest = max((normalize_amount(line) for line in lines), default=Decimal(0))
    return largest if largest > 0 else None


TOTAL_STRATEGIES: tuple[Callable[[Sequence[str]], Decimal | None], ...] = (
    _total_from_keyword_lines,
    _total_from_labelled_amount,
    _total_from_largest_amount,
)


def extract_total(lines: Sequence[str]) -> Decimal:
    """Extract the transaction total; 0 when nothing matches."""
    for strategy in TOTAL_STRATEGIES:
        amount = strategy(lines)
        if amount is not None:
            return amount
    return Decimal(0)
