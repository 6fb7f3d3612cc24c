"""Currency amount normalization for Indonesian/English receipt text.

Printed receipts mix "50.000" (dot as thousands separator), "50,00"
(comma as decimal point), "50,000" (comma as thousands separator) and the
"50rb"/"2jt" shorthand. The length of the final digit group decides
whether a separator is decimal or thousands.
"""

import re
from decimal import Decimal, InvalidOperation

# "rb" = ribu (thousand), "jt" = juta (million)
SUFFIX_MULTIPLIERS = (
    ("rb", re.compile(r"(\d+(?:[.,]\d+)?)\s*rb"), Decimal(1_000)),
    ("jt", re.compile(r"(\d+(?:[.,]\d+)?)\s*jt"), Decimal(1_000_000)),
)

NON_NUMERIC = re.compile(r"[^\d.,]")
SEPARATOR_RUN = re.compile(r"[.,]+")

# Final group of this length or shorter is read as decimals.
MAX_DECIMAL_DIGITS = 2


def _to_decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        return Decimal(0)


def _parse_suffixed(text: str) -> Decimal | None:
    lowered = text.lower()
    for token, pattern, multiplier in SUFFIX_MULTIPLIERS:
        if token not in lowered:
            continue
        match = pattern.search(lowered)
        if match:
            return _to_decimal(match.group(1).replace(",", ".", 1)) * multiplier
    return None


def normalize_amount(fragment: str) -> Decimal:
    """
    Convert a numeric-looking text fragment into an amount.

    Never raises; returns ``Decimal(0)`` for anything unparseable.

    Examples:
        "50.000" -> 50000, "50,00" -> 50.00, "50.000,00" -> 50000.00,
        "50rb" -> 50000, "2jt" -> 2000000, "abc" -> 0
    """
    if not fragment:
        return Decimal(0)

    suffixed = _parse_suffixed(fragment)
    if suffixed is not None:
        return suffixed

    cleaned = NON_NUMERIC.sub("", fragment)
    parts = SEPARATOR_RUN.split(cleaned)

    if len(parts) == 1:
        return _to_decimal(parts[0])
    if len(parts) == 2:
        if len(parts[1]) <= MAX_DECIMAL_DIGITS:
            return _to_decimal(f"{parts[0]}.{parts[1]}")
        return _to_decimal(f"{parts[0]}{parts[1]}")
    if len(parts) == 3:
        # Indonesian long form, e.g. "50.000,00"
        if len(parts[2]) <= MAX_DECIMAL_DIGITS:
            return _to_decimal(f"{parts[0]}{parts[1]}.{parts[2]}")
        return _to_decimal(f"{parts[0]}{parts[1]}{parts[2]}")
    return Decimal(0)
