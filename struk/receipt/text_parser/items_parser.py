"""Text-line based receipt item extraction."""

import re
from collections.abc import Sequence
from decimal import Decimal

from struk.domain.receipt import LineItem

from ..amounts import normalize_amount
from .common import (
    NON_ITEM_KEYWORDS,
    _looks_like_address_line,
    _looks_like_timestamp_line,
    _looks_like_total_line,
    _strip_numeric_tail,
    contains_any,
)

MIN_ITEM_LINE_LENGTH = 3  # exclusive

# POS layout: "<name> <qty> <unit price> <line total>", e.g. "PC KELAPA JRKAND ICE 1 25000 25,000"
STRUCTURED_ITEM = re.compile(r"^(.+?)\s+(\d+)\s+(\d+)\s+([\d.,]+)$")
# Quantity suffix layout: "<name> <unit price> x<qty>", e.g. "Nasi Putih 10.000 x2"
QUANTITY_SUFFIX_ITEM = re.compile(r"^(.+?)\s+(\d[\d.,]*)\s*[xX]\s*(\d+)$")
# Trailing whitespace-separated price token, optionally with the rb/jt shorthand
PRICE_TAIL = re.compile(r"(?:^|\s)(\d[\d.,]*(?:\s*(?:rb|jt)\b)?)\s*$", re.IGNORECASE)


def _line_amount(line: str) -> Decimal:
    """
    Return the price printed on an item line.

    Prefers the trailing price token so digits inside the item name
    ("Susu Ultra 1L", "Air Mineral 600ml") do not leak into the amount.
    """
    suffix = QUANTITY_SUFFIX_ITEM.match(line)
    if suffix:
        return normalize_amount(suffix.group(2))
    tail = PRICE_TAIL.search(line)
    if tail:
        return normalize_amount(tail.group(1))
    return normalize_amount(line)


def _is_item_candidate(line: str, amount: Decimal, total: Decimal) -> bool:
    # Items priced at or above the total are dropped even when the total is wrong.
    if not (0 < amount < total) or len(line) <= MIN_ITEM_LINE_LENGTH:
        return False
    if _looks_like_total_line(line) or contains_any(line, NON_ITEM_KEYWORDS):
        return False
    return not (_looks_like_address_line(line) or _looks_like_timestamp_line(line))


def _parse_item_line(line: str, amount: Decimal) -> LineItem:
    structured = STRUCTURED_ITEM.match(line)
    if structured:
        # The extended price (last column) is ignored; quantity x unit price carries it.
        return LineItem(
            name=structured.group(1).strip(),
            price=normalize_amount(structured.group(3)),
            quantity=int(structured.group(2)) or 1,
        )

    suffix = QUANTITY_SUFFIX_ITEM.match(line)
    if suffix:
        return LineItem(
            name=suffix.group(1).strip(),
            price=amount,
            quantity=int(suffix.group(3)) or 1,
        )

    return LineItem(name=_strip_numeric_tail(PRICE_TAIL.sub("", line)), price=amount, quantity=1)


def extract_items(lines: Sequence[str], total: Decimal) -> list[LineItem]:
    """
    Extract line items from receipt body lines.

    Total, discount, tax, cash, savings and change lines are skipped, as
    are address and timestamp lines. May return an empty list.
    """
    items: list[LineItem] = []
    for line in lines:
        amount = _line_amount(line)
        if not _is_item_candidate(line, amount, total):
            continue
        items.append(_parse_item_line(line, amount))
    return items
