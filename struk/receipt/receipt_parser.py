"""Parse raw OCR text into a structured ParsedReceipt."""

from collections.abc import Sequence
from decimal import Decimal

from struk.domain.receipt import (
    DEFAULT_CATEGORY,
    DEFAULT_CONFIDENCE,
    GENERAL_PURCHASE,
    UNKNOWN_MERCHANT,
    LineItem,
    ParsedReceipt,
)

from .categories import CategoryRule, categorize
from .date_utils import Clock, fallback_receipt_date
from .text_parser import extract_items, extract_merchant, extract_total, find_receipt_date, split_lines


def _general_purchase(total: Decimal) -> list[LineItem]:
    return [LineItem(name=GENERAL_PURCHASE, price=total, quantity=1)]


def parse_receipt_text(
    text: str,
    confidence: float | None = None,
    *,
    today: Clock | None = None,
    merchant_keywords: Sequence[str] | None = None,
    category_rules: Sequence[CategoryRule] | None = None,
    auto_categorize: bool = True,
) -> ParsedReceipt:
    """
    Parse OCR text into a ParsedReceipt.

    This is a best-effort parser - results should be reviewed by the user.
    It never raises: every field degrades to a default (unknown merchant,
    today's date, zero total, a single "General Purchase" item, "Other").

    Args:
        text: Full OCR text
        confidence: OCR confidence in [0, 1]; 0.8 when OCR was not run
        today: Clock used for the date fallback
        merchant_keywords: Extra merchant keywords from configuration
        category_rules: Ordered categorization rules (built-ins when omitted)
        auto_categorize: When False the category is left as "Other"

    Returns:
        ParsedReceipt with parsed data
    """
    lines = split_lines(text)

    merchant = extract_merchant(lines, merchant_keywords) or UNKNOWN_MERCHANT
    receipt_date = find_receipt_date(lines)
    date_is_placeholder = receipt_date is None
    if receipt_date is None:
        receipt_date = fallback_receipt_date(today)

    total = extract_total(lines)
    # Items are only accepted below the total, so this runs after extract_total.
    items = extract_items(lines, total) or _general_purchase(total)

    category = categorize(merchant, items, category_rules) if auto_categorize else DEFAULT_CATEGORY

    return ParsedReceipt(
        merchant=merchant,
        date=receipt_date,
        total=total,
        category=category,
        items=items,
        raw_text=text,
        confidence=DEFAULT_CONFIDENCE if confidence is None else confidence,
        date_is_placeholder=date_is_placeholder,
    )
