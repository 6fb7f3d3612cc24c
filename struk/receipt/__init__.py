"""Receipt text parsing, normalization and categorization."""

from struk.receipt.amounts import normalize_amount
from struk.receipt.categories import CategoryRule, build_category_rules, categorize
from struk.receipt.formatter import format_currency, format_parsed_receipt, generate_receipt_id
from struk.receipt.receipt_parser import parse_receipt_text

__all__ = [
    "CategoryRule",
    "build_category_rules",
    "categorize",
    "format_currency",
    "format_parsed_receipt",
    "generate_receipt_id",
    "normalize_amount",
    "parse_receipt_text",
]
