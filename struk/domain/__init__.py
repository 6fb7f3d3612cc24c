"""Core domain models for struk.

Usage:
    from struk.domain import LineItem, ParsedReceipt
"""

from struk.domain.receipt import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    DEFAULT_CONFIDENCE,
    GENERAL_PURCHASE,
    UNKNOWN_MERCHANT,
    Category,
    LineItem,
    OcrText,
    ParsedReceipt,
)

__all__ = [
    "CATEGORIES",
    "Category",
    "DEFAULT_CATEGORY",
    "DEFAULT_CONFIDENCE",
    "GENERAL_PURCHASE",
    "LineItem",
    "OcrText",
    "ParsedReceipt",
    "UNKNOWN_MERCHANT",
]
