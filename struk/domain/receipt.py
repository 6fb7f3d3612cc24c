"""Data models for receipt parsing."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Literal

Category = Literal[
    "Food & Dining",
    "Groceries",
    "Transportation",
    "Healthcare",
    "Shopping",
    "Utilities",
    "Entertainment",
    "Other",
]

# Fixed category set, in display order.
CATEGORIES: tuple[Category, ...] = (
    "Food & Dining",
    "Groceries",
    "Transportation",
    "Healthcare",
    "Shopping",
    "Utilities",
    "Entertainment",
    "Other",
)

DEFAULT_CATEGORY: Category = "Other"
UNKNOWN_MERCHANT = "Unknown Merchant"
GENERAL_PURCHASE = "General Purchase"
# Used when the caller did not run OCR (e.g. manual entry).
DEFAULT_CONFIDENCE = 0.8


@dataclass(frozen=True)
class OcrText:
    """Text and confidence returned by the OCR engine."""

    text: str
    confidence: float


@dataclass
class LineItem:
    """A single purchased entry on a receipt."""

    name: str
    price: Decimal  # Unit price
    quantity: int = 1


@dataclass
class ParsedReceipt:
    """Structured expense record parsed from receipt text."""

    merchant: str
    date: date
    total: Decimal
    category: Category = DEFAULT_CATEGORY
    items: list[LineItem] = field(default_factory=list)
    raw_text: str = ""  # Original OCR text for reference
    confidence: float = DEFAULT_CONFIDENCE
    date_is_placeholder: bool = False
