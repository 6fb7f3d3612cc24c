"""struk: turn receipt OCR text into structured, categorized expense records."""

from struk.domain.receipt import LineItem, OcrText, ParsedReceipt
from struk.receipt import categorize, format_currency, generate_receipt_id, normalize_amount, parse_receipt_text

__version__ = "0.1.0"

__all__ = [
    "LineItem",
    "OcrText",
    "ParsedReceipt",
    "categorize",
    "format_currency",
    "generate_receipt_id",
    "normalize_amount",
    "parse_receipt_text",
]
