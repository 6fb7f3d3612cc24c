"""Composable receipt text parser components."""

from .common import split_lines
from .fields_parser import extract_date, extract_merchant, extract_total, find_receipt_date
from .items_parser import extract_items

__all__ = [
    "extract_date",
    "extract_items",
    "extract_merchant",
    "extract_total",
    "find_receipt_date",
    "split_lines",
]
