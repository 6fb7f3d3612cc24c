"""Presentation and identity helpers for parsed receipts."""

import secrets
import string
import time
from decimal import ROUND_HALF_UP, Decimal

from struk.domain.receipt import ParsedReceipt

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}
# Currencies printed without fraction digits
ZERO_DECIMAL_CURRENCIES = {"IDR", "JPY"}

RECEIPT_ID_PREFIX = "receipt"
RECEIPT_ID_SUFFIX_LENGTH = 9
_BASE36 = string.digits + string.ascii_lowercase


def _group_thousands(value: Decimal, fraction_digits: int, thousands_sep: str, decimal_sep: str) -> str:
    quantum = Decimal(1).scaleb(-fraction_digits)
    rounded = abs(value).quantize(quantum, rounding=ROUND_HALF_UP)
    text = f"{rounded:,.{fraction_digits}f}"
    # Swap separators through a placeholder so "," and "." do not collide.
    text = text.replace(",", "\0").replace(".", decimal_sep).replace("\0", thousands_sep)
    return f"-{text}" if value < 0 else text


def format_currency(amount: Decimal | int | float, currency: str = "IDR") -> str:
    """
    Format an amount for display.

    IDR follows Indonesian conventions ("Rp 25.000", no fraction digits);
    other currencies use US grouping ("$1,234.50").
    """
    value = Decimal(str(amount))
    code = currency.upper()
    if code == "IDR":
        return f"Rp {_group_thousands(value, 0, '.', ',')}"

    fraction_digits = 0 if code in ZERO_DECIMAL_CURRENCIES else 2
    number = _group_thousands(value, fraction_digits, ",", ".")
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{code} {number}"
    if number.startswith("-"):
        return f"-{symbol}{number[1:]}"
    return f"{symbol}{number}"


def generate_receipt_id() -> str:
    """Return a unique id like ``receipt_1718000000000_k3j9x0a1b``."""
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_BASE36) for _ in range(RECEIPT_ID_SUFFIX_LENGTH))
    return f"{RECEIPT_ID_PREFIX}_{millis}_{suffix}"


def format_parsed_receipt(receipt: ParsedReceipt, currency: str = "IDR") -> str:
    """Render a parsed receipt as a plain-text review summary."""
    date_str = receipt.date.isoformat()
    if receipt.date_is_placeholder:
        date_str += " (not found)"
    lines = [
        f"Merchant: {receipt.merchant}",
        f"Date: {date_str}",
        f"Total: {format_currency(receipt.total, currency)}",
        f"Category: {receipt.category}",
        f"Confidence: {receipt.confidence:.2f}",
        f"Items ({len(receipt.items)}):",
    ]
    for i, item in enumerate(receipt.items, 1):
        qty_str = f" x{item.quantity}" if item.quantity > 1 else ""
        lines.append(f"  {i}. {item.name}{qty_str} - {format_currency(item.price, currency)}")
    return "\n".join(lines)
