"""Shared keyword tables and helpers for receipt text parsing."""

import re

# Header lines are only searched for the merchant name in this region.
MERCHANT_HEADER_LINES = 3
MERCHANT_NAME_MIN_LENGTH = 3  # exclusive
MERCHANT_NAME_MAX_LENGTH = 50  # exclusive

# Store types and common Indonesian retail chains (lower-case substrings)
MERCHANT_KEYWORDS: tuple[str, ...] = (
    "toko",
    "warung",
    "restoran",
    "cafe",
    "indomaret",
    "alfamart",
    "lawson",
    "family mart",
    "minimarket",
    "supermarket",
    "mall",
    "plaza",
    "center",
    "pt.",
    "cv.",
    "ud.",
    "kedai",
    "rumah makan",
    "indomaret point",
    "alfamart point",
    "convenience store",
)

# Lines holding the transaction total (lower-case substrings)
TOTAL_KEYWORDS: tuple[str, ...] = (
    "total",
    "jumlah",
    "rp",
    "grand total",
    "subtotal",
    "total bayar",
    "total pembayaran",
    "harus dibayar",
    "total belanja",
    "total transaksi",
    "total belanja:",
    "total:",
    "jumlah:",
    "rp:",
)

# Footer lines that carry amounts but are not purchases:
# discount, VAT, cash tendered, savings, change, cashier
NON_ITEM_KEYWORDS: tuple[str, ...] = ("diskon", "ppn", "tunai", "hemat", "kembali", "kasir")

# Timestamp lines ("15/01/2024 14:30", "Jam 09:12")
TIMESTAMP_PATTERN = re.compile(r"\b\d{1,2}:\d{2}\b|(?<!\d)\d{1,4}[/-]\d{1,2}[/-]\d{1,4}(?!\d)")

# Address/contact lines printed under the store name
ADDRESS_PATTERNS = re.compile(
    r"^(JL|JLN|JALAN)\b|"
    r"\b(TELP|TLP|TELEPON|FAX|NPWP)\b|"
    r"\bRT\s*\.?\s*\d+\s*/\s*RW\b|"
    r"\(\d{2,4}\)\s*\d{3,}",
    re.IGNORECASE,
)

# Trailing run of digits/separators, e.g. "Es Teh Manis      5.000"
NUMERIC_TAIL = re.compile(r"[\d.,\s]+$")


def split_lines(text: str) -> list[str]:
    """Split OCR text into trimmed, non-empty lines (order preserved)."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    """Return True if lower-cased text contains any of the keywords."""
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def _looks_like_total_line(line: str) -> bool:
    return contains_any(line, TOTAL_KEYWORDS)


def _looks_like_address_line(line: str) -> bool:
    return ADDRESS_PATTERNS.search(line) is not None


def _looks_like_timestamp_line(line: str) -> bool:
    return TIMESTAMP_PATTERN.search(line) is not None


def _strip_numeric_tail(line: str) -> str:
    """Remove the trailing price/quantity digits from an item line."""
    return NUMERIC_TAIL.sub("", line).strip()
