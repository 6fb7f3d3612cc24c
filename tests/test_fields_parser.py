from datetime import date
from decimal import Decimal

import pytest
from struk.receipt.text_parser import extract_date, extract_merchant, extract_total, find_receipt_date


def test_merchant_prefers_keyword_line_in_header() -> None:
    lines = ["12/01/2024", "No. 0042", "INDOMARET CABANG KEMANG", "Susu 15.000"]
    # Only the first three lines are searched.
    assert extract_merchant(lines) == "INDOMARET CABANG KEMANG"


def test_merchant_accepts_plausible_business_name() -> None:
    assert extract_merchant(["#0042", "SATE KHAS SENAYAN", "Sate Ayam 30.000"]) == "SATE KHAS SENAYAN"


def test_merchant_falls_back_to_first_line() -> None:
    assert extract_merchant(["#0042 12", "T1", "55 66", "Sate 30.000"]) == "#0042 12"


def test_merchant_of_empty_receipt_is_unknown() -> None:
    assert extract_merchant([]) == "Unknown Merchant"


def test_merchant_keywords_from_config_are_checked() -> None:
    lines = ["Struk No 81", "GRAB*FOOD 2231", "Total 50.000"]
    assert extract_merchant(lines) == "Struk No 81"
    assert extract_merchant(lines, merchant_keywords=["GRAB"]) == "GRAB*FOOD 2231"


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Tanggal: 15/01/2024", date(2024, 1, 15)),
        ("15-01-24 10:22", date(2024, 1, 15)),
        ("15 Januari 2024", date(2024, 1, 15)),
        ("3 agustus 23", date(2023, 8, 3)),
        ("15 Jan 2024", date(2024, 1, 15)),
        ("2 September 2024", date(2024, 9, 2)),
        ("2024-01-15", date(2024, 1, 15)),
        ("2024/1/5 08:00", date(2024, 1, 5)),
    ],
)
def test_find_receipt_date_formats(line: str, expected: date) -> None:
    assert find_receipt_date(["TOKO", line]) == expected


def test_find_receipt_date_skips_invalid_dates() -> None:
    lines = ["Kode 31/02/2024", "Tanggal 01/03/2024"]
    assert find_receipt_date(lines) == date(2024, 3, 1)


def test_first_date_from_top_wins() -> None:
    lines = ["10/01/2024", "Cetak ulang 20/02/2024"]
    assert find_receipt_date(lines) == date(2024, 1, 10)


def test_extract_date_falls_back_to_clock(fixed_clock) -> None:
    assert find_receipt_date(["WARUNG", "Nasi 10.000"]) is None
    assert extract_date(["WARUNG", "Nasi 10.000"], today=fixed_clock) == date(2024, 3, 1)


def test_total_from_last_keyword_line() -> None:
    lines = ["Subtotal 40.000", "Diskon 5.000", "Total Bayar 35.000", "Tunai 50.000"]
    assert extract_total(lines) == Decimal("35000")


def test_total_keyword_line_without_amount_is_skipped() -> None:
    lines = ["Nasi 20.000", "Total 20.000", "TOTAL:"]
    assert extract_total(lines) == Decimal("20000")


def test_total_falls_back_to_largest_amount() -> None:
    lines = ["Nasi 20.000", "Es Teh 5.000", "Bayar 25.000"]
    assert extract_total(lines) == Decimal("25000")


def test_total_is_zero_without_numbers() -> None:
    assert extract_total(["WARUNG", "terima kasih"]) == Decimal(0)
    assert extract_total([]) == Decimal(0)


def test_total_colon_label() -> None:
    assert extract_total(["Total: 45.000"]) == Decimal("45000")


def test_total_of_unlabelled_amounts_is_the_largest() -> None:
    assert extract_total(["15000", "12000", "18000"]) == Decimal("18000")
