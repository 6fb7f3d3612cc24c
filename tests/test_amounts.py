from decimal import Decimal

import pytest
from struk.receipt.amounts import normalize_amount


@pytest.mark.parametrize(
    ("fragment", "expected"),
    [
        ("50.000", Decimal("50000")),
        ("50,00", Decimal("50.00")),
        ("50.000,00", Decimal("50000.00")),
        ("50,000", Decimal("50000")),
        ("1.250.000", Decimal("1250000")),
        ("25.5", Decimal("25.5")),
        ("15000", Decimal("15000")),
    ],
)
def test_separator_heuristics(fragment: str, expected: Decimal) -> None:
    assert normalize_amount(fragment) == expected


@pytest.mark.parametrize(
    ("fragment", "expected"),
    [
        ("50rb", Decimal("50000")),
        ("50 rb", Decimal("50000")),
        ("1,5rb", Decimal("1500")),
        ("2jt", Decimal("2000000")),
        ("2.5jt", Decimal("2500000")),
        ("Parkir 5RB", Decimal("5000")),
    ],
)
def test_thousand_and_million_shorthand(fragment: str, expected: Decimal) -> None:
    assert normalize_amount(fragment) == expected


def test_currency_noise_is_ignored() -> None:
    assert normalize_amount("Rp 25.000") == Decimal("25000")
    assert normalize_amount("Total: 45.000") == Decimal("45000")
    assert normalize_amount("25.000,-") == Decimal("25000")


@pytest.mark.parametrize("fragment", ["", "abc", "Total:", "1.2.3.4"])
def test_unparseable_fragments_are_zero(fragment: str) -> None:
    assert normalize_amount(fragment) == Decimal(0)
