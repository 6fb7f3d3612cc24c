from decimal import Decimal
from pathlib import Path

import pytest
from struk.domain.receipt import CATEGORIES, LineItem
from struk.receipt.categories import (
    DEFAULT_CATEGORY_RULES,
    CategoryRule,
    build_category_rules,
    categorize,
    rule_from_config,
)
from struk.runtime import load_category_rules


@pytest.mark.parametrize(
    ("merchant", "items", "expected"),
    [
        ("Warung Makan Sederhana", [], "Food & Dining"),
        ("Kedai Pak Budi", ["Minuman Dingin"], "Food & Dining"),
        ("Indomaret Cabang Kemang", [], "Groceries"),
        ("Kedai Kopi", ["Roti Bakar"], "Groceries"),
        ("SPBU Pertamina", [], "Transportation"),
        ("Apotek Kimia Farma", [], "Healthcare"),
        ("Kios 12", ["Obat Batuk"], "Healthcare"),
        ("Toko Elektronik", [], "Shopping"),
        ("PLN Listrik Prabayar", [], "Utilities"),
        ("Bioskop XXI", ["Tiket"], "Other"),
    ],
)
def test_categorize_examples(merchant: str, items: list[str], expected: str) -> None:
    assert categorize(merchant, items) == expected


def test_first_matching_rule_wins() -> None:
    # "cafe" (Food & Dining) is checked before "mall" (Shopping).
    assert categorize("Cafe Grand Mall") == "Food & Dining"


def test_categorize_accepts_line_items() -> None:
    items = [LineItem("Beras Pandan Wangi 5kg", Decimal("75000"))]
    assert categorize("Pasar Pagi", items) == "Groceries"


def test_categorize_is_deterministic() -> None:
    items = ["Paracetamol", "Vitamin C"]
    assert categorize("Apotek Sehat", items) == categorize("Apotek Sehat", items) == "Healthcare"


def test_built_in_rules_only_produce_known_categories() -> None:
    assert {rule.category for rule in DEFAULT_CATEGORY_RULES} <= set(CATEGORIES)
    # Entertainment exists for manual assignment only.
    assert "Entertainment" not in {rule.category for rule in DEFAULT_CATEGORY_RULES}


def test_rule_from_config_normalizes_keywords() -> None:
    rule = rule_from_config({"category": "Entertainment", "merchant_keywords": [" Bioskop ", "XXI"]})

    assert rule == CategoryRule("Entertainment", merchant_keywords=("bioskop", "xxi"))


@pytest.mark.parametrize(
    "raw",
    [
        {"category": "Hobbies", "merchant_keywords": ["bioskop"]},
        {"category": "Entertainment"},
        {"category": "Entertainment", "merchant_keywords": []},
    ],
)
def test_rule_from_config_rejects_unusable_rules(raw: dict[str, object]) -> None:
    assert rule_from_config(raw) is None


def test_configured_rules_run_before_built_ins() -> None:
    rules = build_category_rules([{"rules": [{"category": "Entertainment", "merchant_keywords": "cafe"}]}])

    assert rules[0].category == "Entertainment"
    assert rules[1:] == DEFAULT_CATEGORY_RULES
    assert categorize("Cafe Musik", rules=rules) == "Entertainment"


def test_load_category_rules_from_toml(config_dir: Path) -> None:
    (config_dir / "category_rules.toml").write_text(
        """
[[rules]]
category = "Entertainment"
merchant_keywords = ["bioskop", "cinema"]

[[rules]]
category = "Hobbies"
merchant_keywords = ["pancing"]
""".lstrip(),
        encoding="utf-8",
    )

    rules = load_category_rules()

    assert len(rules) == len(DEFAULT_CATEGORY_RULES) + 1
    assert categorize("Bioskop XXI", rules=rules) == "Entertainment"
    assert categorize("Toko Pancing", rules=rules) == "Shopping"


def test_load_category_rules_without_file_returns_built_ins(config_dir: Path) -> None:
    assert load_category_rules() == DEFAULT_CATEGORY_RULES
