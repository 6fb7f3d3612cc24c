"""Expense categorization rules for parsed receipts.

This module maps a merchant name and its line items to one of the fixed
expense categories. Rules are evaluated top to bottom and the first match
wins; "Other" is returned when nothing matches.

To add new rules:
1. Find the category below and add keywords to its tuple, or
2. Add a [[rules]] entry to category_rules.toml (evaluated before built-ins)
3. Keywords are lower-case substrings, matched case-insensitively
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, cast

from struk.domain.receipt import CATEGORIES, DEFAULT_CATEGORY, Category, LineItem


@dataclass(frozen=True)
class CategoryRule:
    """Keyword rule: matches when the merchant or any item mentions a keyword."""

    category: Category
    merchant_keywords: tuple[str, ...] = ()
    item_keywords: tuple[str, ...] = ()

    def matches(self, merchant_lower: str, item_names_lower: str) -> bool:
        return any(kw in merchant_lower for kw in self.merchant_keywords) or any(
            kw in item_names_lower for kw in self.item_keywords
        )


DEFAULT_CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        "Food & Dining",
        merchant_keywords=("restoran", "cafe", "warung", "makanan"),
        item_keywords=("makan", "minuman"),
    ),
    CategoryRule(
        "Groceries",
        merchant_keywords=("indomaret", "alfamart", "minimarket", "supermarket"),
        item_keywords=("susu", "roti", "beras"),
    ),
    CategoryRule(
        "Transportation",
        merchant_keywords=("bensin", "spbu", "transport"),
        item_keywords=("bensin",),
    ),
    CategoryRule(
        "Healthcare",
        merchant_keywords=("apotek", "klinik", "rumah sakit"),
        item_keywords=("obat",),
    ),
    CategoryRule(
        "Shopping",
        merchant_keywords=("toko", "mall", "belanja"),
    ),
    CategoryRule(
        "Utilities",
        merchant_keywords=("listrik", "air", "internet", "telepon"),
    ),
)


def normalize_keywords(raw: Any) -> tuple[str, ...]:
    """Normalize a TOML keyword value (string or list) into a lower-case tuple."""
    if isinstance(raw, str):
        value = raw.strip().lower()
        return (value,) if value else tuple()
    if isinstance(raw, list):
        return tuple(str(v).strip().lower() for v in raw if str(v).strip())
    return tuple()


def is_known_category(value: str) -> bool:
    return value in CATEGORIES


def rule_from_config(raw: Mapping[str, Any]) -> CategoryRule | None:
    """Build a rule from one [[rules]] table; None when it is unusable."""
    category = str(raw.get("category") or "").strip()
    if not is_known_category(category):
        return None

    merchant_keywords = normalize_keywords(raw.get("merchant_keywords"))
    item_keywords = normalize_keywords(raw.get("item_keywords"))
    if not merchant_keywords and not item_keywords:
        return None
    return CategoryRule(cast(Category, category), merchant_keywords, item_keywords)


def build_category_rules(
    rule_configs: Sequence[Mapping[str, Any]] | None = None,
) -> tuple[CategoryRule, ...]:
    """Merge configured rules (first) with the built-in rules (last)."""
    rules: list[CategoryRule] = []
    for config in rule_configs or ():
        for raw in config.get("rules", []):
            if not isinstance(raw, Mapping):
                continue
            rule = rule_from_config(raw)
            if rule is not None:
                rules.append(rule)
    rules.extend(DEFAULT_CATEGORY_RULES)
    return tuple(rules)


def _item_names(items: Iterable[LineItem | str]) -> str:
    return " ".join((item if isinstance(item, str) else item.name).lower() for item in items)


def categorize(
    merchant: str,
    items: Iterable[LineItem | str] = (),
    rules: Sequence[CategoryRule] | None = None,
) -> Category:
    """
    Return the expense category for a merchant and its items.

    Pure function: the same inputs always give the same category.

    Args:
        merchant: Merchant name as printed (e.g., "Indomaret Cabang Kemang")
        items: Line items, or plain item names
        rules: Ordered rules; defaults to the built-in table

    Returns:
        One of the fixed categories, "Other" when no rule matches
    """
    merchant_lower = merchant.lower()
    item_names_lower = _item_names(items)
    for rule in rules if rules is not None else DEFAULT_CATEGORY_RULES:
        if rule.matches(merchant_lower, item_names_lower):
            return rule.category
    return DEFAULT_CATEGORY
