"""Runtime loader for receipt categorization rules."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from struk.receipt.categories import CategoryRule, build_category_rules, is_known_category
from struk.runtime.logging import get_logger
from struk.runtime.paths import get_paths
from struk.runtime.settings import load_toml

logger = get_logger(__name__)


@lru_cache(maxsize=8)
def load_category_rules(rule_paths: tuple[str, ...] | None = None) -> tuple[CategoryRule, ...]:
    """
    Load categorization rules from category_rules.toml files.

    Configured rules are evaluated before the built-in rules, in file order.

    Args:
        rule_paths: Optional TOML path overrides. If None, uses the default config path.

    Returns:
        Ordered tuple of rules ending with the built-in rules.
    """
    files = [Path(path) for path in rule_paths] if rule_paths is not None else [get_paths().category_rules]
    configs = tuple(load_toml(path) for path in files)

    for path, config in zip(files, configs):
        for raw in config.get("rules", []):
            if isinstance(raw, Mapping) and not is_known_category(str(raw.get("category", "")).strip()):
                logger.warning("Skipping rule with unknown category %r in %s", raw.get("category"), path)

    rules = build_category_rules(configs)
    logger.debug("Loaded %d categorization rules from %s", len(rules), [str(f) for f in files])
    return rules
