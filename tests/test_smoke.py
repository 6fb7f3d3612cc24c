"""Smoke tests for basic module wiring.

Keep these minimal and free of any real-world data.
"""

from __future__ import annotations


def test_imports() -> None:
    import struk
    import struk.application
    import struk.cli.main
    import struk.receipt
    import struk.runtime

    assert struk.__version__
    assert struk.application is not None
    assert struk.cli.main is not None
    assert struk.receipt is not None
    assert struk.runtime is not None


def test_top_level_exports() -> None:
    import struk

    receipt = struk.parse_receipt_text("TOKO\nTotal 1.000")
    assert isinstance(receipt, struk.ParsedReceipt)
    assert struk.categorize(receipt.merchant, receipt.items) == "Shopping"
