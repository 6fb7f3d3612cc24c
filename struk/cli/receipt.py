"""Receipt command handlers used by the unified CLI."""

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from struk.runtime import get_logger, load_category_rules, load_scan_settings

if TYPE_CHECKING:
    from struk.domain.receipt import ParsedReceipt

logger = get_logger(__name__)


def _print_receipt_summary(receipt: "ParsedReceipt", currency: str) -> None:
    from struk.receipt.formatter import format_parsed_receipt

    print("\n" + "=" * 60)
    print("PARSED RECEIPT")
    print("=" * 60)
    print(format_parsed_receipt(receipt, currency=currency))
    print("=" * 60)


def cmd_parse(args: argparse.Namespace) -> None:
    """Parse OCR text from a file (or stdin) and print the structured receipt."""
    from struk.application.scan import run_text_parse

    if args.file in (None, "-"):
        text = sys.stdin.read()
    else:
        path = Path(args.file)
        if not path.exists():
            logger.error("Text file not found: %s", path)
            print(f"Error: Text file not found: {path}")
            sys.exit(1)
        text = path.read_text(encoding="utf-8")

    settings = load_scan_settings()
    receipt = run_text_parse(text, settings=settings)
    _print_receipt_summary(receipt, settings.default_currency)


def cmd_scan(args: argparse.Namespace) -> None:
    """Scan a receipt image through the OCR service and print the parsed receipt."""
    from struk.application.scan import ReceiptScanRequest, run_receipt_scan

    settings = load_scan_settings()
    result = run_receipt_scan(
        ReceiptScanRequest(
            image_path=Path(args.image),
            ocr_url=args.ocr_url,
            ocr_language=args.lang,
            settings=settings,
        )
    )

    if result.status == "file_not_found":
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        sys.exit(1)

    if result.status == "ocr_unavailable":
        logger.error("%s", result.error)
        print(f"OCR failed: {result.error}")
        print("Make sure the OCR service is running, then try the scan again.")
        sys.exit(1)

    if result.receipt is None:
        print("Scan failed: missing receipt output.")
        sys.exit(1)

    _print_receipt_summary(result.receipt, settings.default_currency)


def cmd_categorize(args: argparse.Namespace) -> None:
    """Re-categorize a merchant and item names without parsing."""
    from struk.receipt.categories import categorize

    print(categorize(args.merchant, args.item or [], load_category_rules()))
