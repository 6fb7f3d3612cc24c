#!/usr/bin/env python3

import argparse
import logging
from collections.abc import Callable, Sequence

from struk.runtime import set_log_level


def _coerce_exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _run_command(command: Callable[[argparse.Namespace], None], args: argparse.Namespace) -> int:
    """
    Run a command handler that may call sys.exit().

    This keeps process termination centralized in this module's entrypoint.
    """
    try:
        command(args)
    except SystemExit as exc:
        return _coerce_exit_code(exc.code)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Receipt-to-expense parsing CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse [FILE|-]             Parse OCR text into a structured receipt
  scan <image>               OCR a receipt image, then parse it
  categorize --merchant M    Categorize a merchant and item names

Configuration:
  $STRUK_CONFIG_DIR/settings.toml        (default ~/.config/struk)
  $STRUK_CONFIG_DIR/category_rules.toml
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Parse OCR text into a structured receipt")
    parse_parser.add_argument("file", nargs="?", default=None, help="Text file to parse (default: stdin)")

    scan_parser = subparsers.add_parser("scan", help="Scan a receipt image")
    scan_parser.add_argument("image", help="Path to receipt image")
    scan_parser.add_argument("--ocr-url", default=None, help="OCR service URL (default: from settings)")
    scan_parser.add_argument(
        "--lang", choices=["ind", "eng"], default=None, help="OCR language (default: from settings)"
    )

    categorize_parser = subparsers.add_parser("categorize", help="Categorize a merchant and its items")
    categorize_parser.add_argument("--merchant", required=True, help="Merchant name")
    categorize_parser.add_argument("--item", action="append", help="Item name (repeatable)")

    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "parse":
        from struk.cli.receipt import cmd_parse

        return _run_command(cmd_parse, args)
    elif args.command == "scan":
        from struk.cli.receipt import cmd_scan

        return _run_command(cmd_scan, args)
    elif args.command == "categorize":
        from struk.cli.receipt import cmd_categorize

        return _run_command(cmd_categorize, args)

    return 1


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
