"""CLI entry point for the pantry module."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict

from dotenv import load_dotenv

from .categories import is_known_category
from .config import PantryConfig, load_config
from .expiry import expiry_status
from .inventory import ALL_CATEGORIES, SORT_KEYS, filter_items, pantry_stats, sort_items, to_csv
from .receipt import CandidateItem, ReceiptFormatError, extract_items, parse_receipt_json
from .waste import estimate_carbon_footprint, summarize_waste

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="wastewise-pantry",
        description="Pantry intake and food-waste accounting tools",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML configuration file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # extract
    extract_parser = sub.add_parser(
        "extract", help="Extract candidate items from receipt text"
    )
    extract_parser.add_argument(
        "file", nargs="?", default="-", help="Receipt text file (default: stdin)"
    )
    extract_parser.add_argument("--json", action="store_true", help="Output JSON")

    # qr
    qr_parser = sub.add_parser(
        "qr", help="Extract candidate items from a JSON receipt payload"
    )
    qr_parser.add_argument(
        "file", nargs="?", default="-", help="JSON payload file (default: stdin)"
    )
    qr_parser.add_argument("--json", action="store_true", help="Output JSON")

    # carbon
    carbon_parser = sub.add_parser(
        "carbon", help="Estimate the carbon footprint of wasted food"
    )
    carbon_parser.add_argument("quantity", type=float)
    carbon_parser.add_argument("category")
    carbon_parser.add_argument("--unit", default="kg", help="Quantity unit (default: kg)")

    # summary
    summary_parser = sub.add_parser(
        "summary", help="Summarise a JSON list of waste logs"
    )
    summary_parser.add_argument("file", help="JSON file with waste log records")
    summary_parser.add_argument("--json", action="store_true", help="Output JSON")

    # stats
    stats_parser = sub.add_parser(
        "stats", help="Count pantry items, items expiring soon and expired items"
    )
    stats_parser.add_argument("file", help="JSON file with pantry item records")
    stats_parser.add_argument("--json", action="store_true", help="Output JSON")

    # export
    export_parser = sub.add_parser(
        "export", help="Filter and sort pantry items and write them as CSV"
    )
    export_parser.add_argument("file", help="JSON file with pantry item records")
    export_parser.add_argument("--search", default="", help="Name substring")
    export_parser.add_argument(
        "--category", default=ALL_CATEGORIES, help="Category filter (default: All)"
    )
    export_parser.add_argument(
        "--sort", default="expiry_asc", choices=SORT_KEYS, help="Sort order"
    )
    export_parser.add_argument(
        "--output", "-o", default=None, help="CSV file (default: stdout)"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    load_dotenv()
    try:
        config = load_config(args.config)
    except (ImportError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    level = "DEBUG" if args.verbose else config.logging.level
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "extract":
            _cmd_extract(config, args)
        case "qr":
            _cmd_qr(config, args)
        case "carbon":
            _cmd_carbon(args)
        case "summary":
            _cmd_summary(args)
        case "stats":
            _cmd_stats(args)
        case "export":
            _cmd_export(args)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        print(f"Cannot read {path}: {e}", file=sys.stderr)
        sys.exit(1)


def _cap_input(text: str, config: PantryConfig) -> str:
    limit = config.receipt.max_input_chars
    if limit and len(text) > limit:
        logger.warning(
            "Receipt text truncated from %d to %d characters", len(text), limit
        )
        return text[:limit]
    return text


def _cmd_extract(config: PantryConfig, args) -> None:
    text = _cap_input(_read_input(args.file), config)
    items = extract_items(
        text,
        expiry_days=config.receipt.default_expiry_days,
        unit=config.receipt.unit,
    )
    _print_items(items, as_json=args.json)


def _cmd_qr(config: PantryConfig, args) -> None:
    text = _cap_input(_read_input(args.file), config)
    try:
        items = parse_receipt_json(
            text,
            expiry_days=config.receipt.default_expiry_days,
            unit=config.receipt.unit,
        )
    except ReceiptFormatError as e:
        print(f"QR payload not recognised: {e}", file=sys.stderr)
        sys.exit(1)
    _print_items(items, as_json=args.json)


def _print_items(items: list[CandidateItem], as_json: bool) -> None:
    if as_json:
        print(json.dumps([i.to_dict() for i in items], ensure_ascii=False, indent=2))
        return
    if not items:
        print("No items found.")
        return
    print(f"Extracted items ({len(items)}):")
    for i in items:
        price = f"{i.purchase_price:.2f}" if i.purchase_price is not None else "-"
        print(
            f"  {i.name:<24} {i.category:<10} {i.quantity:>4} {i.unit:<4} "
            f"{price:>8}  expires {i.expiry_date} ({expiry_status(i.expiry_date)})"
        )


def _cmd_carbon(args) -> None:
    if not is_known_category(args.category):
        logger.warning(
            "Unknown category %r, using the default carbon factor", args.category
        )
    footprint = estimate_carbon_footprint(args.quantity, args.category, args.unit)
    print(f"{footprint:.2f} kg CO2e")


def _read_records(path: str, what: str) -> list[dict]:
    try:
        records = json.loads(_read_input(path))
    except json.JSONDecodeError as e:
        print(f"Invalid {what} JSON: {e}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(records, list):
        print(f"{what.capitalize()} JSON must be a list of records", file=sys.stderr)
        sys.exit(1)
    return [r for r in records if isinstance(r, dict)]


def _cmd_summary(args) -> None:
    summary = summarize_waste(_read_records(args.file, "waste log"))
    if args.json:
        print(json.dumps(asdict(summary), ensure_ascii=False, indent=2))
        return
    print(f"Waste logs:           {summary.log_count}")
    print(f"Total wasted:         {summary.total_quantity:.2f}")
    print(f"Total cost:           {summary.total_cost:.2f}")
    print(f"Carbon footprint:     {summary.carbon_footprint:.2f} kg CO2e")
    print(f"Most wasted category: {summary.most_wasted_category}")


def _cmd_stats(args) -> None:
    stats = pantry_stats(_read_records(args.file, "pantry item"))
    if args.json:
        print(json.dumps(asdict(stats), ensure_ascii=False, indent=2))
        return
    print(f"Pantry items:  {stats.total}")
    print(f"Expiring soon: {stats.expiring_soon}")
    print(f"Expired:       {stats.expired}")


def _cmd_export(args) -> None:
    items = filter_items(
        _read_records(args.file, "pantry item"),
        query=args.search,
        category=args.category,
    )
    content = to_csv(sort_items(items, args.sort))
    if args.output is None:
        sys.stdout.write(content)
        return
    try:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        print(f"Cannot write {args.output}: {e}", file=sys.stderr)
        sys.exit(1)
    logger.info("Exported %d pantry items to %s", len(items), args.output)
