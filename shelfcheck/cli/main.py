"""Command-line frontend for the Shelfcheck core engine."""

from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from shelfcheck.config import get_settings
from shelfcheck.core.api import DraftResult, migrate, seed, validate_csv, validate_drafts

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

REPORT_COLUMNS = ["row", "field", "code", "message", "kind"]


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2, default=str))


def _load_results(input_path: str) -> list[DraftResult]:
    path = Path(input_path)
    if path.suffix.lower() == ".csv":
        return validate_csv(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("products", [data])
    return validate_drafts(data)


def write_report(results: list[DraftResult], report_path: str | Path) -> None:
    with open(report_path, "w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=REPORT_COLUMNS)
        writer.writeheader()
        for result in results:
            for issue in result.report.issues:
                writer.writerow(
                    {
                        "row": result.row,
                        "field": issue.field,
                        "code": issue.code,
                        "message": issue.message,
                        "kind": "collection" if issue.field in result.collection_errors else "form",
                    }
                )


def _cmd_validate(args: argparse.Namespace) -> int:
    results = _load_results(args.input)
    if args.report:
        write_report(results, args.report)
    _json_dump([result.to_dict() for result in results])
    return 0 if all(result.valid for result in results) else 1


def _cmd_seed(args: argparse.Namespace) -> int:
    result = seed(
        count=args.count,
        seed_value=args.seed,
        dry_run=args.dry_run,
        config=get_settings().core_config(),
    )
    _json_dump(result.to_dict())
    return 0 if not result.failed else 1


def _cmd_migrate(args: argparse.Namespace) -> int:
    result = migrate(
        directory=args.dir,
        dry_run=args.dry_run,
        config=get_settings().core_config(),
    )
    _json_dump(result.to_dict())
    if result.instructions:
        print(result.instructions)
    return 1 if result.needs_manual else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shelfcheck", description="Shelfcheck supplier catalog CLI")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_cmd = subparsers.add_parser("validate", help="Validate product drafts from a JSON or CSV file")
    validate_cmd.add_argument("input", help="JSON file (one draft or a list) or bulk CSV file")
    validate_cmd.add_argument("--report", default=None, help="Write a CSV report of every issue to this path")
    validate_cmd.set_defaults(func=_cmd_validate)

    seed_cmd = subparsers.add_parser("seed", help="Generate synthetic products and insert them")
    seed_cmd.add_argument("--count", type=int, default=100)
    seed_cmd.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    seed_cmd.add_argument("--dry-run", action="store_true", help="Generate and validate without inserting")
    seed_cmd.set_defaults(func=_cmd_seed)

    migrate_cmd = subparsers.add_parser("migrate", help="Apply pending SQL migrations")
    migrate_cmd.add_argument("--dir", default=None, help="Migrations directory (defaults to MIGRATIONS_DIR)")
    migrate_cmd.add_argument("--dry-run", action="store_true", help="List pending migrations only")
    migrate_cmd.set_defaults(func=_cmd_migrate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose or get_settings().debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except ValueError as exc:
        parser.exit(2, f"error: {exc}\n")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
