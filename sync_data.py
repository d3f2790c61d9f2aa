#!/usr/bin/env python3
"""
Sync Assemblée nationale open data into the local store.

Usage:
    python sync_data.py agenda                          # Sittings around today + dossiers
    python sync_data.py agenda --date 2024-11-05        # One day
    python sync_data.py scrutins --from 2024-11-01 --to 2024-11-07
    python sync_data.py dossiers --legislature 16
    python sync_data.py deputies --dry-run              # Fetch and transform, write nothing
    python sync_data.py tag-scrutins --force            # Re-tag every scrutin
    python sync_data.py tag-bill <bill-id>              # Re-tag one bill
    python sync_data.py all                             # Full refresh, then validation
    python sync_data.py --validate                      # Check data integrity
"""

import argparse
import sys
from datetime import date

from pydantic import ValidationError

from app.repositories import get_write_connection
from etl.helpers import IngestOptions
from etl.sync import sync, sync_all
from etl.tagging import tag_one
from etl.validation import validate_store
from settings import LEGISLATURES_WITH_AGENDAS
from settings.logging import setup_logging

logger = setup_logging()

# command -> (job name, accepted flags)
JOB_COMMANDS = {
    "agenda": ("ingest", ("date", "range", "legislature", "dry_run")),
    "scrutins": ("ingest-scrutins", ("range", "legislature", "dry_run")),
    "deputies": ("ingest-deputies", ("dry_run",)),
    "organes": ("ingest-organes", ("dry_run",)),
    "deputy-organes": ("ingest-deputy-organes", ("dry_run",)),
    "dossiers": ("ingest-dossiers", ("legislature", "dry_run")),
    "circonscriptions": ("ingest-circonscriptions", ("dry_run",)),
    "tag-scrutins": ("tag-scrutins", ("force",)),
    "tag-bills": ("tag-bills", ("force",)),
    "seed-tags": ("seed-tags", ()),
}

ENTITY_COMMANDS = {"tag-scrutin": "scrutin", "tag-bill": "bill"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Assemblée nationale open data sync")
    parser.add_argument("--validate", action="store_true", help="Check data integrity and exit")
    commands = parser.add_subparsers(dest="command")

    for name, (_, flags) in JOB_COMMANDS.items():
        sub = commands.add_parser(name)
        if "date" in flags:
            sub.add_argument("--date", type=date.fromisoformat, help="Single day (YYYY-MM-DD)")
        if "range" in flags:
            sub.add_argument("--from", dest="from_date", type=date.fromisoformat, help="Range start (YYYY-MM-DD)")
            sub.add_argument("--to", dest="to_date", type=date.fromisoformat, help="Range end (YYYY-MM-DD)")
        if "legislature" in flags:
            sub.add_argument("--legislature", choices=[*LEGISLATURES_WITH_AGENDAS, "all"])
        if "dry_run" in flags:
            sub.add_argument("--dry-run", action="store_true", help="Fetch and transform without writing")
        if "force" in flags:
            sub.add_argument("--force", "-f", action="store_true", help="Re-process already tagged entities")

    for name in ENTITY_COMMANDS:
        commands.add_parser(name).add_argument("id")

    commands.add_parser("validate")
    commands.add_parser("all")
    return parser


def options_from(args: argparse.Namespace) -> IngestOptions:
    values = {
        "date": getattr(args, "date", None),
        "fromDate": getattr(args, "from_date", None),
        "toDate": getattr(args, "to_date", None),
        "dryRun": getattr(args, "dry_run", False),
        "force": getattr(args, "force", False),
    }
    if getattr(args, "legislature", None):
        values["legislature"] = args.legislature
    return IngestOptions(**values)


def run_validation() -> bool:
    """Print the store validation report."""
    with get_write_connection() as conn:
        result = validate_store(conn)

    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)
    stats = result["stats"]
    print(f"  Deputies: {stats['deputy']:,}")
    print(f"  Organes: {stats['organe']:,} ({stats['deputy_organe']:,} memberships)")
    print(f"  Sittings: {stats['sitting']:,} ({stats['agenda_item']:,} agenda items)")
    print(f"  Scrutins: {stats['scrutin']:,}")
    print(f"  Votes: {stats['scrutin_vote']:,}")
    print(f"  Bills: {stats['bill']:,}")
    print(f"  Coverage: {stats['coverage_pct']}%")
    print(f"  Missing votes: {stats['scrutins_missing_votes']}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    if result["valid"]:
        print("✅ All data valid!")
    else:
        print("❌ Some issues found. Run sync again to fix.")
    print("=" * 60 + "\n")
    return result["valid"]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.validate or args.command == "validate":
        return 0 if run_validation() else 1

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "all":
        logger.info("Running full sync")
        sync_all()
        return 0 if run_validation() else 1

    if args.command in ENTITY_COMMANDS:
        with get_write_connection() as conn:
            result = tag_one(conn, ENTITY_COMMANDS[args.command], args.id)
        logger.info("{}: {}", args.command, result)
        return 0

    try:
        options = options_from(args)
    except ValidationError as e:
        parser.error(str(e))

    job_name, _ = JOB_COMMANDS[args.command]
    if options.dry_run:
        logger.info("Mode: DRY RUN (no writes)")
    result = sync(job_name, options)
    logger.info("{}: {}", args.command, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
