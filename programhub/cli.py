# programhub/cli.py
"""
Command line entry point for the prototype store.

Usage:
    programhub seed [--force]            # Load the demo data (once, unless forced)
    programhub reset                     # Wipe every collection
    programhub tables                    # Record counts and metadata
    programhub summary PROGRAM_ID        # One program with related records and metrics
    programhub partner PARTNER_ID        # Partner dashboard (owned + related programs)
    programhub catalog                   # Public catalog cards
    programhub delete-program PROGRAM_ID # Cascade delete

Results are printed as JSON on stdout; logs go to stderr.
"""

import argparse
import json
import sys
from typing import Any, List, Optional

from pydantic import BaseModel

from programhub.core.domain.exceptions import CascadeDeleteError, ProgramNotFoundError
from programhub.shared.container import Container
from programhub.shared.logging_config import configure_logging
from programhub.shared.observability import setup_observability


def emit(payload: Any) -> None:
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json", by_alias=True)
    elif isinstance(payload, list):
        payload = [
            item.model_dump(mode="json", by_alias=True) if isinstance(item, BaseModel) else item
            for item in payload
        ]
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def fail(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="programhub", description="Program relationship store")
    parser.add_argument("--store-path", default=None, help="Directory holding the stored document")
    parser.add_argument(
        "--backend",
        choices=["filesystem", "memory"],
        default=None,
        help="Storage backend (defaults to STORAGE_BACKEND)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Seed
    seed_parser = subparsers.add_parser("seed", help="Load demo data")
    seed_parser.add_argument("--force", action="store_true", help="Reset and reseed even if already seeded")

    # Reset
    subparsers.add_parser("reset", help="Wipe every collection")

    # Tables
    subparsers.add_parser("tables", help="Show record counts per collection")

    # Summary
    summary_parser = subparsers.add_parser("summary", help="Show one program summary")
    summary_parser.add_argument("program_id")

    # Partner
    partner_parser = subparsers.add_parser("partner", help="Show a partner overview")
    partner_parser.add_argument("partner_id")
    partner_parser.add_argument("--owned-only", action="store_true", help="Skip co-partner programs")

    # Catalog
    catalog_parser = subparsers.add_parser("catalog", help="List catalog items")
    catalog_parser.add_argument("--include-private", action="store_true", help="Include private programs")

    # Delete
    delete_parser = subparsers.add_parser("delete-program", help="Delete a program and its dependents")
    delete_parser.add_argument("program_id")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Default to help
    if not args.command:
        parser.print_help()
        return 0

    configure_logging()
    setup_observability()

    container = Container()
    if args.store_path:
        container.config.FILESYSTEM_STORE_PATH.from_value(args.store_path)
    if args.backend:
        container.config.STORAGE_BACKEND.from_value(args.backend)

    store = container.record_store()

    if args.command == "seed":
        database = container.seed_prototype_database().execute(force=args.force)
        emit({"metadata": database.metadata.model_dump(mode="json", by_alias=True), "tables": database.counts()})

    elif args.command == "reset":
        store.reset_database()
        emit({"reset": True})

    elif args.command == "tables":
        database = store.load_database()
        emit({"metadata": database.metadata.model_dump(mode="json", by_alias=True), "tables": database.counts()})

    elif args.command == "summary":
        summary = container.get_program_summary().execute(args.program_id)
        if summary is None:
            return fail(f"program not found: {args.program_id}")
        emit(summary)

    elif args.command == "partner":
        overview = container.load_partner_overview().execute(
            partner_id=args.partner_id,
            include_related=not args.owned_only,
        )
        emit(overview)

    elif args.command == "catalog":
        emit(container.browse_program_catalog().execute(include_private=args.include_private))

    elif args.command == "delete-program":
        try:
            report = container.delete_program().execute(args.program_id)
        except ProgramNotFoundError as e:
            return fail(e.message)
        except CascadeDeleteError as e:
            if e.report is not None:
                emit(e.report)
            return fail(e.message)
        emit(report)

    return 0


if __name__ == "__main__":
    sys.exit(main())
