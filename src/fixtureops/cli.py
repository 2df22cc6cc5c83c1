"""Command-line interface for inspecting and moving the stored snapshot."""

from __future__ import annotations

import argparse
import logging
import sqlite3
from pathlib import Path
from typing import Sequence

from fixtureops.aggregation import fixture_board, orphaned_pricing, summarize
from fixtureops.document import SnapshotDocument
from fixtureops.persistence import SnapshotRepository
from fixtureops.store import SportsStore


logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sports fixture operations console")
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="SQLite file holding the snapshot (default ~/.fixtureops/fixtureops.sqlite)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("summary", help="Print headline operational metrics")
    commands.add_parser("board", help="List fixtures in kick-off order")

    export_parser = commands.add_parser("export", help="Write the snapshot to a JSON file")
    export_parser.add_argument("path", type=Path, help="Destination JSON path")

    import_parser = commands.add_parser("import", help="Replace the snapshot with a JSON file")
    import_parser.add_argument("path", type=Path, help="Source JSON path")

    commands.add_parser("reset", help="Restore the bundled initial data")
    return parser.parse_args(argv)


def _open_store(db_path: Path | None) -> SportsStore:
    repository = SnapshotRepository(db_path) if db_path is not None else SnapshotRepository()
    return SportsStore(repository)


def _print_summary(store: SportsStore) -> None:
    summary = summarize(store.snapshot)
    print(f"Fixtures Scheduled:   {summary.scheduled_count} ({summary.scheduled_trend})")
    print(f"Mapping Coverage:     {summary.mapping_coverage}% ({summary.coverage_trend})")
    print(f"Pricing Ready:        {summary.pricing_ready_count} ({summary.pricing_trend})")
    print(f"High Priority Issues: {summary.high_priority_issue_count} ({summary.issues_trend})")
    orphans = orphaned_pricing(store.snapshot)
    if orphans:
        print(f"Pricing rows kept for deleted fixtures: {len(orphans)}")


def _print_board(store: SportsStore) -> None:
    rows = fixture_board(store.snapshot)
    if not rows:
        print("No fixtures available.")
        return
    for row in rows:
        fixture = row.fixture
        kick_off = fixture.kick_off.strftime("%a %d %b %Y %H:%M UTC")
        template = row.classification.template if row.classification else "-"
        print(
            f"{fixture.id:<24} {kick_off:<26} {row.label:<16} {fixture.status:<12} "
            f"{template:<20} mappings={len(row.mappings)} issues={len(row.issues)}"
        )


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    store = _open_store(args.db)
    try:
        if args.command == "summary":
            _print_summary(store)
        elif args.command == "board":
            _print_board(store)
        elif args.command == "export":
            SnapshotDocument(store.snapshot).save(args.path)
            print(f"Wrote snapshot to {args.path}")
        elif args.command == "import":
            try:
                document = SnapshotDocument.load(args.path)
            except (OSError, ValueError) as exc:
                raise SystemExit(f"Cannot import {args.path}: {exc}") from exc
            # Writes directly: an import replaces the document rather than going through actions.
            try:
                store.repository.write(document.state)
            except (sqlite3.Error, OSError) as exc:
                raise SystemExit(f"Cannot import {args.path}: write to {store.repository.db_path} failed: {exc}") from exc
            logger.info("Imported snapshot from %s", args.path)
            print(f"Imported {len(document.state.fixtures)} fixtures from {args.path}")
        elif args.command == "reset":
            store.reset()
            print("Restored initial data")
    finally:
        store.close()


if __name__ == "__main__":
    main()
