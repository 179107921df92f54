"""
WGER Exercise Sync - CLI Interface

Usage:
    python -m wger_sync                         # Sync first page of English exercises
    python -m wger_sync --dry-run               # Preview without writing
    python -m wger_sync --limit 50              # Smaller page
    python -m wger_sync --init-schema           # Create exercises table first
    python -m wger_sync --translations my.yaml  # Extra name translations
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import psycopg2

from .config import Settings
from .exceptions import WgerSyncError
from .mappings import load_translations
from .persistence import get_db_connection, ensure_schema
from .sync import sync_exercises
from .types import SyncResult

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sync WGER exercises into the exercises table")
    parser.add_argument('--dry-run', action='store_true', help="Preview without writing")
    parser.add_argument('--limit', type=int, help="Number of exercises to request (default: 200)")
    parser.add_argument('--language', help="Language short name to keep (default: en)")
    parser.add_argument('--translations', type=Path, help="YAML file with extra name translations")
    parser.add_argument('--init-schema', action='store_true', help="Create the exercises table if missing")
    parser.add_argument('-v', '--verbose', action='store_true', help="Debug logging")
    return parser


def print_summary(result: SyncResult) -> None:
    print()
    print(f"{'=' * 60}")
    print(f"WGER SYNC {'(DRY RUN) ' if result.dry_run else ''}SUMMARY")
    print(f"{'=' * 60}")
    print(f"  Fetched:  {result.fetched}")
    print(f"  Kept:     {result.filtered}")
    if result.dry_run:
        print(f"  Would write: {result.filtered}")
        return
    print(f"  Inserted: {result.inserted}")
    print(f"  Updated:  {result.updated}")
    if result.failed:
        print(f"  Failed:   {result.failed}")
        for name in result.failed_names:
            print(f"    ✗ {name}")


def run(args: argparse.Namespace) -> SyncResult:
    settings = Settings.from_env()
    if args.limit is not None:
        settings.limit = args.limit
    if args.language:
        settings.language = args.language

    translations = load_translations(args.translations or settings.translations_path)

    if args.dry_run:
        if args.init_schema:
            logger.warning("[DRY RUN] Skipping --init-schema; no database changes are made")
        return sync_exercises(settings, translations, dry_run=True)

    conn = get_db_connection(settings)
    try:
        if args.init_schema:
            ensure_schema(conn)
        return sync_exercises(settings, translations, conn=conn)
    finally:
        conn.close()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.limit is not None and args.limit <= 0:
        parser.error("--limit must be positive")

    configure_logging(args.verbose)

    try:
        result = run(args)
    except (WgerSyncError, psycopg2.Error) as e:
        logger.error(f"Import failed: {e}")
        return 1

    print_summary(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
