#!/usr/bin/env python3
"""
Import a Firebase Realtime Database export into the valentine database.

The export is the JSON file produced by "Export JSON" in the Firebase
console.  Records live either under a top-level "valentines" key or at the
root.  Entries with "from" and "to" are e-cards, entries with "senderName"
are valentines, anything else is skipped.

Rows are written with the same conditional insert the API uses, so running
the import twice never overwrites what is already there.

Usage:
    valentine-import firebase-export.json
    valentine-import firebase-export.json --dry-run
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from valentine_api.domain.clock import now_ms
from valentine_api.domain.entities import DEFAULT_THEME, ECard, Valentine
from valentine_api.domain.sanitization import sanitize, sanitize_message

logger = logging.getLogger(__name__)


@dataclass
class ImportBatch:
    """Entities parsed from one export file."""

    valentines: list[Valentine] = field(default_factory=list)
    ecards: list[ECard] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


@dataclass
class ImportSummary:
    valentines_inserted: int = 0
    valentines_existing: int = 0
    ecards_inserted: int = 0
    ecards_existing: int = 0


def to_epoch_ms(value: Any) -> int | None:
    """Accept epoch milliseconds or an ISO-8601 string; None when unusable."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return int(text)
        try:
            return int(datetime.fromisoformat(text).timestamp() * 1000)
        except ValueError:
            return None
    return None


def _to_count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


def _parse_ecard(entry_id: str, entry: dict[str, Any]) -> ECard | None:
    ecard_id = sanitize(entry_id)
    from_name = sanitize(entry.get("from"))
    to_name = sanitize(entry.get("to"))
    if not ecard_id or not from_name or not to_name:
        return None
    responded = bool(entry.get("responded"))
    return ECard(
        ecard_id=ecard_id,
        from_name=from_name,
        to_name=to_name,
        theme=sanitize(entry.get("theme")) or DEFAULT_THEME,
        message=sanitize_message(entry.get("message")),
        created_at=to_epoch_ms(entry.get("createdAt")) or now_ms(),
        viewed=bool(entry.get("viewed")),
        responded=responded,
        responded_at=to_epoch_ms(entry.get("respondedAt")) if responded else None,
    )


def _parse_valentine(entry_id: str, entry: dict[str, Any]) -> Valentine | None:
    tracking_id = sanitize(entry_id)
    sender_name = sanitize(entry.get("senderName"))
    if not tracking_id or not sender_name:
        return None
    yes_clicked = bool(entry.get("yesClicked"))
    return Valentine(
        tracking_id=tracking_id,
        sender_name=sender_name,
        created_at=to_epoch_ms(entry.get("createdAt")) or now_ms(),
        views=_to_count(entry.get("views")),
        yes_clicked=yes_clicked,
        yes_clicked_at=to_epoch_ms(entry.get("yesClickedAt")) if yes_clicked else None,
    )


def parse_export(data: Any) -> ImportBatch:
    """Split a Firebase export into valentine and e-card entities."""
    batch = ImportBatch()
    if not isinstance(data, dict):
        return batch

    records = data.get("valentines", data)
    if not isinstance(records, dict):
        return batch

    for entry_id, entry in records.items():
        parsed: Valentine | ECard | None = None
        if isinstance(entry, dict):
            if entry.get("from") and entry.get("to"):
                parsed = _parse_ecard(entry_id, entry)
            elif entry.get("senderName"):
                parsed = _parse_valentine(entry_id, entry)

        if isinstance(parsed, ECard):
            batch.ecards.append(parsed)
        elif isinstance(parsed, Valentine):
            batch.valentines.append(parsed)
        else:
            logger.warning("Skipping unrecognised entry %s", entry_id)
            batch.skipped.append(entry_id)

    return batch


async def write_batch(batch: ImportBatch, session_factory) -> ImportSummary:
    """Insert every parsed entity in one transaction; existing ids are left alone."""
    from valentine_api.infrastructure.database.repositories import (
        SQLAlchemyECardRepository,
        SQLAlchemyValentineRepository,
    )

    summary = ImportSummary()
    async with session_factory() as session:
        valentine_repo = SQLAlchemyValentineRepository(session)
        ecard_repo = SQLAlchemyECardRepository(session)
        try:
            for valentine in batch.valentines:
                if await valentine_repo.create_if_absent(valentine):
                    summary.valentines_inserted += 1
                else:
                    summary.valentines_existing += 1
            for ecard in batch.ecards:
                if await ecard_repo.create_if_absent(ecard):
                    summary.ecards_inserted += 1
                else:
                    summary.ecards_existing += 1
            await session.commit()
        except Exception:
            await session.rollback()
            raise
    return summary


async def _run_import(batch: ImportBatch) -> ImportSummary:
    from valentine_api.infrastructure.database import async_session_factory, create_tables, engine

    try:
        await create_tables()
        return await write_batch(batch, async_session_factory)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Import a Firebase export into the valentine database")
    parser.add_argument("export", help="Path to the Firebase JSON export")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and count entries without writing to the database",
    )
    args = parser.parse_args(argv)

    from valentine_api.infrastructure.logging.log_config import setup_logging

    setup_logging()

    export_path = Path(args.export)
    if not export_path.exists():
        print(f"{export_path} not found!", file=sys.stderr)
        print("Export it from Firebase Console -> Realtime Database -> Export JSON.", file=sys.stderr)
        return 1

    print(f"Reading Firebase export from {export_path}...")
    data = json.loads(export_path.read_text("utf-8"))
    batch = parse_export(data)

    print(f"  Valentines: {len(batch.valentines)}")
    print(f"  E-cards:    {len(batch.ecards)}")
    print(f"  Skipped:    {len(batch.skipped)}")

    if args.dry_run:
        print("\nDry run — nothing written.")
        return 0

    summary = asyncio.run(_run_import(batch))
    print(
        f"\nDone! Inserted {summary.valentines_inserted} valentines "
        f"({summary.valentines_existing} already present) and "
        f"{summary.ecards_inserted} e-cards ({summary.ecards_existing} already present)."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
