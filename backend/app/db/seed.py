"""Seed Loader — inserts dummy users from a JSON file for local development.

Usage:
    python -m app.db.seed [path/to/users.json]

Invariants:
    - Goes through UserManager, so passwords are hashed and payloads validated
    - Users whose username already exists are skipped (safe to re-run)
"""

import argparse
import asyncio
import json
import logging
from pathlib import Path

from sqlalchemy import select

from app.config import get_settings
from app.db.session import create_session_factory
from app.infrastructure.observability import setup_logging
from app.models.user import User
from app.services.user_manager import UserManager

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).resolve().parent / "seeds" / "users.json"


async def seed_users(database_url: str, entries: list[dict]) -> int:
    """Insert entries not yet present. Returns the number inserted."""
    factory = create_session_factory(database_url)
    inserted = 0
    try:
        async with factory() as db:
            manager = UserManager(db)
            for entry in entries:
                existing = await db.execute(
                    select(User.id).where(User.username == entry.get("username")),
                )
                if existing.scalar_one_or_none() is not None:
                    logger.info(f"Seed user {entry.get('username')!r} exists, skipping")
                    continue
                await manager.create(entry)
                inserted += 1
    finally:
        await factory.kw["bind"].dispose()
    return inserted


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Load dummy users into the database.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_SEED_FILE)
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, "text")
    entries = json.loads(args.path.read_text(encoding="utf-8"))
    inserted = asyncio.run(seed_users(settings.database_url, entries))
    logger.info(f"Seeded {inserted} of {len(entries)} users from {args.path}")


if __name__ == "__main__":
    main()
