"""Seed Loader — inserts through UserManager and skips existing usernames."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine

from app.core.passwords import verify_password
from app.db.base import Base
from app.db.seed import seed_users
from app.models.user import User

ENTRIES = [
    {"username": "alice", "email": "alice@example.com", "password": "alice-pass"},
    {"username": "bob", "email": "bob@example.com", "password": "bob-pass"},
]


async def test_seed_is_rerunnable(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}"
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    assert await seed_users(url, ENTRIES) == 2
    assert await seed_users(url, ENTRIES) == 0

    async with engine.connect() as conn:
        rows = (await conn.execute(select(User.username, User.password_hash))).all()
    await engine.dispose()

    assert sorted(r.username for r in rows) == ["alice", "bob"]
    assert all(verify_password(f"{r.username}-pass", r.password_hash) for r in rows)
