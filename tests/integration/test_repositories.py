"""Integration tests for the SQLAlchemy repositories on SQLite."""

import pytest
from sqlalchemy import text

from valentine_api.domain.entities import ECard, Valentine
from valentine_api.infrastructure.database.repositories import (
    SQLAlchemyECardRepository,
    SQLAlchemyValentineRepository,
)
from valentine_api.tools.import_firebase import parse_export, write_batch


@pytest.mark.asyncio
async def test_create_if_absent_reports_insert(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyValentineRepository(session)
        assert await repo.create_if_absent(Valentine("v1", "Sam", created_at=100)) is True
        assert await repo.create_if_absent(Valentine("v1", "Other", created_at=200)) is False
        await session.commit()

    async with session_factory() as session:
        valentine = await SQLAlchemyValentineRepository(session).get_by_id("v1")
    assert valentine.sender_name == "Sam"
    assert valentine.created_at == 100


@pytest.mark.asyncio
async def test_booleans_are_stored_as_integers(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyECardRepository(session)
        await repo.create_if_absent(ECard("c1", "A", "B", created_at=1))
        await repo.mark_responded("c1", responded_at=42)
        await session.commit()

        row = (
            await session.execute(
                text("SELECT viewed, responded, responded_at FROM ecards WHERE ecard_id = 'c1'")
            )
        ).one()
    assert tuple(row) == (0, 1, 42)


@pytest.mark.asyncio
async def test_increment_views_is_a_storage_level_update(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyValentineRepository(session)
        await repo.create_if_absent(Valentine("v2", "Sam"))
        await session.commit()

    for _ in range(7):
        async with session_factory() as session:
            await SQLAlchemyValentineRepository(session).increment_views("v2")
            await session.commit()

    async with session_factory() as session:
        repo = SQLAlchemyValentineRepository(session)
        await repo.mark_yes_clicked("v2", clicked_at=99)
        await repo.increment_views("v2")
        await session.commit()

    async with session_factory() as session:
        valentine = await SQLAlchemyValentineRepository(session).get_by_id("v2")
    assert valentine.views == 8
    assert valentine.yes_clicked is True
    assert valentine.yes_clicked_at == 99


@pytest.mark.asyncio
async def test_updates_on_missing_rows_do_not_create_them(session_factory):
    async with session_factory() as session:
        valentines = SQLAlchemyValentineRepository(session)
        ecards = SQLAlchemyECardRepository(session)
        await valentines.increment_views("nobody")
        await valentines.mark_yes_clicked("nobody", 1)
        await ecards.mark_viewed("nobody")
        await ecards.mark_responded("nobody", 1)
        await session.commit()

        assert await valentines.get_by_id("nobody") is None
        assert await ecards.get_by_id("nobody") is None


@pytest.mark.asyncio
async def test_import_is_idempotent(session_factory):
    batch = parse_export(
        {
            "valentines": {
                "AB12cd34": {"senderName": "Sam", "createdAt": 1707900000000, "views": 2},
                "card0001": {"from": "Sam", "to": "Alex", "responded": 1, "respondedAt": 5},
            }
        }
    )

    first = await write_batch(batch, session_factory)
    second = await write_batch(batch, session_factory)

    assert (first.valentines_inserted, first.ecards_inserted) == (1, 1)
    assert (second.valentines_existing, second.ecards_existing) == (1, 1)

    async with session_factory() as session:
        valentine = await SQLAlchemyValentineRepository(session).get_by_id("AB12cd34")
        ecard = await SQLAlchemyECardRepository(session).get_by_id("card0001")
    assert valentine.views == 2
    assert ecard.responded is True
    assert ecard.responded_at == 5
