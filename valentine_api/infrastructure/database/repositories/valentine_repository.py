"""Concrete repository implementation for Valentine backed by SQLAlchemy."""

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from valentine_api.application.interfaces import ValentineRepository
from valentine_api.domain.entities import Valentine
from valentine_api.infrastructure.database.models import ValentineModel
from valentine_api.infrastructure.database.statements import insert_or_ignore


class SQLAlchemyValentineRepository(ValentineRepository):
    """Implements the ValentineRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ValentineModel) -> Valentine:
        """Map ORM model → domain entity."""
        return Valentine(
            tracking_id=model.tracking_id,
            sender_name=model.sender_name,
            created_at=model.created_at,
            views=model.views,
            yes_clicked=model.yes_clicked == 1,
            yes_clicked_at=model.yes_clicked_at,
        )

    def _to_row(self, entity: Valentine) -> dict:
        """Map domain entity → column values (for creation)."""
        return {
            "tracking_id": entity.tracking_id,
            "sender_name": entity.sender_name,
            "created_at": entity.created_at,
            "views": entity.views,
            "yes_clicked": 1 if entity.yes_clicked else 0,
            "yes_clicked_at": entity.yes_clicked_at,
        }

    async def get_by_id(self, tracking_id: str) -> Valentine | None:
        result = await self._session.get(ValentineModel, tracking_id, populate_existing=True)
        return self._to_entity(result) if result else None

    async def create_if_absent(self, valentine: Valentine) -> bool:
        stmt = insert_or_ignore(
            self._session.get_bind().dialect.name,
            ValentineModel.__table__,
            self._to_row(valentine),
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def increment_views(self, tracking_id: str) -> None:
        stmt = (
            update(ValentineModel)
            .where(ValentineModel.tracking_id == tracking_id)
            .values(views=ValentineModel.views + 1)
        )
        await self._session.execute(stmt)

    async def mark_yes_clicked(self, tracking_id: str, clicked_at: int) -> None:
        stmt = (
            update(ValentineModel)
            .where(ValentineModel.tracking_id == tracking_id)
            .values(yes_clicked=1, yes_clicked_at=clicked_at)
        )
        await self._session.execute(stmt)

    async def commit(self) -> None:
        await self._session.commit()
