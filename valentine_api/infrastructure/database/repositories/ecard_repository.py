"""Concrete repository implementation for ECard backed by SQLAlchemy."""

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from valentine_api.application.interfaces import ECardRepository
from valentine_api.domain.entities import ECard
from valentine_api.infrastructure.database.models import ECardModel
from valentine_api.infrastructure.database.statements import insert_or_ignore


class SQLAlchemyECardRepository(ECardRepository):
    """Implements the ECardRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ECardModel) -> ECard:
        """Map ORM model → domain entity."""
        return ECard(
            ecard_id=model.ecard_id,
            from_name=model.from_name,
            to_name=model.to_name,
            theme=model.theme,
            message=model.message,
            created_at=model.created_at,
            viewed=model.viewed == 1,
            responded=model.responded == 1,
            responded_at=model.responded_at,
        )

    def _to_row(self, entity: ECard) -> dict:
        """Map domain entity → column values (for creation)."""
        return {
            "ecard_id": entity.ecard_id,
            "from_name": entity.from_name,
            "to_name": entity.to_name,
            "theme": entity.theme,
            "message": entity.message,
            "created_at": entity.created_at,
            "viewed": 1 if entity.viewed else 0,
            "responded": 1 if entity.responded else 0,
            "responded_at": entity.responded_at,
        }

    async def get_by_id(self, ecard_id: str) -> ECard | None:
        result = await self._session.get(ECardModel, ecard_id, populate_existing=True)
        return self._to_entity(result) if result else None

    async def create_if_absent(self, ecard: ECard) -> bool:
        stmt = insert_or_ignore(
            self._session.get_bind().dialect.name,
            ECardModel.__table__,
            self._to_row(ecard),
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def mark_viewed(self, ecard_id: str) -> None:
        stmt = update(ECardModel).where(ECardModel.ecard_id == ecard_id).values(viewed=1)
        await self._session.execute(stmt)

    async def mark_responded(self, ecard_id: str, responded_at: int) -> None:
        stmt = (
            update(ECardModel)
            .where(ECardModel.ecard_id == ecard_id)
            .values(responded=1, responded_at=responded_at)
        )
        await self._session.execute(stmt)

    async def commit(self) -> None:
        await self._session.commit()
