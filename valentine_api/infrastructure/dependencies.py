"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from valentine_api.application.services import ECardService, ValentineService
from valentine_api.infrastructure.database.repositories import (
    SQLAlchemyECardRepository,
    SQLAlchemyValentineRepository,
)
from valentine_api.infrastructure.database.session import get_db_session


async def get_valentine_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ValentineService, None]:
    """Provides a ValentineService instance with its repository wired up."""
    repository = SQLAlchemyValentineRepository(session)
    yield ValentineService(repository)


async def get_ecard_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ECardService, None]:
    """Provides an ECardService instance with its repository wired up."""
    repository = SQLAlchemyECardRepository(session)
    yield ECardService(repository)
