"""Application service (use case) for ECard operations."""

import logging

from valentine_api.application.interfaces import ECardRepository
from valentine_api.application.schemas import ECardCreate
from valentine_api.domain.clock import now_ms
from valentine_api.domain.entities import DEFAULT_THEME, ECard
from valentine_api.domain.exceptions import EntityNotFoundError, RequiredFieldError

logger = logging.getLogger(__name__)


class ECardService:
    """Orchestrates e-card lifecycle logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ECardRepository):
        self._repository = repository

    async def get_ecard(self, ecard_id: str) -> ECard:
        ecard = await self._repository.get_by_id(ecard_id)
        if ecard is None:
            raise EntityNotFoundError("ECard", ecard_id)
        return ecard

    async def create_ecard(self, data: ECardCreate) -> str:
        if not data.ecard_id or not data.from_name or not data.to_name:
            raise RequiredFieldError(
                ["ecardId", "from", "to"],
                "ecardId, from, and to are required",
            )

        ecard = ECard(
            ecard_id=data.ecard_id,
            from_name=data.from_name,
            to_name=data.to_name,
            theme=data.theme or DEFAULT_THEME,
            message=data.message,
        )
        inserted = await self._repository.create_if_absent(ecard)
        await self._repository.commit()
        if inserted:
            logger.info("Created e-card %s (theme=%s)", ecard.ecard_id, ecard.theme)
        else:
            logger.debug("E-card %s already exists — create ignored", ecard.ecard_id)
        return ecard.ecard_id

    async def mark_viewed(self, ecard_id: str) -> None:
        await self._repository.mark_viewed(ecard_id)
        await self._repository.commit()

    async def record_response(self, ecard_id: str) -> None:
        await self._repository.mark_responded(ecard_id, now_ms())
        await self._repository.commit()
        logger.info("E-card %s answered yes", ecard_id)
