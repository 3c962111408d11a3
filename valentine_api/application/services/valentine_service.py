"""Application service (use case) for Valentine operations."""

import logging

from valentine_api.application.interfaces import ValentineRepository
from valentine_api.application.schemas import ValentineCreate
from valentine_api.domain.clock import now_ms
from valentine_api.domain.entities import Valentine
from valentine_api.domain.exceptions import EntityNotFoundError, RequiredFieldError

logger = logging.getLogger(__name__)


class ValentineService:
    """Orchestrates valentine lifecycle logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ValentineRepository):
        self._repository = repository

    async def get_valentine(self, tracking_id: str) -> Valentine:
        valentine = await self._repository.get_by_id(tracking_id)
        if valentine is None:
            raise EntityNotFoundError("Valentine", tracking_id)
        return valentine

    async def create_valentine(self, data: ValentineCreate) -> str:
        """Create the valentine if it does not exist yet; returns its tracking id.

        A second create with the same id leaves the first row untouched.
        """
        if not data.tracking_id or not data.sender_name:
            raise RequiredFieldError(
                ["trackingId", "senderName"],
                "trackingId and senderName are required",
            )

        valentine = Valentine(tracking_id=data.tracking_id, sender_name=data.sender_name)
        inserted = await self._repository.create_if_absent(valentine)
        await self._repository.commit()
        if inserted:
            logger.info("Created valentine %s", valentine.tracking_id)
        else:
            logger.debug("Valentine %s already exists — create ignored", valentine.tracking_id)
        return valentine.tracking_id

    async def record_view(self, tracking_id: str) -> None:
        await self._repository.increment_views(tracking_id)
        await self._repository.commit()

    async def record_yes(self, tracking_id: str) -> None:
        # Repeated calls move the timestamp forward to the latest click.
        await self._repository.mark_yes_clicked(tracking_id, now_ms())
        await self._repository.commit()
        logger.info("Valentine %s answered yes", tracking_id)
