"""Abstract repository interface (port) for ECard persistence."""

from abc import ABC, abstractmethod

from valentine_api.domain.entities import ECard


class ECardRepository(ABC):
    """Port for e-card persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, ecard_id: str) -> ECard | None:
        """Retrieve a single e-card by its id."""
        ...

    @abstractmethod
    async def create_if_absent(self, ecard: ECard) -> bool:
        """Insert the e-card unless the id exists. Returns True if inserted."""
        ...

    @abstractmethod
    async def mark_viewed(self, ecard_id: str) -> None:
        """Set the viewed flag."""
        ...

    @abstractmethod
    async def mark_responded(self, ecard_id: str, responded_at: int) -> None:
        """Set responded and overwrite responded_at."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make the writes issued so far durable."""
        ...
