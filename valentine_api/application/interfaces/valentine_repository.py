"""Abstract repository interface (port) for Valentine persistence."""

from abc import ABC, abstractmethod

from valentine_api.domain.entities import Valentine


class ValentineRepository(ABC):
    """Port for valentine persistence — implemented in the infrastructure layer.

    Every method maps to a single statement in the backing store.  Updates
    do not check for existence first; an unknown id is a silent no-op.
    """

    @abstractmethod
    async def get_by_id(self, tracking_id: str) -> Valentine | None:
        """Retrieve a single valentine by its tracking id."""
        ...

    @abstractmethod
    async def create_if_absent(self, valentine: Valentine) -> bool:
        """Insert the valentine unless the tracking id exists.

        Returns True if a row was inserted, False if it already existed.
        """
        ...

    @abstractmethod
    async def increment_views(self, tracking_id: str) -> None:
        """Atomically add one to the view counter."""
        ...

    @abstractmethod
    async def mark_yes_clicked(self, tracking_id: str, clicked_at: int) -> None:
        """Set yes_clicked and overwrite yes_clicked_at."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make the writes issued so far durable."""
        ...
