"""Domain entity — a valentine tracking link."""

from dataclasses import dataclass, field

from valentine_api.domain.clock import now_ms


@dataclass
class Valentine:
    """A "Will you be my valentine?" link created by a sender.

    The tracking id is generated by the front end and is the only key.
    ``yes_clicked_at`` is set whenever ``yes_clicked`` flips to True.
    """

    tracking_id: str
    sender_name: str
    created_at: int = field(default_factory=now_ms)
    views: int = 0
    yes_clicked: bool = False
    yes_clicked_at: int | None = None
