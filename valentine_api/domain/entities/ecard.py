"""Domain entity — a shareable valentine e-card."""

from dataclasses import dataclass, field

from valentine_api.domain.clock import now_ms

DEFAULT_THEME = "classic"


@dataclass
class ECard:
    """An e-card from one person to another.

    Unlike valentines, e-cards only track whether they were viewed, not how
    many times.
    """

    ecard_id: str
    from_name: str
    to_name: str
    theme: str = DEFAULT_THEME
    message: str = ""
    created_at: int = field(default_factory=now_ms)
    viewed: bool = False
    responded: bool = False
    responded_at: int | None = None
