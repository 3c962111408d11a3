from .valentine import Valentine
from .ecard import DEFAULT_THEME, ECard

__all__ = [
    "Valentine",
    "ECard",
    "DEFAULT_THEME",
]
