from .valentine_repository import ValentineRepository
from .ecard_repository import ECardRepository

__all__ = [
    "ValentineRepository",
    "ECardRepository",
]
