from .valentine_service import ValentineService
from .ecard_service import ECardService

__all__ = [
    "ValentineService",
    "ECardService",
]
