from .valentine import ValentineModel
from .ecard import ECardModel

__all__ = [
    "ValentineModel",
    "ECardModel",
]
