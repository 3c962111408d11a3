from .common import SuccessResponse
from .valentine import ValentineCreate, ValentineCreated, ValentineResponse
from .ecard import ECardCreate, ECardCreated, ECardResponse

__all__ = [
    "SuccessResponse",
    "ValentineCreate",
    "ValentineCreated",
    "ValentineResponse",
    "ECardCreate",
    "ECardCreated",
    "ECardResponse",
]
