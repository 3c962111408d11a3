from .valentine_repository import SQLAlchemyValentineRepository
from .ecard_repository import SQLAlchemyECardRepository

__all__ = [
    "SQLAlchemyValentineRepository",
    "SQLAlchemyECardRepository",
]
