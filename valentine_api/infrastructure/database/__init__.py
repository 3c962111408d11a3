from .base import Base
from .models import ValentineModel, ECardModel
from .session import engine, async_session_factory, create_tables, get_db_session

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "create_tables",
    "get_db_session",
    "ValentineModel",
    "ECardModel",
]
