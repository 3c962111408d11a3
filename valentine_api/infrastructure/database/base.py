"""Declarative base shared by the ``valentines`` and ``ecards`` tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
