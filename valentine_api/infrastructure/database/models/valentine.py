"""SQLAlchemy ORM model for the Valentine entity."""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from valentine_api.infrastructure.database.base import Base


class ValentineModel(Base):
    """ORM model — maps to the 'valentines' table.

    Flags are stored as 0/1 integers and timestamps as epoch milliseconds,
    matching rows carried over from the Firebase export.
    """

    __tablename__ = "valentines"

    tracking_id: Mapped[str] = mapped_column(String(100), primary_key=True)
    sender_name: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    yes_clicked: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    yes_clicked_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    def __repr__(self) -> str:
        return f"<ValentineModel(tracking_id={self.tracking_id}, views={self.views})>"
