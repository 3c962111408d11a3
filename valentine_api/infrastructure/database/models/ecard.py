"""SQLAlchemy ORM model for the ECard entity."""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from valentine_api.infrastructure.database.base import Base


class ECardModel(Base):
    """ORM model — maps to the 'ecards' table."""

    __tablename__ = "ecards"

    ecard_id: Mapped[str] = mapped_column(String(100), primary_key=True)
    from_name: Mapped[str] = mapped_column(Text, nullable=False)
    to_name: Mapped[str] = mapped_column(Text, nullable=False)
    theme: Mapped[str] = mapped_column(String(100), nullable=False, default="classic")
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    viewed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    responded: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    responded_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    def __repr__(self) -> str:
        return f"<ECardModel(ecard_id={self.ecard_id}, theme='{self.theme}')>"
