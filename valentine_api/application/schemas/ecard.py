"""Pydantic DTOs (Data Transfer Objects) for the ECard feature."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from valentine_api.domain.sanitization import sanitize, sanitize_message


class ECardCreate(BaseModel):
    """Schema for creating an e-card. Sanitizes every field on input."""

    ecard_id: str = Field("", alias="ecardId", examples=["Xy9Kp2Qa"])
    from_name: str = Field("", alias="from", examples=["Sam"])
    to_name: str = Field("", alias="to", examples=["Alex"])
    theme: str = Field("", examples=["classic"])
    message: str = Field("", examples=["Roses are red & violets are blue"])

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("ecard_id", "from_name", "to_name", "theme", mode="before")
    @classmethod
    def _sanitize(cls, value: Any) -> str:
        return sanitize(value)

    @field_validator("message", mode="before")
    @classmethod
    def _sanitize_message(cls, value: Any) -> str:
        return sanitize_message(value)


class ECardCreated(BaseModel):
    """Returned after a create call — echoes the e-card id."""

    success: bool = True
    ecard_id: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ECardResponse(BaseModel):
    """Schema returned to the card viewer."""

    from_name: str = Field(alias="from")
    to_name: str = Field(alias="to")
    theme: str
    message: str
    created_at: int
    viewed: bool
    responded: bool
    responded_at: int | None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
