"""Pydantic DTOs (Data Transfer Objects) for the Valentine feature.

The wire format is camelCase; field names stay snake_case in Python and are
mapped with aliases.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from valentine_api.domain.sanitization import sanitize


class ValentineCreate(BaseModel):
    """Schema for creating a valentine.

    Fields are sanitized on the way in, and anything that is not a string
    (missing, null, numbers) becomes ``""``.  Emptiness is checked by the
    service so the caller gets a single combined error message.
    """

    tracking_id: str = Field("", alias="trackingId", examples=["AB12cd34"])
    sender_name: str = Field("", alias="senderName", examples=["Sam"])

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("tracking_id", "sender_name", mode="before")
    @classmethod
    def _sanitize(cls, value: Any) -> str:
        return sanitize(value)


class ValentineCreated(BaseModel):
    """Returned after a create call — echoes the tracking id."""

    success: bool = True
    tracking_id: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValentineResponse(BaseModel):
    """Schema returned to the dashboard."""

    sender_name: str
    created_at: int
    views: int
    yes_clicked: bool
    yes_clicked_at: int | None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
