"""Response DTOs shared by both record types."""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Returned by every write that has nothing else to echo."""

    success: bool = True
