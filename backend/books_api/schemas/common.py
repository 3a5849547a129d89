"""Common Pydantic schemas."""
from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class StatusResponse(BaseModel):
    """Health check response."""

    status: str
    app: str
