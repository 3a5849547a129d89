"""Book schemas."""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _id_to_str(value: Any) -> Any:
    # Seed files sometimes carry numeric ids
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class Book(BaseModel):
    """A stored book record."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    genre: str = Field(..., min_length=1)
    year: int
    summary: str

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return _id_to_str(v)


class BookCreate(BaseModel):
    """Payload for creating a book. The id is optional."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    genre: str = Field(..., min_length=1)
    year: int = Field(..., strict=True)
    summary: str = Field(..., min_length=1)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return _id_to_str(v)


class BookUpdate(BaseModel):
    """Partial update payload. Only supplied fields are merged."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = Field(default=None, min_length=1)
    genre: Optional[str] = Field(default=None, min_length=1)
    year: Optional[int] = Field(default=None, strict=True)
    summary: Optional[str] = Field(default=None, min_length=1)

    def changes(self) -> dict[str, Any]:
        """Fields the caller actually supplied, nulls excluded."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
