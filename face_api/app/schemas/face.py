"""
Pydantic models for faces.

A face is a small record carrying free text, a list of string tags and
a due timestamp.  The timestamp keeps the UTC offset it was submitted
with; listing by due date compares calendar dates in that offset.
"""

from datetime import datetime
from typing import Any, List

from pydantic import AwareDatetime, BaseModel, ConfigDict, field_validator


class FaceCreate(BaseModel):
    """Schema for creating a face.

    All three fields are required and unknown fields are rejected.  The
    ``due`` value must be an RFC 3339 timestamp string with an explicit
    offset, e.g. ``2024-05-01T09:30:00+02:00`` or ``2024-05-01T00:00:00Z``;
    numeric Unix timestamps are not accepted.
    """

    text: str
    tags: List[str]
    due: AwareDatetime

    model_config = ConfigDict(extra="forbid")

    @field_validator("due", mode="before")
    @classmethod
    def due_must_be_string(cls, v: Any) -> Any:
        if not isinstance(v, str):
            raise ValueError("due must be an RFC 3339 date-time string")
        return v


class FaceCreated(BaseModel):
    """Response returned after a face has been stored."""

    id: int


class Face(BaseModel):
    """A stored face as returned by the API."""

    id: int
    text: str
    tags: List[str]
    due: datetime
