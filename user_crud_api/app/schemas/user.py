"""
Pydantic models for user data.

``UserPayload`` is what clients send on create and update; it is
validated strictly so that unknown fields and type mismatches are
rejected instead of coerced.  ``UserRead`` is a stored row.

Integrity constraints live in the store: ``email`` is unique across
all records and ``name`` must be non-empty.  The ``id`` is always
assigned by the store.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


# Range of a SQLite INTEGER column; larger values cannot be bound at all.
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Ada"])
    # Unique across all records; enforced by the store.
    email: str = Field(..., examples=["ada@example.com"])
    age: int = Field(0, ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX, examples=[30])


class UserPayload(UserBase):
    """Body of ``POST /users`` and ``PUT /users/{id}``.

    ``id`` is accepted so that a client may send back a record it
    previously read, but it is never written: the store assigns ids on
    create and the path selects the target on update.  A field that is
    omitted takes its default, which on update overwrites the stored
    value (``age`` becomes ``0``).
    """

    id: int = Field(0, ge=0, le=SQLITE_INTEGER_MAX)

    model_config = {
        "extra": "forbid",
        "strict": True,
    }

    def echo(self) -> Dict[str, Any]:
        """Return the payload as submitted, for the create response."""
        return self.model_dump()


class UserRead(UserBase):
    """Schema for a user as stored."""

    id: int
