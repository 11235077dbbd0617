"""
Pydantic schemas for flavor records.

A flavor record is an ``id``/``flavor`` pair.  The write schema is
loose: the ``flavor`` value is not checked for type,
presence or length, and a missing value is stored as ``None``.
"""

from typing import Any

from pydantic import BaseModel, Field


class FlavorWrite(BaseModel):
    """Request body for creating or updating a flavor."""

    flavor: Any = Field(None, description="Flavor name, e.g. \"vanilla\"")


class FlavorRead(BaseModel):
    """Schema for reading a flavor record."""

    id: int
    flavor: Any = None

    model_config = {
        "from_attributes": True,
    }


class FlavorDeleted(BaseModel):
    """Confirmation returned after a successful delete."""

    message: str = "Flavor deleted successfully"
    deleted: FlavorRead


class ErrorResponse(BaseModel):
    """Body of a 404 response, e.g. ``{"error": "Flavor not found"}``."""

    error: str
