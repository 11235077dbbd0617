"""
Error types shared by the service and API layers.

There is exactly one domain error: an id‑addressed operation that
finds no matching flavor.  The service raises ``FlavorNotFoundError``
and the exception handler registered by ``create_app`` turns it into
a ``404`` with a fixed ``{"error": ...}`` body.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

NOT_FOUND_MESSAGE = "Flavor not found"


class FlavorNotFoundError(LookupError):
    def __init__(self, flavor_id: Optional[int], message: str = NOT_FOUND_MESSAGE):
        super().__init__(message)
        self.flavor_id = flavor_id
        self.message = message
        self.status_code = 404


async def flavor_not_found_handler(request: Request, exc: FlavorNotFoundError) -> JSONResponse:
    """Render ``FlavorNotFoundError`` as ``404 {"error": "Flavor not found"}``."""
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)
