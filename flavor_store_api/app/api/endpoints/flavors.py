"""
Flavor endpoints.

CRUD over the shop's in‑memory flavor list.  The ``{flavor_id}`` path
segment is taken as a string and parsed leniently, so a malformed id
is reported as a missing flavor (404) rather than a validation error.

Request bodies are never rejected.  Only a JSON object is read; any
other body (no body, a non‑JSON content type, an array, malformed
JSON) or an object without a ``flavor`` key stores ``null``.
"""

import json
from typing import Any, List

from fastapi import APIRouter, Depends, Request

from flavor_store_api.app.schemas.flavor import (
    ErrorResponse,
    FlavorDeleted,
    FlavorRead,
    FlavorWrite,
)
from flavor_store_api.app.services.flavor_service import FlavorStore, parse_flavor_id

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Flavor not found"}}
_FLAVOR_BODY = {
    "requestBody": {
        "required": False,
        "content": {"application/json": {"schema": FlavorWrite.model_json_schema()}},
    }
}


def get_flavor_store(request: Request) -> FlavorStore:
    """Return the store owned by the running application."""
    return request.app.state.flavor_store


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def flavor_from_body(request: Request) -> Any:
    """Return the ``flavor`` value of a JSON object body, else ``None``."""
    if not _is_json(request.headers.get("content-type", "")):
        return None
    body = await request.body()
    if not body:
        return None
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    return FlavorWrite.model_validate(payload).flavor


@router.get("", response_model=List[FlavorRead])
async def list_flavors(store: FlavorStore = Depends(get_flavor_store)) -> List[FlavorRead]:
    """Return every flavor in insertion order."""
    return store.list_flavors()


@router.post("", response_model=FlavorRead, openapi_extra=_FLAVOR_BODY)
async def create_flavor(
    flavor: Any = Depends(flavor_from_body),
    store: FlavorStore = Depends(get_flavor_store),
) -> FlavorRead:
    """Add a new flavor and return it with its assigned id."""
    return store.create_flavor(flavor)


@router.put("/{flavor_id}", response_model=FlavorRead, responses=_NOT_FOUND, openapi_extra=_FLAVOR_BODY)
async def update_flavor(
    flavor_id: str,
    flavor: Any = Depends(flavor_from_body),
    store: FlavorStore = Depends(get_flavor_store),
) -> FlavorRead:
    """Replace the flavor text of an existing record."""
    return store.update_flavor(parse_flavor_id(flavor_id), flavor)


@router.delete("/{flavor_id}", response_model=FlavorDeleted, responses=_NOT_FOUND)
async def delete_flavor(
    flavor_id: str,
    store: FlavorStore = Depends(get_flavor_store),
) -> FlavorDeleted:
    """Remove a flavor and echo it back."""
    deleted = store.delete_flavor(parse_flavor_id(flavor_id))
    return FlavorDeleted(deleted=deleted)
