"""
Top‑level API router.

Aggregates the domain routers under one ``APIRouter``.  The
application mounts it under ``/api``; add new domains here.
"""

from fastapi import APIRouter

from .endpoints import flavors

router = APIRouter()

router.include_router(flavors.router, prefix="/flavors", tags=["flavors"])
