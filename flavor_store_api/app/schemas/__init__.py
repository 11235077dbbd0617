"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store so the JSON representation can
evolve without touching the in‑memory record type.
"""
