"""
Application package initializer.

The project is split into the usual layers: ``core`` holds settings,
logging and error types, ``schemas`` the request and response models,
``services`` the in‑memory flavor store and ``api`` the HTTP routes
that glue them together.
"""

from .main import app, create_app  # noqa: F401
