"""
API package.

``router.py`` exposes a top‑level ``router`` which includes every
domain router from ``endpoints``.  The application mounts it under
the ``/api`` prefix.
"""
