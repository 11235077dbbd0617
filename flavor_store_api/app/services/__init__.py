"""
Service layer abstraction.

The flavor store lives here.  Handlers only talk to the store through
its public methods, so the in‑memory list could be swapped for a
database without changing the API layer.
"""
