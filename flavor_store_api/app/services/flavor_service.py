"""
Service layer for flavor records.

``FlavorStore`` owns the ordered, in‑memory collection of flavors and
implements the four operations exposed over HTTP: list, create,
update and delete.  Lookups by id are linear scans over the list,
which keeps listing in insertion order without a second index.

Every public method holds a single ``threading.Lock`` for its whole
body, so no two operations interleave mid‑mutation.

New ids come from a high‑water mark that only moves forward, so an id
is never issued twice during the lifetime of a store, even after the
record holding the highest id is deleted.
"""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from flavor_store_api.app.core.errors import FlavorNotFoundError
from flavor_store_api.app.schemas.flavor import FlavorRead

logger = logging.getLogger(__name__)

SEED_FLAVORS = (
    (1, "strawberry"),
    (2, "mint chocolate"),
)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


@dataclass
class Flavor:
    id: int
    flavor: Any = None


def parse_flavor_id(raw: str) -> Optional[int]:
    """Parse the leading base‑10 integer of a path segment.

    ``"12"`` and ``"12abc"`` both give ``12``; a segment without a
    leading integer gives ``None``, which never matches a record.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


class FlavorStore:
    """Ordered in‑memory collection of flavor records."""

    def __init__(self, initial: Optional[Iterable[Flavor]] = None) -> None:
        if initial is None:
            initial = [Flavor(id=fid, flavor=name) for fid, name in SEED_FLAVORS]
        self._flavors: List[Flavor] = []
        self._last_id = 0
        self._lock = threading.Lock()
        for record in initial:
            if any(f.id == record.id for f in self._flavors):
                raise ValueError(f"Duplicate flavor id {record.id}")
            self._flavors.append(Flavor(id=record.id, flavor=record.flavor))
            self._last_id = max(self._last_id, record.id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._flavors)

    def list_flavors(self) -> List[FlavorRead]:
        with self._lock:
            return [FlavorRead.model_validate(f) for f in self._flavors]

    def get_flavor(self, flavor_id: Optional[int]) -> FlavorRead:
        with self._lock:
            return FlavorRead.model_validate(self._find(flavor_id))

    def create_flavor(self, flavor: Any = None) -> FlavorRead:
        """Append a new record and return it.

        The flavor text is stored as given; ``None`` is accepted.
        """
        with self._lock:
            self._last_id += 1
            record = Flavor(id=self._last_id, flavor=flavor)
            self._flavors.append(record)
            logger.info("Created flavor %s", record.id)
            return FlavorRead.model_validate(record)

    def update_flavor(self, flavor_id: Optional[int], flavor: Any = None) -> FlavorRead:
        """Replace the text of an existing record in place.

        Raises ``FlavorNotFoundError`` if no record has ``flavor_id``.
        """
        with self._lock:
            record = self._find(flavor_id)
            record.flavor = flavor
            logger.info("Updated flavor %s", record.id)
            return FlavorRead.model_validate(record)

    def delete_flavor(self, flavor_id: Optional[int]) -> FlavorRead:
        """Remove a record and return it.

        Raises ``FlavorNotFoundError`` if no record has ``flavor_id``.
        """
        with self._lock:
            index = self._index_of(flavor_id)
            record = self._flavors.pop(index)
            logger.info("Deleted flavor %s", record.id)
            return FlavorRead.model_validate(record)

    def _index_of(self, flavor_id: Optional[int]) -> int:
        # Caller must hold the lock.
        if flavor_id is not None:
            for index, record in enumerate(self._flavors):
                if record.id == flavor_id:
                    return index
        logger.warning("Flavor %s not found", flavor_id)
        raise FlavorNotFoundError(flavor_id)

    def _find(self, flavor_id: Optional[int]) -> Flavor:
        return self._flavors[self._index_of(flavor_id)]
