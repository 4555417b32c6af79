"""
Adapter: In-memory resource store.

Implements the ResourceStore port on a plain dict owned by the
instance. Contents are volatile and live as long as the process.
"""

import logging
import threading
from typing import Iterable, Optional

from app.domain.resources.entities import Payload, ResourceId
from app.domain.resources.errors import (
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from app.domain.resources.ports import ResourceStore

logger = logging.getLogger(__name__)


class InMemoryResourceStore(ResourceStore):
    """Dict-backed store with a single writer lock.

    Mutations and id generation hold ``_lock``; reads are single
    dict lookups and do not take it. Every id that has ever been
    present or issued is remembered so that ``next_id`` never hands
    out an id twice, including ids chosen by callers through upserts.
    """

    def __init__(
        self,
        name: str = "resource",
        initial: Optional[Iterable[tuple[ResourceId, Payload]]] = None,
    ) -> None:
        self.name = name
        self._entries: dict[ResourceId, Payload] = {}
        self._seen: set[ResourceId] = set()
        self._counter = 0
        self._lock = threading.Lock()
        for resource_id, payload in initial or ():
            self.create(resource_id, payload)

    def read(self, resource_id: ResourceId) -> Payload:
        try:
            return self._entries[resource_id]
        except KeyError:
            raise ResourceNotFoundError(resource_id) from None

    def create(self, resource_id: ResourceId, payload: Payload) -> None:
        with self._lock:
            if resource_id in self._entries:
                raise ResourceAlreadyExistsError(resource_id)
            self._entries[resource_id] = payload
            self._seen.add(resource_id)
        logger.debug("%s %d created", self.name, resource_id)

    def update(self, resource_id: ResourceId, payload: Payload) -> None:
        with self._lock:
            if resource_id not in self._entries:
                raise ResourceNotFoundError(resource_id)
            self._entries[resource_id] = payload
        logger.debug("%s %d updated", self.name, resource_id)

    def delete(self, resource_id: ResourceId) -> None:
        with self._lock:
            if resource_id not in self._entries:
                raise ResourceNotFoundError(resource_id)
            del self._entries[resource_id]
        logger.debug("%s %d deleted", self.name, resource_id)

    def next_id(self) -> ResourceId:
        with self._lock:
            self._counter += 1
            while self._counter in self._seen:
                self._counter += 1
            self._seen.add(self._counter)
            return self._counter

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
