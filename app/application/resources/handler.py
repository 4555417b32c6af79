"""
Use case: CRUD operations on one resource type.

Input: raw identifiers and request bodies as received by the router.
Output: HandlerResult (status code and optional JSON body).
Side effects: Mutates the injected ResourceStore.
Failure cases: InvalidRequestError (before any store call),
    ResourceNotFoundError, ResourceAlreadyExistsError, CorruptResourceError.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from app.application.resources.validation import (
    validate_create_body,
    validate_id,
    validate_payload,
)
from app.domain.resources.errors import (
    CorruptResourceError,
    InvalidRequestError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from app.domain.resources.ports import ResourceStore

logger = logging.getLogger(__name__)

HTTP_200 = 200
HTTP_201 = 201
HTTP_204 = 204


@dataclass(frozen=True)
class HandlerResult:
    """Outcome of a successful operation.

    Attributes:
        status_code: 200, 201 or 204.
        body: JSON body, or None for 204.
    """

    status_code: int
    body: Optional[dict[str, Any]] = None


class UpsertState(Enum):
    """States of the PUT state machine."""

    UPDATING = "updating"
    CREATING_ON_MISS = "creating_on_miss"
    DONE = "done"
    FAILED = "failed"


class ResourceHandler:
    """Orchestrates validation and store access for one resource type.

    Every operation validates its input first, so a store is never
    reached with an invalid id or payload. Store errors propagate
    unchanged and are translated by the centralized error handlers.
    """

    def __init__(self, store: ResourceStore, resource_name: str) -> None:
        """Initialize the handler.

        Args:
            store: Store holding this resource type.
            resource_name: Name used in log messages (e.g. "bicycle").
        """
        self._store = store
        self._name = resource_name

    def read(self, raw_id: Any) -> HandlerResult:
        resource_id = validate_id(raw_id)
        payload = self._store.read(resource_id)
        # Stored entries are re-checked so a bad shape never leaves the service.
        try:
            sanitized = validate_payload(payload.to_dict())
        except InvalidRequestError:
            raise CorruptResourceError(resource_id) from None
        return HandlerResult(HTTP_200, sanitized.to_dict())

    def create(self, raw_body: Any) -> HandlerResult:
        payload = validate_create_body(raw_body)
        resource_id = self._store.next_id()
        try:
            self._store.create(resource_id, payload)
        except ResourceAlreadyExistsError:
            logger.error(
                "Generated %s id %d was already taken", self._name, resource_id
            )
            raise
        logger.info("Created %s %d", self._name, resource_id)
        return HandlerResult(HTTP_201, {"id": resource_id})

    def update(self, raw_id: Any, raw_body: Any) -> HandlerResult:
        """Replace an existing resource; a missing id is NOT_FOUND."""
        resource_id = validate_id(raw_id)
        payload = validate_create_body(raw_body)
        self._store.update(resource_id, payload)
        logger.info("Updated %s %d", self._name, resource_id)
        return HandlerResult(HTTP_204)

    def upsert(self, raw_id: Any, raw_body: Any) -> HandlerResult:
        """Update the resource, or create it when the id is unknown.

        The status code tells the caller which path was taken:
        204 for an update, 201 for a creation.

        Raises:
            InvalidRequestError: On an invalid id or body.
            ResourceAlreadyExistsError: If a concurrent create won the
                id between the failed update and the fallback create.
        """
        resource_id = validate_id(raw_id)
        payload = validate_create_body(raw_body)

        state = UpsertState.UPDATING
        try:
            self._store.update(resource_id, payload)
            result = HandlerResult(HTTP_204)
        except ResourceNotFoundError:
            state = self._transition(resource_id, state, UpsertState.CREATING_ON_MISS)
            try:
                self._store.create(resource_id, payload)
            except ResourceAlreadyExistsError:
                self._transition(resource_id, state, UpsertState.FAILED)
                raise
            result = HandlerResult(HTTP_201, {"id": resource_id})

        self._transition(resource_id, state, UpsertState.DONE)
        return result

    def _transition(
        self, resource_id: int, current: UpsertState, new: UpsertState
    ) -> UpsertState:
        level = logging.ERROR if new is UpsertState.FAILED else logging.DEBUG
        logger.log(
            level,
            "Upsert %s %d: %s -> %s",
            self._name,
            resource_id,
            current.value,
            new.value,
        )
        return new

    def delete(self, raw_id: Any) -> HandlerResult:
        resource_id = validate_id(raw_id)
        self._store.delete(resource_id)
        logger.info("Deleted %s %d", self._name, resource_id)
        return HandlerResult(HTTP_204)
