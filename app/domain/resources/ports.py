"""
Port interfaces (ABCs) for the resources bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod

from app.domain.resources.entities import Payload, ResourceId


class ResourceStore(ABC):
    """Port for a keyed store of resource payloads.

    Every operation fails loudly: create never overwrites, and read,
    update and delete never silently no-op on a missing id.
    """

    @abstractmethod
    def read(self, resource_id: ResourceId) -> Payload:
        """Return the payload for an id.

        Raises:
            ResourceNotFoundError: If the id is absent.
        """
        raise NotImplementedError

    @abstractmethod
    def create(self, resource_id: ResourceId, payload: Payload) -> None:
        """Insert a new entry.

        Raises:
            ResourceAlreadyExistsError: If the id is present.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, resource_id: ResourceId, payload: Payload) -> None:
        """Replace the payload of an existing entry.

        Raises:
            ResourceNotFoundError: If the id is absent.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, resource_id: ResourceId) -> None:
        """Remove an existing entry.

        Raises:
            ResourceNotFoundError: If the id is absent.
        """
        raise NotImplementedError

    @abstractmethod
    def next_id(self) -> ResourceId:
        """Return an id never used by this store instance."""
        raise NotImplementedError

    @abstractmethod
    def __contains__(self, resource_id: object) -> bool:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError
