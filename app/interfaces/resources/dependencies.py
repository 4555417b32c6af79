"""
Dependency injection for the resources bounded context.

One in-memory store per resource type lives on ``app.state.stores``;
handlers are built per request around the store of their type.
"""

from typing import Callable

from fastapi import Request

from app.application.resources.handler import ResourceHandler
from app.domain.resources.entities import Payload
from app.domain.resources.ports import ResourceStore
from app.infrastructure.resources.memory_store import InMemoryResourceStore

RESOURCE_TYPES = ("bicycle", "boat")

SEED_DATA: dict[str, dict[int, Payload]] = {
    "bicycle": {
        1: Payload(brand="Veloretti", color="green"),
        2: Payload(brand="Batavus", color="yellow"),
    },
    "boat": {
        1: Payload(brand="Chaparral", color="red"),
        2: Payload(brand="Chaparral", color="blue"),
    },
}


def build_stores(seed: bool = True) -> dict[str, ResourceStore]:
    """Create one store per resource type, optionally pre-populated."""
    return {
        name: InMemoryResourceStore(
            name=name,
            initial=SEED_DATA.get(name, {}).items() if seed else None,
        )
        for name in RESOURCE_TYPES
    }


def resource_handler_dependency(
    resource_name: str,
) -> Callable[[Request], ResourceHandler]:
    """Return a FastAPI dependency building the handler for a resource type."""

    def get_resource_handler(request: Request) -> ResourceHandler:
        store = request.app.state.stores[resource_name]
        return ResourceHandler(store=store, resource_name=resource_name)

    return get_resource_handler
