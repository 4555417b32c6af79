"""
Domain entities for the resources bounded context.

They contain no framework imports and no IO operations.
"""

from dataclasses import asdict, dataclass

# Largest integer a double can represent exactly (2**53 - 1).
MAX_SAFE_INTEGER = 2**53 - 1

ResourceId = int


@dataclass(frozen=True)
class Payload:
    """The stored body of a resource: a brand and a color."""

    brand: str
    color: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
