"""
Domain entities for the aggregation bounded context.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class AggregationResult:
    """A primary resource merged with the name resolved from its join key.

    Built per request and never persisted.
    """

    id: Any
    color: str
    brand: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
