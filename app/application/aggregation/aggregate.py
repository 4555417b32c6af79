"""
Use case: Aggregate a primary resource with its secondary resource.

Input: a validated primary id.
Output: AggregationResult.
Side effects: Two sequential downstream GET requests.
Failure cases: DownstreamStatusError (non-2xx from either hop),
    DownstreamUnavailableError (no response within the retry bound),
    DownstreamMalformedError (missing join key or fields).
"""

import logging
from typing import Any
from urllib.parse import quote

from app.domain.aggregation.entities import AggregationResult
from app.domain.aggregation.errors import (
    DownstreamMalformedError,
    DownstreamStatusError,
)
from app.infrastructure.aggregation.downstream_client import DownstreamClient

logger = logging.getLogger(__name__)


class AggregationClient:
    """Chains two dependent downstream fetches into one result.

    The secondary lookup depends on a key read from the primary
    response, so the hops always run one after the other. A failure
    on either hop fails the whole aggregation; the caller is not told
    which hop failed.
    """

    def __init__(
        self,
        downstream: DownstreamClient,
        primary_base_url: str,
        secondary_base_url: str,
        join_key: str = "brand",
    ) -> None:
        """Initialize the use case.

        Args:
            downstream: Client used for both hops.
            primary_base_url: Base URL of the primary service (boats).
            secondary_base_url: Base URL of the secondary service (brands).
            join_key: Field of the primary response naming the
                secondary resource.
        """
        self._downstream = downstream
        self._primary_base_url = primary_base_url.rstrip("/")
        self._secondary_base_url = secondary_base_url.rstrip("/")
        self._join_key = join_key

    async def aggregate(self, primary_id: Any) -> AggregationResult:
        """Fetch the primary resource, then its secondary, and merge them."""
        primary_url = f"{self._primary_base_url}/{quote(str(primary_id), safe='')}"
        primary = await self._fetch(primary_url)

        key = primary.get(self._join_key)
        if not isinstance(key, str) or not key:
            raise DownstreamMalformedError(
                primary_url, f"missing {self._join_key!r}"
            )
        color = primary.get("color")
        if not isinstance(color, str):
            raise DownstreamMalformedError(primary_url, "missing 'color'")

        secondary_url = f"{self._secondary_base_url}/{quote(key, safe='')}"
        secondary = await self._fetch(secondary_url)

        name = secondary.get("name")
        if not isinstance(name, str):
            raise DownstreamMalformedError(secondary_url, "missing 'name'")

        logger.info("Aggregated %s with %s %r", primary_id, self._join_key, key)
        return AggregationResult(
            id=primary.get("id", primary_id),
            color=color,
            brand=name,
        )

    async def _fetch(self, url: str) -> dict[str, Any]:
        response = await self._downstream.call(url)
        if not response.is_success:
            raise DownstreamStatusError(url, response.status_code)
        try:
            body = response.json()
        except ValueError:
            raise DownstreamMalformedError(url, "body is not JSON") from None
        if not isinstance(body, dict):
            raise DownstreamMalformedError(url, "body is not an object")
        return body
