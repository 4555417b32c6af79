"""
Dependency injection for the aggregation bounded context.

The aggregation client is built once per application from settings
and stored on ``app.state``. Tests replace it through
``app.dependency_overrides``.
"""

from fastapi import Request

from app.application.aggregation.aggregate import AggregationClient
from app.core.config import Settings
from app.infrastructure.aggregation.downstream_client import (
    DownstreamClient,
    RetryPolicy,
)


def build_aggregation_client(app_settings: Settings) -> AggregationClient:
    """Build an AggregationClient for the boat and brand services."""
    downstream = DownstreamClient(
        timeout=app_settings.downstream_timeout_seconds,
        retry_policy=RetryPolicy(max_attempts=app_settings.downstream_max_attempts),
    )
    return AggregationClient(
        downstream=downstream,
        primary_base_url=app_settings.boat_service_url,
        secondary_base_url=app_settings.brand_service_url,
    )


def get_aggregation_client(request: Request) -> AggregationClient:
    return request.app.state.aggregation_client
