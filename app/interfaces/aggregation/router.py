"""
FastAPI router for the boat aggregation endpoint.

Validates the id, delegates to AggregationClient and returns the
merged result. Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends

from app.application.aggregation.aggregate import AggregationClient
from app.application.resources.validation import validate_id
from app.interfaces.aggregation.dependencies import get_aggregation_client
from app.interfaces.schemas import AggregationResponse, ErrorResponse

router = APIRouter(tags=["aggregation"])


@router.get(
    "/{resource_id}",
    response_model=AggregationResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    summary="Get a boat with its brand name",
    description="Fetches the boat, then the brand it references, and merges them.",
)
async def aggregate_boat(
    resource_id: str,
    client: AggregationClient = Depends(get_aggregation_client),
) -> AggregationResponse:
    """Return ``{id, color, brand}`` for a boat id."""
    boat_id = validate_id(resource_id)
    result = await client.aggregate(boat_id)
    return AggregationResponse(**result.to_dict())
