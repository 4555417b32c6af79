"""
Pydantic schemas shared by the resource and aggregation APIs.

These schemas document the API contract. Request bodies are validated
by the application layer so that malformed input yields 400.
No business logic belongs here.
"""

from typing import Any

from pydantic import BaseModel


class ResourceBody(BaseModel):
    """A resource payload as returned by GET."""

    brand: str
    color: str


class CreatedResponse(BaseModel):
    """Response body for 201 Created."""

    id: int


class AggregationResponse(BaseModel):
    """A boat merged with its brand name."""

    id: Any
    color: str
    brand: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
