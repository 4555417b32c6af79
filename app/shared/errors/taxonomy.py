"""
Internal error taxonomy shared by every bounded context.

Each failure raised below the interface layer carries exactly one
ErrorKind. The kinds form a closed set so that translation into
HTTP responses is exhaustive and never depends on message text.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Internal failure kinds raised by validators, stores and clients."""

    INVALID = "invalid"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    DOWNSTREAM_UNAVAILABLE = "downstream_unavailable"
    DOWNSTREAM_NOT_FOUND = "downstream_not_found"
    DOWNSTREAM_BAD_REQUEST = "downstream_bad_request"
    DOWNSTREAM_FAILURE = "downstream_failure"
    DOWNSTREAM_MALFORMED = "downstream_malformed"
    INTERNAL = "internal"


class ServiceError(Exception):
    """Base error for all failures that are translated at the API boundary.

    Attributes:
        message: Human-readable description, logged but never sent
            to clients verbatim.
        kind: The internal failure kind used for translation.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        self.message = message
        if kind is not None:
            self.kind = kind
        super().__init__(self.message)
