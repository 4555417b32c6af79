"""
Translation of internal error kinds into externally visible kinds.

Translation is pure and total: every ErrorKind maps to exactly one
ExternalKind, and anything unmapped falls back to SERVER_ERROR.
"""

from enum import Enum

from app.shared.errors.taxonomy import ErrorKind

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500
HTTP_502 = 502


class ExternalKind(Enum):
    """Error kinds visible to API clients, with their status and message."""

    BAD_REQUEST = (HTTP_400, "Bad request")
    NOT_FOUND = (HTTP_404, "Not found")
    SERVER_ERROR = (HTTP_500, "Internal server error")
    BAD_GATEWAY = (HTTP_502, "Bad gateway")

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message


_TRANSLATIONS: dict[ErrorKind, ExternalKind] = {
    ErrorKind.INVALID: ExternalKind.BAD_REQUEST,
    ErrorKind.NOT_FOUND: ExternalKind.NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: ExternalKind.SERVER_ERROR,
    ErrorKind.DOWNSTREAM_UNAVAILABLE: ExternalKind.BAD_GATEWAY,
    ErrorKind.DOWNSTREAM_NOT_FOUND: ExternalKind.NOT_FOUND,
    ErrorKind.DOWNSTREAM_BAD_REQUEST: ExternalKind.BAD_REQUEST,
    ErrorKind.DOWNSTREAM_FAILURE: ExternalKind.SERVER_ERROR,
    ErrorKind.DOWNSTREAM_MALFORMED: ExternalKind.SERVER_ERROR,
    ErrorKind.INTERNAL: ExternalKind.SERVER_ERROR,
}


def translate(kind: ErrorKind | None) -> ExternalKind:
    """Return the external kind for an internal error kind.

    Args:
        kind: Internal error kind, or None for a fault with no kind.

    Returns:
        The mapped ExternalKind; SERVER_ERROR when unmapped.
    """
    return _TRANSLATIONS.get(kind, ExternalKind.SERVER_ERROR)


def kind_for_downstream_status(status_code: int) -> ErrorKind:
    """Classify a non-2xx downstream status code.

    Args:
        status_code: HTTP status received from a downstream service.

    Returns:
        DOWNSTREAM_NOT_FOUND for 404, DOWNSTREAM_BAD_REQUEST for 400,
        DOWNSTREAM_FAILURE for anything else.
    """
    if status_code == HTTP_404:
        return ErrorKind.DOWNSTREAM_NOT_FOUND
    if status_code == HTTP_400:
        return ErrorKind.DOWNSTREAM_BAD_REQUEST
    return ErrorKind.DOWNSTREAM_FAILURE
