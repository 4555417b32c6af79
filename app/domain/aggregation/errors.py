"""
Domain-specific errors for the aggregation bounded context.

Downstream failures are classified once, here, into the shared
ErrorKind taxonomy; callers never inspect status codes themselves.
"""

from app.shared.errors.taxonomy import ErrorKind, ServiceError
from app.shared.errors.translator import kind_for_downstream_status


class DownstreamError(ServiceError):
    """Base error for failures talking to a downstream service."""

    kind = ErrorKind.DOWNSTREAM_FAILURE

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class DownstreamUnavailableError(DownstreamError):
    """Raised when every attempt timed out or failed to connect."""

    kind = ErrorKind.DOWNSTREAM_UNAVAILABLE

    def __init__(self, url: str, attempts: int) -> None:
        super().__init__(
            f"Downstream unreachable after {attempts} attempt(s): {url}", url
        )
        self.attempts = attempts


class DownstreamStatusError(DownstreamError):
    """Raised when a downstream service answered with a non-2xx status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"Downstream answered {status_code}: {url}", url)
        self.status_code = status_code
        self.kind = kind_for_downstream_status(status_code)


class DownstreamMalformedError(DownstreamError):
    """Raised when a 2xx downstream body lacks the expected fields."""

    kind = ErrorKind.DOWNSTREAM_MALFORMED

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Malformed downstream response from {url}: {reason}", url)
        self.reason = reason
