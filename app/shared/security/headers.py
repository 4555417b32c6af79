"""
Secure HTTP headers middleware.

Adds restrictive defaults to every response of the resource and
aggregation services. Headers a route sets itself are left alone.
"""

from typing import Mapping, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response.

    The services only ever answer with JSON, so the content policy
    forbids loading anything at all.
    """

    def __init__(
        self, app: ASGIApp, headers: Optional[Mapping[str, str]] = None
    ) -> None:
        super().__init__(app)
        self._headers = dict(SECURE_HEADERS)
        if headers:
            self._headers.update(headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in self._headers.items():
            response.headers.setdefault(header_name, header_value)
        return response
