"""
Adapter: single-hop HTTP GET against a downstream service.

Each attempt, from connect to the last body byte, is bounded by one timeout. Attempts that time out or fail
to connect are retried up to a fixed count with no backoff; any
response that arrives, whatever its status, is returned immediately.

Usage:
    client = DownstreamClient(timeout=1.25, retry_policy=RetryPolicy(3))
    response = await client.call("http://localhost:4000/1")
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from app.domain.aggregation.errors import DownstreamUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 1.25
DEFAULT_MAX_ATTEMPTS = 3


@dataclass(frozen=True)
class RetryPolicy:
    """Decides whether a failed attempt is re-issued.

    Only timeouts and network-level failures are retryable; a
    response that was actually received is never retried.

    Attributes:
        max_attempts: Total number of attempts, including the first.
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    def is_retryable(self, exc: Exception) -> bool:
        return isinstance(
            exc, (asyncio.TimeoutError, httpx.TimeoutException, httpx.NetworkError)
        )

    def should_retry(self, exc: Exception, attempt: int) -> bool:
        """Return True if another attempt should follow ``attempt``.

        Args:
            exc: The error raised by the attempt.
            attempt: 1-based number of the attempt that just failed.
        """
        return self.is_retryable(exc) and attempt < self.max_attempts


class DownstreamClient:
    """HTTP GET wrapper with a per-attempt timeout and bounded retry.

    A fresh ``httpx.AsyncClient`` is opened per attempt so nothing is
    carried across attempts. Tests inject an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        retry_policy: Optional[RetryPolicy] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout_seconds = timeout
        self._timeout = httpx.Timeout(timeout)
        self._retry_policy = retry_policy or RetryPolicy()
        self._transport = transport

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    async def call(self, url: str) -> httpx.Response:
        """GET ``url`` and return the response, whatever its status.

        Raises:
            DownstreamUnavailableError: If no response was received
                within the allowed attempts.
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                response = await asyncio.wait_for(
                    self._get(url), self._timeout_seconds
                )
            except (httpx.TransportError, asyncio.TimeoutError) as exc:
                if self._retry_policy.should_retry(exc, attempt):
                    logger.warning(
                        "Attempt %d/%d to %s failed (%s), retrying",
                        attempt,
                        self._retry_policy.max_attempts,
                        url,
                        type(exc).__name__,
                    )
                    continue
                logger.error(
                    "Giving up on %s after %d attempt(s): %s",
                    url,
                    attempt,
                    type(exc).__name__,
                )
                raise DownstreamUnavailableError(url, attempt) from exc

            logger.debug("GET %s -> %d", url, response.status_code)
            return response

    async def _get(self, url: str) -> httpx.Response:
        # The body is read before the client closes, so the attempt
        # timeout covers it too.
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            return await client.get(url)
