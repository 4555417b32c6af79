"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default rate limit on every route.
Protects against denial-of-service and resource abuse.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

DEFAULT_RATE_LIMIT = "60/minute"


def build_limiter(
    default_limit: str = DEFAULT_RATE_LIMIT, enabled: bool = True
) -> Limiter:
    """Create a limiter with its own in-memory counters.

    Each application gets its own limiter so that separate apps
    (and separate test cases) never share request counts.

    Args:
        default_limit: Limit string applied to every route, e.g. "60/minute".
        enabled: When False, requests are never limited.

    Returns:
        A configured slowapi Limiter.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
    )
