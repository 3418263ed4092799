"""
Helpers shared by the remote provider backends.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


def not_implemented(provider: str, operation: str) -> None:
    logger.warning("%s %s not implemented", provider, operation)


async def is_reachable(url: Optional[str], timeout: float, headers: Optional[dict[str, str]] = None,
                       params: Optional[dict[str, str]] = None,
                       transport: Optional[httpx.AsyncBaseTransport] = None, ) -> bool:
    """
    Probe *url* with a GET request.

    Any HTTP response, including an error status, counts as reachable; a
    transport failure or timeout does not.

    Args:
        url: Endpoint to probe, ``None`` means not configured
        timeout: Request timeout in seconds
        headers: Extra request headers
        params: Query parameters, never logged
        transport: Optional transport (used by tests)

    Returns:
        True if the endpoint answered
    """
    if not url:
        return False
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            await client.get(url, headers=headers, params=params)
    except httpx.HTTPError as exc:
        logger.info("Remote endpoint %s unreachable (%s)", url, type(exc).__name__)
        return False
    return True
