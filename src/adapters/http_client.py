"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for every outbound request.
- Eases testing: callers accept a client, so tests can pass one built on
  `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json, text/html;q=0.9, */*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def probe_endpoint(client: httpx.AsyncClient, url: str) -> tuple[bool, str]:
    """GET ``url`` once; any HTTP response counts as reachable.

    Accumulate's v3 endpoint answers plain GETs with a 4xx, which still
    proves the host is up.
    """

    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        logger.info("Endpoint %s unreachable: %s", url, exc)
        return False, f"{type(exc).__name__}: {exc}"
    logger.debug("Endpoint %s answered %s", url, response.status_code)
    return True, f"HTTP {response.status_code}"
