"""HTTP fetching with retries for remote documents."""

from __future__ import annotations

import asyncio
import logging

import httpx

from markdowndown.core.errors import NetworkError
from markdowndown.core.models import HttpConfig

logger = logging.getLogger(__name__)


async def fetch_text(
    url: str,
    config: HttpConfig | None = None,
    *,
    headers: dict[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """GET *url* and return the decoded body.

    Transient failures (timeouts, connection errors, 429, 5xx) are retried up
    to ``config.max_retries`` times with a linearly growing delay. A supplied
    *client* is used as-is and not closed.
    """
    cfg = config or HttpConfig()
    request_headers = {"User-Agent": cfg.user_agent, **(headers or {})}

    if client is not None:
        return await _fetch_with_retries(client, url, cfg, request_headers)

    async with httpx.AsyncClient(
        timeout=cfg.timeout,
        follow_redirects=True,
        max_redirects=cfg.max_redirects,
    ) as owned_client:
        return await _fetch_with_retries(owned_client, url, cfg, request_headers)


async def _fetch_with_retries(
    client: httpx.AsyncClient,
    url: str,
    cfg: HttpConfig,
    headers: dict[str, str],
) -> str:
    attempt = 0
    while True:
        try:
            return await _fetch_once(client, url, headers)
        except NetworkError as exc:
            if not exc.is_retryable or attempt >= cfg.max_retries:
                raise
            attempt += 1
            delay = cfg.retry_delay * attempt
            logger.debug(
                "Retrying %s in %.1fs (attempt %d/%d): %s",
                url, delay, attempt, cfg.max_retries, exc,
            )
            await asyncio.sleep(delay)


async def _fetch_once(
    client: httpx.AsyncClient, url: str, headers: dict[str, str]
) -> str:
    try:
        response = await client.get(url, headers=headers)
    except httpx.TimeoutException as exc:
        raise NetworkError(f"Timed out fetching {url}", url=url, timed_out=True) from exc
    except httpx.TooManyRedirects as exc:
        raise NetworkError(
            f"Too many redirects fetching {url}", url=url, retryable=False
        ) from exc
    except httpx.HTTPError as exc:
        raise NetworkError(f"Failed to fetch {url}: {exc}", url=url) from exc

    if response.status_code >= 400:
        raise NetworkError(
            f"HTTP {response.status_code} fetching {url}",
            url=url,
            status_code=response.status_code,
        )
    return response.text
