"""Reachability probe for the hosted backend and data-mode selection.

All HTTP calls use httpx.AsyncClient so they do not block the event loop.
A probe never raises: any transport error or non-2xx status means
"unreachable" and the caller falls back to the local store.
"""

from __future__ import annotations

import logging
from enum import Enum

import httpx

from fallback_store.core.config import Settings

logger = logging.getLogger(__name__)

_REST_PATH = "/rest/v1/"


class DataMode(str, Enum):
    """Which backend the application should talk to."""

    REMOTE = "remote"
    FALLBACK = "fallback"


async def check_remote_connectivity(
    base_url: str,
    *,
    timeout: float = 5.0,
    http_client: httpx.AsyncClient | None = None,
) -> bool:
    """Send HEAD <base_url>/rest/v1/ and report whether the backend answered 2xx.

    Args:
        base_url: Hosted backend URL (e.g. https://xyz.supabase.co).
        timeout: Seconds before the probe gives up.
        http_client: Optional shared client; closed only if created here.

    Returns:
        True if reachable, False on non-2xx, timeout or transport error.
    """
    url = base_url.rstrip("/") + _REST_PATH
    client = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
    try:
        resp = await client.head(url, timeout=timeout)
    except httpx.TimeoutException:
        logger.warning("Remote backend timed out after %.1fs: %s", timeout, url)
        return False
    except httpx.HTTPError as e:
        logger.warning("Remote backend not reachable: %s", e)
        return False
    finally:
        if http_client is None:
            await client.aclose()

    if resp.is_success:
        logger.info("Remote backend is reachable")
        return True
    logger.warning("Remote backend returned non-2xx status: %s", resp.status_code)
    return False


async def select_data_mode(
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> DataMode:
    """Choose REMOTE when a reachable remote URL is configured, else FALLBACK.

    FALLBACK is returned without probing when fallback is forced or no
    remote URL is set. REMOTE is returned without probing when fallback is
    disabled entirely.
    """
    if not settings.fallback_enabled:
        return DataMode.REMOTE
    if settings.fallback_force or not settings.remote_url:
        return DataMode.FALLBACK
    reachable = await check_remote_connectivity(
        settings.remote_url,
        timeout=settings.remote_connectivity_timeout_seconds,
        http_client=http_client,
    )
    if reachable:
        return DataMode.REMOTE
    logger.info("Switching to local fallback store")
    return DataMode.FALLBACK
