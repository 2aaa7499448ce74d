"""httpx client factory.

Centralises timeout and User-Agent so every request behaves the same,
and gives tests a single seam to swap in an ``httpx.MockTransport``.
"""

from __future__ import annotations

import httpx

from cf_whitelist.config import AppSettings


def build_async_client(settings: AppSettings | None = None) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` used for all API calls."""
    settings = settings or AppSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers={"User-Agent": settings.user_agent},
    )
