"""httpx-backed implementation of :class:`~cf_whitelist.core.protocols.ApiClient`.

This module is the **only** place in the codebase that sends requests
to the Cloudflare API.  httpx and JSON decoding errors are caught here
and re-raised as typed :class:`~cf_whitelist.exceptions.ApiError`
subclasses — nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from cf_whitelist.config import DEFAULT_BASE_URL
from cf_whitelist.core.models import ApiAction, Credentials
from cf_whitelist.exceptions import ApiTransportError, UnexpectedResponseError
from cf_whitelist.utils.url_template import replace_params


class CloudflareClient:
    """Concrete :class:`ApiClient` for the Cloudflare v4 API.

    Usage::

        async with build_async_client(settings) as http:
            client = CloudflareClient(http, credentials)
            zones = await client.act(LIST_ZONES)

    The HTTP status code is never inspected: whatever JSON the server
    returns is handed back to the caller.
    """

    # Methods that carry a JSON request body.
    _BODY_METHODS: frozenset[str] = frozenset({"POST", "PUT"})

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        credentials: Credentials,
        *,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._http: httpx.AsyncClient = http_client
        self._credentials: Credentials = credentials
        self._base_url: str = base_url

    # ------------------------------------------------------------------
    # Request construction (pure)
    # ------------------------------------------------------------------

    def build_url(
        self,
        action: ApiAction,
        params: Mapping[str, object] | None = None,
    ) -> str:
        """Return ``base_url`` joined with the resolved action path."""
        return self._base_url + replace_params(action.url, params or {})

    def build_headers(
        self,
        action: ApiAction,
        overrides: Mapping[str, str] | None = None,
    ) -> httpx.Headers:
        """Merge auth, accept and content-type defaults with *overrides*.

        Overrides win on key collision, compared case-insensitively.
        """
        headers = httpx.Headers(self._credentials.auth_headers)
        headers["accept"] = "application/json"
        if action.method.upper() in self._BODY_METHODS:
            headers["content-type"] = "application/json"
        if overrides:
            headers.update(overrides)
        return headers

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    async def act(
        self,
        action: ApiAction,
        *,
        params: Mapping[str, object] | None = None,
        body: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send exactly one request for *action* and decode its JSON body.

        Raises
        ------
        ApiTransportError
            For any httpx transport failure (DNS, connect, timeout…).
        UnexpectedResponseError
            When the response body is not valid JSON.
        """
        url = self.build_url(action, params)

        try:
            response = await self._http.request(
                action.method,
                url,
                content=body,
                headers=self.build_headers(action, headers),
            )
        except httpx.HTTPError as exc:
            raise ApiTransportError(
                f"{action.method} {url} failed: {exc}",
                hint="Check your network connection and the API base URL.",
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise UnexpectedResponseError(
                f"{action.method} {url} returned a non-JSON body "
                f"(HTTP {response.status_code}).",
            ) from exc
