"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from cf_whitelist.core.models import ApiAction


class ApiClient(Protocol):
    """Contract for the HTTP backend that executes :class:`ApiAction` s.

    Any object that implements :meth:`act` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    async def act(
        self,
        action: ApiAction,
        *,
        params: Mapping[str, object] | None = None,
        body: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one request for *action* and return the decoded JSON body.

        Parameters
        ----------
        action:
            The endpoint descriptor to call.
        params:
            Values substituted into the ``:name`` placeholders of
            ``action.url``.
        body:
            Pre-serialised request payload, or ``None``.
        headers:
            Header overrides, applied on top of the defaults.

        Raises
        ------
        ApiTransportError
            When the request could not be completed.
        UnexpectedResponseError
            When the response body is not JSON.
        """
        ...  # pragma: no cover
