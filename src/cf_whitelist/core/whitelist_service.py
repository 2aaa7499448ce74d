"""Core whitelist service — typed wrappers around the two API actions.

This service depends on an :class:`~cf_whitelist.core.protocols.ApiClient`
injected at construction time, keeping the core free of any httpx
imports.  It turns the untyped JSON returned by the client into the
domain models of :mod:`cf_whitelist.core.models`.

Guarantees
----------
* No ``print()``, no filesystem access.
* Only :class:`~cf_whitelist.exceptions.CfWhitelistError` subclasses escape.
* Exactly one client call per public method invocation.
"""

from __future__ import annotations

import json
from collections.abc import Awaitable
from typing import Any

from cf_whitelist.core.actions import CREATE_ZONE_FIREWALL_RULE, LIST_ZONES
from cf_whitelist.core.models import (
    AccessRuleResult,
    ApiMessage,
    FirewallRuleRequest,
    Zone,
)
from cf_whitelist.core.protocols import ApiClient
from cf_whitelist.exceptions import (
    ApiTransportError,
    CfWhitelistError,
    UnexpectedResponseError,
)


class WhitelistService:
    """Stateless service that lists zones and creates access rules.

    Parameters
    ----------
    api:
        Any object satisfying the :class:`ApiClient` protocol.
    """

    def __init__(self, api: ApiClient) -> None:
        self._api: ApiClient = api

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def list_zones(self) -> tuple[Zone, ...]:
        """Return the active zones (first page, ordered by name).

        Raises
        ------
        UnexpectedResponseError
            If the response has no ``result`` list.
        """
        raw = await self._call(self._api.act(LIST_ZONES))
        return self._parse_zones(raw)

    async def whitelist_address(
        self,
        zone_id: str,
        ip: str,
        notes: str | None = None,
    ) -> AccessRuleResult:
        """Create one ``whitelist`` access rule for *ip* in *zone_id*.

        The address is sent verbatim; no syntax validation is done here.
        """
        request = FirewallRuleRequest(value=ip, notes=notes)
        raw = await self._call(
            self._api.act(
                CREATE_ZONE_FIREWALL_RULE,
                params={"zone_id": zone_id},
                body=json.dumps(request.to_payload()),
            )
        )
        return self._parse_rule_result(raw)

    # ------------------------------------------------------------------
    # Client delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    async def _call(pending: Awaitable[Any]) -> Any:
        """Await a client call and ensure only our exceptions escape."""
        try:
            return await pending
        except CfWhitelistError:
            raise
        except Exception as exc:
            raise ApiTransportError(
                f"Unexpected API client error: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Raw JSON → domain-model parsers (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_zones(raw: Any) -> tuple[Zone, ...]:
        if not isinstance(raw, dict) or not isinstance(raw.get("result"), list):
            raise UnexpectedResponseError(
                "Zone list response has no 'result' array.",
                hint=_describe_errors(raw),
            )

        zones: list[Zone] = []
        for entry in raw["result"]:
            if not isinstance(entry, dict) or not entry.get("id"):
                raise UnexpectedResponseError(
                    f"Malformed zone entry in response: {entry!r}",
                )
            zone_id = str(entry["id"])
            status = entry.get("status")
            zones.append(
                Zone(
                    id=zone_id,
                    name=str(entry.get("name") or zone_id),
                    status=str(status) if status is not None else None,
                )
            )
        return tuple(zones)

    @staticmethod
    def _parse_rule_result(raw: Any) -> AccessRuleResult:
        if not isinstance(raw, dict):
            raise UnexpectedResponseError(
                f"Access rule response is not an object: {raw!r}",
            )

        result = raw.get("result")
        rule_id: str | None = None
        if isinstance(result, dict) and result.get("id") is not None:
            rule_id = str(result["id"])

        return AccessRuleResult(
            success=bool(raw.get("success", False)),
            rule_id=rule_id,
            errors=_parse_messages(raw.get("errors")),
        )


# ---------------------------------------------------------------------------
# Envelope helpers
# ---------------------------------------------------------------------------

def _parse_messages(raw: object) -> tuple[ApiMessage, ...]:
    """Decode an ``errors``/``messages`` array, skipping malformed entries."""
    if not isinstance(raw, list):
        return ()
    messages: list[ApiMessage] = []
    for entry in raw:
        if isinstance(entry, dict):
            code = entry.get("code")
            messages.append(
                ApiMessage(
                    code=code if isinstance(code, int) else None,
                    message=str(entry.get("message", "")),
                )
            )
        elif isinstance(entry, str):
            messages.append(ApiMessage(code=None, message=entry))
    return tuple(messages)


def _describe_errors(raw: object) -> str | None:
    """Summarise the ``errors`` of an envelope for use as a hint."""
    if not isinstance(raw, dict):
        return None
    errors = _parse_messages(raw.get("errors"))
    if not errors:
        return None
    return "API reported: " + "; ".join(str(err) for err in errors)
