"""Tests for WhitelistService (core/whitelist_service.py).

The :class:`ApiClient` dependency is **mocked** with ``AsyncMock``: no
httpx, no network.  These tests verify:

* Which action and arguments reach the client
* Raw JSON → domain-model parsing
* Exception mapping (client errors → our hierarchy)
"""

from __future__ import annotations

import asyncio
import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from cf_whitelist.core.actions import CREATE_ZONE_FIREWALL_RULE, LIST_ZONES
from cf_whitelist.core.models import AccessRuleResult, ApiMessage, Zone
from cf_whitelist.core.whitelist_service import WhitelistService
from cf_whitelist.exceptions import (
    ApiTransportError,
    UnexpectedResponseError,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fake_api(response: Any | Exception) -> MagicMock:
    """Return a mock ApiClient whose ``act`` returns or raises *response*."""
    api = MagicMock()
    if isinstance(response, Exception):
        api.act = AsyncMock(side_effect=response)
    else:
        api.act = AsyncMock(return_value=response)
    return api


def _zones_payload(*zones: dict[str, Any]) -> dict[str, Any]:
    return {"success": True, "errors": [], "result": list(zones)}


# ---------------------------------------------------------------------------
# list_zones
# ---------------------------------------------------------------------------

class TestListZones:
    def test_calls_list_zones_action(self) -> None:
        api = _fake_api(_zones_payload())
        asyncio.run(WhitelistService(api).list_zones())
        api.act.assert_awaited_once_with(LIST_ZONES)

    def test_parses_zones_in_order(self) -> None:
        api = _fake_api(_zones_payload(
            {"id": "z1", "name": "a.example", "status": "active"},
            {"id": "z2", "name": "b.example"},
        ))
        zones = asyncio.run(WhitelistService(api).list_zones())
        assert zones == (
            Zone(id="z1", name="a.example", status="active"),
            Zone(id="z2", name="b.example", status=None),
        )

    def test_missing_name_falls_back_to_id(self) -> None:
        api = _fake_api(_zones_payload({"id": "z1"}))
        zones = asyncio.run(WhitelistService(api).list_zones())
        assert zones[0].name == "z1"

    def test_empty_result(self) -> None:
        api = _fake_api(_zones_payload())
        assert asyncio.run(WhitelistService(api).list_zones()) == ()

    def test_missing_result_raises_with_api_errors_hint(self) -> None:
        api = _fake_api({
            "success": False,
            "errors": [{"code": 6003, "message": "Invalid request headers"}],
            "result": None,
        })
        with pytest.raises(UnexpectedResponseError, match="result") as exc_info:
            asyncio.run(WhitelistService(api).list_zones())
        assert exc_info.value.hint == "API reported: 6003: Invalid request headers"

    def test_non_object_response_raises(self) -> None:
        api = _fake_api(["not", "an", "envelope"])
        with pytest.raises(UnexpectedResponseError):
            asyncio.run(WhitelistService(api).list_zones())

    def test_zone_without_id_raises(self) -> None:
        api = _fake_api(_zones_payload({"name": "a.example"}))
        with pytest.raises(UnexpectedResponseError, match="Malformed zone"):
            asyncio.run(WhitelistService(api).list_zones())


# ---------------------------------------------------------------------------
# whitelist_address
# ---------------------------------------------------------------------------

class TestWhitelistAddress:
    def test_sends_create_rule_action(self) -> None:
        api = _fake_api({"success": True, "result": {"id": "r1"}})
        asyncio.run(WhitelistService(api).whitelist_address("z1", "8.8.8.8", "test"))

        api.act.assert_awaited_once()
        args, kwargs = api.act.call_args
        assert args == (CREATE_ZONE_FIREWALL_RULE,)
        assert kwargs["params"] == {"zone_id": "z1"}
        assert json.loads(kwargs["body"]) == {
            "mode": "whitelist",
            "configuration": {"target": "ip", "value": "8.8.8.8"},
            "notes": "test",
        }

    def test_empty_notes_sent(self) -> None:
        api = _fake_api({"success": True, "result": {"id": "r1"}})
        asyncio.run(WhitelistService(api).whitelist_address("z1", "1.1.1.1", ""))
        body = json.loads(api.act.call_args.kwargs["body"])
        assert body["notes"] == ""

    def test_none_notes_omitted(self) -> None:
        api = _fake_api({"success": True, "result": {"id": "r1"}})
        asyncio.run(WhitelistService(api).whitelist_address("z1", "1.1.1.1"))
        body = json.loads(api.act.call_args.kwargs["body"])
        assert "notes" not in body

    def test_success_result(self) -> None:
        api = _fake_api({"success": True, "errors": [], "result": {"id": "r1"}})
        result = asyncio.run(
            WhitelistService(api).whitelist_address("z1", "1.1.1.1", "")
        )
        assert result == AccessRuleResult(success=True, rule_id="r1", errors=())

    def test_api_error_payload_returned_not_raised(self) -> None:
        api = _fake_api({
            "success": False,
            "errors": [{"code": 10009, "message": "duplicate rule"}, "plain"],
            "result": None,
        })
        result = asyncio.run(
            WhitelistService(api).whitelist_address("z1", "1.1.1.1", "")
        )
        assert result.success is False
        assert result.rule_id is None
        assert result.errors == (
            ApiMessage(code=10009, message="duplicate rule"),
            ApiMessage(code=None, message="plain"),
        )

    def test_non_object_response_raises(self) -> None:
        api = _fake_api("oops")
        with pytest.raises(UnexpectedResponseError, match="not an object"):
            asyncio.run(WhitelistService(api).whitelist_address("z1", "1.1.1.1"))


# ---------------------------------------------------------------------------
# Exception mapping
# ---------------------------------------------------------------------------

class TestExceptionMapping:
    def test_domain_error_propagates_unchanged(self) -> None:
        api = _fake_api(UnexpectedResponseError("bad json"))
        with pytest.raises(UnexpectedResponseError, match="bad json"):
            asyncio.run(WhitelistService(api).list_zones())

    def test_unexpected_error_wrapped(self) -> None:
        api = _fake_api(RuntimeError("boom"))
        with pytest.raises(ApiTransportError, match="Unexpected API client error"):
            asyncio.run(WhitelistService(api).whitelist_address("z1", "1.1.1.1"))
