"""Fixed registry of the API actions this tool performs."""

from __future__ import annotations

from types import MappingProxyType

from cf_whitelist.core.models import ApiAction

LIST_ZONES = ApiAction(
    method="GET",
    url="/zones?status=active&page=1&per_page=20&order=name",
)

CREATE_ZONE_FIREWALL_RULE = ApiAction(
    method="POST",
    url="/zones/:zone_id/firewall/access_rules/rules",
)

ACTIONS = MappingProxyType(
    {
        "list_zones": LIST_ZONES,
        "create_zone_firewall_rule": CREATE_ZONE_FIREWALL_RULE,
    }
)
