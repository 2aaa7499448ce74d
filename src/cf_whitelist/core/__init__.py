"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from cf_whitelist.core.actions import ACTIONS, CREATE_ZONE_FIREWALL_RULE, LIST_ZONES
from cf_whitelist.core.models import (
    AccessRuleResult,
    ApiAction,
    ApiMessage,
    Credentials,
    FirewallRuleRequest,
    Zone,
)
from cf_whitelist.core.protocols import ApiClient
from cf_whitelist.core.whitelist_service import WhitelistService

__all__: list[str] = [
    "ACTIONS",
    "AccessRuleResult",
    "ApiAction",
    "ApiClient",
    "ApiMessage",
    "CREATE_ZONE_FIREWALL_RULE",
    "Credentials",
    "FirewallRuleRequest",
    "LIST_ZONES",
    "WhitelistService",
    "Zone",
]
