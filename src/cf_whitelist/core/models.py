"""Domain models for cf-whitelist.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and payload shaping.  They carry zero I/O
and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Action descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ApiAction:
    """Template for one API endpoint."""

    method: str
    """HTTP method, upper-case (e.g. ``GET``)."""

    url: str
    """Path relative to the API base, with ``:name`` placeholders."""


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Credentials:
    """Account credentials sent with every request."""

    email: str
    api_key: str = field(repr=False)

    @property
    def auth_headers(self) -> dict[str, str]:
        """Return the ``x-auth-email`` / ``x-auth-key`` header pair."""
        return {
            "x-auth-email": self.email,
            "x-auth-key": self.api_key,
        }


# ---------------------------------------------------------------------------
# Zones
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Zone:
    """A zone as reported by the zone-list endpoint."""

    id: str
    """Opaque zone identifier."""

    name: str
    """Domain name shown to the user."""

    status: str | None = None
    """Zone status (``active``, ``pending``…), or ``None`` if absent."""


# ---------------------------------------------------------------------------
# Firewall access rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FirewallRuleRequest:
    """Body of a single create-access-rule call."""

    value: str
    """The IP address being whitelisted."""

    notes: str | None = None
    mode: str = "whitelist"
    target: str = "ip"

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready request body.

        ``notes`` is omitted only when it is ``None``; an empty string is
        sent unchanged.
        """
        payload: dict[str, Any] = {
            "mode": self.mode,
            "configuration": {
                "target": self.target,
                "value": self.value,
            },
        }
        if self.notes is not None:
            payload["notes"] = self.notes
        return payload


@dataclass(frozen=True, slots=True)
class ApiMessage:
    """One entry of an API ``errors`` or ``messages`` array."""

    code: int | None
    message: str

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"{self.code}: {self.message}"


@dataclass(frozen=True, slots=True)
class AccessRuleResult:
    """Decoded outcome of a create-access-rule call.

    The HTTP status is never inspected; ``success`` mirrors the
    ``success`` flag of the response envelope.
    """

    success: bool
    rule_id: str | None
    errors: tuple[ApiMessage, ...] = ()
