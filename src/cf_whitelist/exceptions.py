"""Custom exception hierarchy for cf-whitelist.

All exceptions that cross layer boundaries must inherit from
:class:`CfWhitelistError`.  Raw third-party exceptions (httpx, json,
``OSError``) must NEVER propagate beyond the infrastructure layer — they
are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
CfWhitelistError
├── ConfigurationError
│   └── MissingCredentialError
├── MissingDependencyError
├── InputFileError
│   └── InputFileNotFoundError
├── ApiError
│   ├── ApiTransportError
│   └── UnexpectedResponseError
└── ZoneSelectionError
    └── PromptCancelledError
"""

from __future__ import annotations


class CfWhitelistError(Exception):
    """Base exception for all cf-whitelist errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(CfWhitelistError):
    """Raised when the runtime configuration is missing or invalid."""


class MissingCredentialError(ConfigurationError):
    """Raised when a required credential environment variable is unset."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"{key} environment variable required.",
            hint=f"Export {key} before running cf-whitelist.",
        )
        self.key: str = key


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(CfWhitelistError):
    """Raised when an optional UI dependency is not installed."""


# --- Input file ------------------------------------------------------------

class InputFileError(CfWhitelistError):
    """Raised when the IP address file cannot be opened or read."""


class InputFileNotFoundError(InputFileError):
    """Raised when the IP address file does not exist."""


# --- Remote API ------------------------------------------------------------

class ApiError(CfWhitelistError):
    """Base class for failures talking to the Cloudflare API."""


class ApiTransportError(ApiError):
    """Raised when a request could not be sent or no response arrived."""


class UnexpectedResponseError(ApiError):
    """Raised when a response body is not JSON or has an unknown shape."""


# --- Interactive selection -------------------------------------------------

class ZoneSelectionError(CfWhitelistError):
    """Raised when no zone can be selected."""


class PromptCancelledError(ZoneSelectionError):
    """Raised when the user cancels an interactive prompt."""
