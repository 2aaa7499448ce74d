"""Runtime configuration: credentials and optional tunables.

Credentials (``EMAIL`` / ``API_KEY``) are read from the process
environment exactly once at startup and handed to the API client
explicitly.  Optional knobs live in :class:`AppSettings`
(pydantic-settings, ``CF_WHITELIST_`` prefix).

Nothing here prints or exits: failures are raised as
:class:`~cf_whitelist.exceptions.ConfigurationError` and translated to
exit status 1 by the CLI error boundary.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import cast

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from cf_whitelist.core.models import Credentials
from cf_whitelist.exceptions import ConfigurationError, MissingCredentialError
from cf_whitelist.version import __version__

DEFAULT_BASE_URL: str = "https://api.cloudflare.com/client/v4"

DEFAULT_IP_FILE: Path = Path(__file__).resolve().parent / "ip_addresses.txt"
"""Input file alongside the program package."""

REQUIRED_ENV_VARS: tuple[str, str] = ("EMAIL", "API_KEY")


def get_env(key: str, required: bool = True) -> str | None:
    """Return the environment value for *key*.

    An unset or empty variable counts as missing.

    Raises
    ------
    MissingCredentialError
        If the variable is missing and *required* is true.
    """
    value = os.environ.get(key)
    if not value:
        if required:
            raise MissingCredentialError(key)
        return None
    return value


def load_credentials() -> Credentials:
    """Read ``EMAIL`` and ``API_KEY`` into a :class:`Credentials` value."""
    email_key, api_key_key = REQUIRED_ENV_VARS
    return Credentials(email=_require(email_key), api_key=_require(api_key_key))


def _require(key: str) -> str:
    # get_env raises for missing required keys, so the result is a str.
    return cast(str, get_env(key, required=True))


class AppSettings(BaseSettings):
    """Optional tunables, read from ``CF_WHITELIST_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="CF_WHITELIST_",
        extra="ignore",
        case_sensitive=False,
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL of the Cloudflare v4 API.",
    )
    ip_file: Path = Field(
        default=DEFAULT_IP_FILE,
        description="File with one IP address per line.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds; unset means no timeout.",
    )
    user_agent: str = Field(
        default=f"cf-whitelist/{__version__}",
        min_length=1,
    )


def load_settings() -> AppSettings:
    """Build :class:`AppSettings` from the environment.

    Raises
    ------
    ConfigurationError
        If any ``CF_WHITELIST_*`` value fails validation.
    """
    try:
        return AppSettings()
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid configuration: {fields}",
            hint=str(exc),
        ) from exc
