"""Shared pytest fixtures and configuration for the cf-whitelist test suite.

Guidelines
----------
* No internet access in any test — httpx is driven by ``MockTransport``.
* questionary must be mocked at the prompt boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state; env vars go through ``monkeypatch``.
"""

from __future__ import annotations

import pytest

from cf_whitelist.core.models import Credentials


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(email="ops@example.com", api_key="secret-key")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every variable cf-whitelist reads from the environment."""
    for key in (
        "EMAIL",
        "API_KEY",
        "CF_WHITELIST_BASE_URL",
        "CF_WHITELIST_IP_FILE",
        "CF_WHITELIST_HTTP_TIMEOUT_SECONDS",
        "CF_WHITELIST_USER_AGENT",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
