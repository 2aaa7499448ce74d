"""Interactive zone and notes prompts for the CLI layer.

This module is responsible for:

* Prompting the user to pick a zone via questionary arrow keys.
* Prompting for an optional free-text note.

No API calls happen here; the zone list is fetched by the caller.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cf_whitelist.core.models import Zone
from cf_whitelist.exceptions import (
    MissingDependencyError,
    PromptCancelledError,
    ZoneSelectionError,
)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


async def prompt_zone(zones: Sequence[Zone]) -> str:
    """Ask the user to pick one of *zones* and return its identifier.

    Raises
    ------
    ZoneSelectionError
        If *zones* is empty.
    PromptCancelledError
        If the user cancels the prompt (Ctrl+C / Esc).
    """
    if not zones:
        raise ZoneSelectionError(
            "No active zones found for this account.",
            hint="Check that EMAIL and API_KEY belong to the right account.",
        )

    questionary = _import_questionary()
    choices = [
        questionary.Choice(title=zone.name, value=zone.id)
        for zone in zones
    ]

    selected: str | None = await questionary.select(
        "Zone:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask_async()  # Returns None on Ctrl+C

    if selected is None:
        raise PromptCancelledError("No zone selected.")
    return selected


async def prompt_notes() -> str:
    """Ask for an optional note; an empty answer is returned as ``""``."""
    questionary = _import_questionary()
    notes: str | None = await questionary.text("Notes (optional):").ask_async()
    if notes is None:
        raise PromptCancelledError("Notes prompt cancelled.")
    return notes
