"""CLI application entry point for cf-whitelist.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cf_whitelist.exceptions.CfWhitelistError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* Credentials are loaded before anything touches the network.
* Addresses are submitted strictly one at a time, in file order.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from cf_whitelist.cli import exit_codes
from cf_whitelist.cli.console import console, escape, out
from cf_whitelist.config import AppSettings, load_credentials, load_settings
from cf_whitelist.core.models import Credentials
from cf_whitelist.exceptions import CfWhitelistError, ConfigurationError
from cf_whitelist.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The tool is fully interactive; the only flags are ``--help`` and
    ``--version``.
    """
    parser = argparse.ArgumentParser(
        prog="cf-whitelist",
        description=(
            "Whitelist every IP address in ip_addresses.txt for a "
            "Cloudflare zone chosen interactively."
        ),
        epilog="Requires the EMAIL and API_KEY environment variables.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


# ---------------------------------------------------------------------------
# Whitelisting flow
# ---------------------------------------------------------------------------

async def _handle_whitelist(credentials: Credentials, settings: AppSettings) -> int:
    """Run the interactive whitelisting flow.

    Flow:
    1. Fetch active zones and prompt for one.
    2. Prompt for an optional note.
    3. Submit one access rule per non-empty line of the IP file.
    """
    from cf_whitelist.cli.prompts import prompt_notes, prompt_zone
    from cf_whitelist.core.whitelist_service import WhitelistService
    from cf_whitelist.infra.cloudflare_client import CloudflareClient
    from cf_whitelist.infra.http_client import build_async_client
    from cf_whitelist.infra.line_reader import process_line_by_line

    async with build_async_client(settings) as http:
        client = CloudflareClient(http, credentials, base_url=settings.base_url)
        service = WhitelistService(client)

        zones = await service.list_zones()
        zone_id = await prompt_zone(zones)
        notes = await prompt_notes()

        async def _whitelist(ip: str) -> None:
            result = await service.whitelist_address(zone_id, ip, notes)
            if not result.success:
                # HTTP status is not checked; surface API-reported errors only.
                reasons = "; ".join(str(err) for err in result.errors) or "no details"
                console.print(
                    f"[yellow]Warning:[/yellow] API did not confirm {escape(ip)}: "
                    f"{escape(reasons)}",
                    highlight=False,
                )
            out.print(
                f"Added {ip} to zone {zone_id}.",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )

        count = await process_line_by_line(settings.ip_file, _whitelist)

    console.print(f"\n[bold green]Done.[/bold green] {count} address(es) submitted.")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cf-whitelist CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    parser.parse_args(argv)

    credentials = load_credentials()
    settings = load_settings()

    return asyncio.run(_handle_whitelist(credentials, settings))


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report(exc: CfWhitelistError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ConfigurationError as exc:
        _report(exc)
        sys.exit(exit_codes.CONFIGURATION_ERROR)
    except CfWhitelistError as exc:
        _report(exc)
        sys.exit(exit_codes.RUN_FAILED)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red]\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.RUN_FAILED)
