"""Allow ``python -m cf_whitelist`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m cf_whitelist`` behaves identically to the
``cf-whitelist`` console script.
"""

from __future__ import annotations

from cf_whitelist.cli.app import cli

if __name__ == "__main__":
    cli()
