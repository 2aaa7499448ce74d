"""Infrastructure layer — external system integration.

This layer wraps all interaction with the Cloudflare API (via httpx)
and the local filesystem.  Every raw third-party exception must be
caught here and re-raised as a
:class:`~cf_whitelist.exceptions.CfWhitelistError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from cf_whitelist.infra.cloudflare_client import CloudflareClient
from cf_whitelist.infra.http_client import build_async_client
from cf_whitelist.infra.line_reader import process_line_by_line

__all__: list[str] = [
    "CloudflareClient",
    "build_async_client",
    "process_line_by_line",
]
