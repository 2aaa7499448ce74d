"""cf-whitelist — bulk Cloudflare IP whitelisting from a local address file.

Built on httpx with a strict layered architecture.
"""

from cf_whitelist.version import __version__

__all__: list[str] = ["__version__"]
