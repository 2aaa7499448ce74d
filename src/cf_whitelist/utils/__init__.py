"""Shared utilities — typing helpers and cross-cutting string transforms.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from cf_whitelist.utils.url_template import replace_params

__all__: list[str] = ["replace_params"]
