"""Named-placeholder substitution for API path templates.

Templates use ``:name`` placeholders, e.g.
``/zones/:zone_id/firewall/access_rules/rules``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping


def replace_params(url: str, params: Mapping[str, object]) -> str:
    """Replace every ``:<key>`` in *url* with ``str(params[key])``.

    Keys that do not appear in the template are ignored.  Key names are
    regex-escaped, so ``"a.b"`` only ever matches the literal ``:a.b``.

    >>> replace_params("/zones/:zone_id/rules", {"zone_id": "abc123"})
    '/zones/abc123/rules'
    """
    for key, value in params.items():
        pattern = re.compile(":" + re.escape(key))
        replacement = str(value)
        url = pattern.sub(lambda _match: replacement, url)
    return url
