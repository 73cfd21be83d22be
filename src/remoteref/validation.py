from __future__ import annotations

import re
from typing import Any

# owner / repo names: alphanumeric, interior hyphens only
_TOKEN = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?")


def is_valid_token(s: Any) -> bool:
    if not isinstance(s, str) or not s:
        return False
    return _TOKEN.fullmatch(s) is not None
