from __future__ import annotations

from typing import Literal

from .parser import parse

InputKind = Literal["remote", "local"]

_LOCAL_PREFIXES = ("./", "../", "/")


def is_remote_ref(raw: str) -> bool:
    """
    True if `raw` names a remote template rather than a local path.
    Obvious path shapes are rejected before parsing; "src/file.ts" gets
    through that filter but fails token validation ("file.ts").
    """
    if not isinstance(raw, str):
        return False
    if raw.startswith(_LOCAL_PREFIXES) or "\\" in raw:
        return False
    if "/" not in raw:
        return False
    return parse(raw).matched


def classify_input(raw: str) -> InputKind:
    return "remote" if is_remote_ref(raw) else "local"
