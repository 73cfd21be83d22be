from __future__ import annotations

import json
import sys
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict, Iterable, Optional, TextIO


def _jsonable(v: Any) -> Any:
    if isinstance(v, Enum):
        return v.value
    if isinstance(v, PurePath):
        return str(v)
    if isinstance(v, dict):
        return {k: _jsonable(x) for k, x in v.items()}
    if isinstance(v, (list, tuple)):
        return [_jsonable(x) for x in v]
    return v


def _drop_none(row: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in row.items() if v is not None}


def write_rows(rows: Iterable[Dict[str, Any]], out: Optional[TextIO] = None) -> int:
    out = sys.stdout if out is None else out
    n = 0
    for r in rows:
        r = _jsonable(_drop_none(r))
        out.write(json.dumps(r, ensure_ascii=False) + "\n")
        out.flush()
        n += 1
    return n
