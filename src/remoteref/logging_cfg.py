from __future__ import annotations

import logging
import os
from typing import List, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# 0 = silent (default), 1 = INFO, 2 = DEBUG
_LEVELS = {"0": logging.CRITICAL, "1": logging.INFO, "2": logging.DEBUG}


def resolve_level(value: Optional[str]) -> int:
    return _LEVELS.get((value or "0").strip(), logging.CRITICAL)


def setup_logging(level: Optional[str] = None) -> int:
    """
    Configure the root logger from LOG_LEVEL / LOG_FILE.
    `level` ("0", "1", "2") wins over LOG_LEVEL. Returns the level applied.
    """
    lvl = resolve_level(level if level is not None else os.getenv("LOG_LEVEL"))
    root = logging.getLogger()

    # stdout carries NDJSON rows; never leave a stream handler on the root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    log_file = os.getenv("LOG_FILE")
    handlers: List[logging.Handler] = []
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for h in handlers:
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(h)
    root.setLevel(lvl)
    return lvl
