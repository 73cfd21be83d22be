from __future__ import annotations

import sys
from typing import Iterable, Iterator, List, Optional, TextIO

from .io_ndjson import write_rows
from .logging_cfg import setup_logging
from .resolve import describe_all


def _iter_inputs(lines: Iterable[str]) -> Iterator[str]:
    """
    One location string per line, e.g.
        gh:user/repo#dev
        ./templates/local
    Blank lines and '#' comments are skipped.
    """
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        yield line


def _read_inputs(path: str, stdin: TextIO) -> List[str]:
    if path == "-":
        return list(_iter_inputs(stdin))
    with open(path, "r", encoding="utf-8") as f:
        return list(_iter_inputs(f))


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    argv = sys.argv if argv is None else argv
    if len(argv) != 2:
        print("Usage: remoteref REF_FILE  (use '-' to read stdin)", file=sys.stderr)
        return 1
    try:
        inputs = _read_inputs(argv[1], sys.stdin)
        write_rows(describe_all(inputs))
        return 0
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
