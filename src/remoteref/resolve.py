from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from .cache import repo_cache_path
from .classify import classify_input
from .parallel import run_parallel
from .parser import format_ref, require_remote_ref
from .providers import clone_url

log = logging.getLogger(__name__)


def describe(raw: str) -> Dict[str, Any]:
    """One output row for `raw`: its kind, plus reference details if remote."""
    kind = classify_input(raw)
    row: Dict[str, Any] = {"input": raw, "kind": kind}
    if kind != "remote":
        log.debug("local: %r", raw)
        return row

    ref = require_remote_ref(raw)
    try:
        cache_path = repo_cache_path(ref)
    except ValueError as e:
        log.warning("no cache path for %r: %s", raw, e)
        cache_path = None
    row.update(
        {
            "provider": ref.provider,
            "owner": ref.owner,
            "repo": ref.repo,
            "ref": ref.ref,
            "subpath": ref.subpath,
            "canonical": format_ref(ref),
            "clone_url": clone_url(ref),
            "cache_path": cache_path,
        }
    )
    log.info("remote: %r -> %s", raw, row["canonical"])
    return row


def describe_all(inputs: Iterable[str], max_workers: int | None = None) -> List[Dict[str, Any]]:
    return run_parallel(describe, inputs, max_workers=max_workers)
