from __future__ import annotations

import os
import re
from pathlib import Path

from .providers import provider_domain
from .types import RemoteReference

CACHE_DIR_ENV = "REMOTEREF_CACHE_DIR"

_SEMVER_LIKE = re.compile(r"v?\d+\.\d+")
_COMMIT_SHA = re.compile(r"[a-f0-9]{7,40}", re.I)


def cache_dir() -> Path:
    override = os.getenv(CACHE_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".kly" / "cache"


def repo_cache_path(ref: RemoteReference) -> Path:
    """
    Where the fetch layer keeps a checkout of `ref`:
        <cache_dir>/<domain>/<owner>/<repo>/<ref>[/<subpath>]
    Only computes the path; nothing is created.

    Raises ValueError if the ref or subpath has a "." / ".." component,
    since the result must stay under the repo's cache directory.
    """
    for part in (ref.ref, ref.subpath or ""):
        if any(seg in (".", "..") for seg in part.split("/")):
            raise ValueError(f"relative path component in {part!r}")
    base = cache_dir() / provider_domain(ref.provider) / ref.owner / ref.repo / ref.ref
    if ref.subpath:
        return base / ref.subpath
    return base


def lockfile_key(ref: RemoteReference) -> str:
    return f"{provider_domain(ref.provider)}/{ref.owner}/{ref.repo}@{ref.ref}"


def should_check_for_updates(ref: RemoteReference) -> bool:
    # tags and commit SHAs don't move; branches do
    if _SEMVER_LIKE.match(ref.ref):
        return False
    if _COMMIT_SHA.fullmatch(ref.ref):
        return False
    return True
