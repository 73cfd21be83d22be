from __future__ import annotations

import re
from typing import Optional

from .providers import resolve_provider
from .types import ParseResult, RemoteReference
from .validation import is_valid_token

DEFAULT_REF = "main"

_SCHEMES = ("https://", "http://")
_REF_DELIM = re.compile(r"[#@]")


class InvalidRemoteRefError(ValueError):
    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"Invalid remote reference: {raw!r} ({reason})")
        self.raw = raw
        self.reason = reason


def _strip_scheme(s: str) -> str:
    for scheme in _SCHEMES:
        if s.startswith(scheme):
            return s[len(scheme):]
    return s


def parse(raw: str) -> ParseResult:
    """
    Parse a location string into a RemoteReference.

    Accepted shapes:
        gh:user/repo, gh:user/repo#dev, gh:user/repo/sub/path#dev
        gitlab:user/repo, bitbucket:user/repo, sourcehut:user/repo
        user/repo, user/repo@v1.0.0, user/repo.git
        github.com/user/repo, https://github.com/user/repo@develop

    Never raises on str input; rejections come back as ParseResult.no_match.
    """
    if not isinstance(raw, str):
        return ParseResult.no_match("not a string")

    s = raw.strip()
    if not s:
        return ParseResult.no_match("empty input")

    provider, rest = resolve_provider(_strip_scheme(s))

    # first of '#' / '@' wins; everything after it is the ref, slashes included.
    # Not '#'-before-'@': "user/repo@v1#x" is ref "v1#x", where a '#'-first
    # split would leave repo "repo@v1" and reject the input.
    ref = DEFAULT_REF
    m = _REF_DELIM.search(rest)
    if m:
        ref = rest[m.end():]
        rest = rest[: m.start()]
        if not ref:
            return ParseResult.no_match(f"empty ref after {m.group()!r}")

    if rest.endswith(".git"):
        rest = rest[: -len(".git")]

    parts = rest.split("/")
    if len(parts) < 2:
        return ParseResult.no_match("expected owner/repo")
    if any(not p for p in parts):
        return ParseResult.no_match("empty path segment")

    owner, repo, sub = parts[0], parts[1], parts[2:]
    if not is_valid_token(owner):
        return ParseResult.no_match(f"invalid owner {owner!r}")
    if not is_valid_token(repo):
        return ParseResult.no_match(f"invalid repo {repo!r}")

    return ParseResult.match(
        RemoteReference(
            provider=provider,
            owner=owner,
            repo=repo,
            ref=ref,
            subpath="/".join(sub) if sub else None,
        )
    )


def parse_remote_ref(raw: str) -> Optional[RemoteReference]:
    return parse(raw).reference


def require_remote_ref(raw: str) -> RemoteReference:
    result = parse(raw)
    if result.reference is None:
        raise InvalidRemoteRefError(raw, result.reason)
    return result.reference


def format_ref(ref: RemoteReference) -> str:
    """Canonical giget-style form, e.g. "gitlab:user/repo/sub#dev"."""
    path = f"{ref.owner}/{ref.repo}"
    if ref.subpath:
        path = f"{path}/{ref.subpath}"
    return f"{ref.provider.value}:{path}#{ref.ref}"
