from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .types import Provider, RemoteReference

# giget-style prefixes, e.g. "gh:user/repo"
PROVIDER_ALIASES: Mapping[str, Provider] = MappingProxyType(
    {
        "gh": Provider.GITHUB,
        "github": Provider.GITHUB,
        "gitlab": Provider.GITLAB,
        "bitbucket": Provider.BITBUCKET,
        "sourcehut": Provider.SOURCEHUT,
    }
)

# hostnames stripped from legacy inputs ("github.com/user/repo")
KNOWN_HOSTS: Mapping[str, Provider] = MappingProxyType({"github.com": Provider.GITHUB})

PROVIDER_DOMAINS: Mapping[Provider, str] = MappingProxyType(
    {
        Provider.GITHUB: "github.com",
        Provider.GITLAB: "gitlab.com",
        Provider.BITBUCKET: "bitbucket.org",
        Provider.SOURCEHUT: "sr.ht",
    }
)


def strip_known_host(s: str) -> str:
    for host in KNOWN_HOSTS:
        prefix = host + "/"
        if s.startswith(prefix):
            return s[len(prefix):]
    return s


def resolve_provider(s: str) -> Tuple[Provider, str]:
    """
    Split an optional provider prefix off `s`.

    "gitlab:user/repo"     -> (GITLAB, "user/repo")
    "github.com/user/repo" -> (GITHUB, "user/repo")
    "user/repo"            -> (GITHUB, "user/repo")

    Unknown prefixes are left in place.
    """
    alias, sep, rest = s.partition(":")
    if sep and alias in PROVIDER_ALIASES:
        return PROVIDER_ALIASES[alias], rest
    return Provider.GITHUB, strip_known_host(s)


def provider_domain(provider: Provider) -> str:
    return PROVIDER_DOMAINS[Provider(provider)]


def clone_url(ref: RemoteReference) -> str:
    if ref.provider is Provider.SOURCEHUT:
        return f"https://git.{provider_domain(ref.provider)}/~{ref.owner}/{ref.repo}"
    return f"https://{provider_domain(ref.provider)}/{ref.owner}/{ref.repo}.git"


def compare_url(ref: RemoteReference, from_sha: str, to_sha: str) -> str:
    """Web page showing the changes between two commits of `ref`."""
    a, b = from_sha[:12], to_sha[:12]
    domain = provider_domain(ref.provider)
    if ref.provider is Provider.GITHUB:
        return f"https://{domain}/{ref.owner}/{ref.repo}/compare/{a}...{b}"
    if ref.provider is Provider.GITLAB:
        return f"https://{domain}/{ref.owner}/{ref.repo}/-/compare/{a}...{b}"
    if ref.provider is Provider.BITBUCKET:
        # bitbucket takes the newer commit first
        return f"https://{domain}/{ref.owner}/{ref.repo}/branches/compare/{b}..{a}"
    return f"https://git.{domain}/~{ref.owner}/{ref.repo}/log/{ref.ref}"
