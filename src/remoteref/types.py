from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Provider(str, Enum):
    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"
    SOURCEHUT = "sourcehut"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RemoteReference:
    provider: Provider
    owner: str
    repo: str
    ref: str = "main"
    subpath: Optional[str] = None


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing a location string.
    `reference` is set only on success; `reason` explains a rejection.
    """

    reference: Optional[RemoteReference] = None
    reason: str = ""

    @property
    def matched(self) -> bool:
        return self.reference is not None

    @classmethod
    def match(cls, reference: RemoteReference) -> "ParseResult":
        return cls(reference=reference)

    @classmethod
    def no_match(cls, reason: str) -> "ParseResult":
        return cls(reference=None, reason=reason)
