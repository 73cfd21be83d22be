import pytest

from remoteref.providers import (
    PROVIDER_ALIASES,
    clone_url,
    compare_url,
    provider_domain,
    resolve_provider,
    strip_known_host,
)
from remoteref.types import Provider, RemoteReference


def test_resolve_alias_prefix():
    assert resolve_provider("gh:user/repo") == (Provider.GITHUB, "user/repo")
    assert resolve_provider("gitlab:user/repo#dev") == (Provider.GITLAB, "user/repo#dev")
    assert resolve_provider("sourcehut:a/b") == (Provider.SOURCEHUT, "a/b")


def test_resolve_defaults_to_github_and_strips_host():
    assert resolve_provider("user/repo") == (Provider.GITHUB, "user/repo")
    assert resolve_provider("github.com/user/repo") == (Provider.GITHUB, "user/repo")


def test_unknown_prefix_left_alone():
    assert resolve_provider("codeberg:user/repo") == (Provider.GITHUB, "codeberg:user/repo")
    assert strip_known_host("gitlab.com/user/repo") == "gitlab.com/user/repo"


def test_alias_table_is_read_only():
    with pytest.raises(TypeError):
        PROVIDER_ALIASES["cb"] = Provider.GITHUB  # type: ignore[index]


def test_provider_domain():
    assert provider_domain(Provider.GITHUB) == "github.com"
    assert provider_domain(Provider.GITLAB) == "gitlab.com"
    assert provider_domain(Provider.BITBUCKET) == "bitbucket.org"
    assert provider_domain(Provider.SOURCEHUT) == "sr.ht"
    assert provider_domain("gitlab") == "gitlab.com"


def test_clone_url():
    assert clone_url(RemoteReference(Provider.GITHUB, "o", "r")) == "https://github.com/o/r.git"
    assert clone_url(RemoteReference(Provider.GITLAB, "o", "r")) == "https://gitlab.com/o/r.git"
    assert clone_url(RemoteReference(Provider.BITBUCKET, "o", "r")) == "https://bitbucket.org/o/r.git"
    assert clone_url(RemoteReference(Provider.SOURCEHUT, "o", "r")) == "https://git.sr.ht/~o/r"


def test_compare_url():
    a, b = "a" * 40, "b" * 40
    assert compare_url(RemoteReference(Provider.GITHUB, "o", "r"), a, b) == (
        "https://github.com/o/r/compare/aaaaaaaaaaaa...bbbbbbbbbbbb"
    )
    assert compare_url(RemoteReference(Provider.GITLAB, "o", "r"), a, b) == (
        "https://gitlab.com/o/r/-/compare/aaaaaaaaaaaa...bbbbbbbbbbbb"
    )
    assert compare_url(RemoteReference(Provider.BITBUCKET, "o", "r"), a, b) == (
        "https://bitbucket.org/o/r/branches/compare/bbbbbbbbbbbb..aaaaaaaaaaaa"
    )
    assert compare_url(RemoteReference(Provider.SOURCEHUT, "o", "r", "dev"), a, b) == (
        "https://git.sr.ht/~o/r/log/dev"
    )
