from .cache import cache_dir, lockfile_key, repo_cache_path, should_check_for_updates
from .classify import classify_input, is_remote_ref
from .parser import InvalidRemoteRefError, format_ref, parse, parse_remote_ref, require_remote_ref
from .providers import clone_url, compare_url, provider_domain, resolve_provider
from .types import ParseResult, Provider, RemoteReference
from .validation import is_valid_token

__all__ = [
    "InvalidRemoteRefError",
    "ParseResult",
    "Provider",
    "RemoteReference",
    "cache_dir",
    "classify_input",
    "clone_url",
    "compare_url",
    "format_ref",
    "is_remote_ref",
    "is_valid_token",
    "lockfile_key",
    "parse",
    "parse_remote_ref",
    "provider_domain",
    "repo_cache_path",
    "require_remote_ref",
    "resolve_provider",
    "should_check_for_updates",
]
