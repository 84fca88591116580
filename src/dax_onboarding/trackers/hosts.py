"""Host name helpers for tracker and site classification."""

from __future__ import annotations

from collections.abc import Iterator
from urllib import parse

SEARCH_HOSTS = frozenset(["duckduckgo.com", "www.duckduckgo.com"])


def normalize_host(host: str | None) -> str | None:
    """Lowercase ``host`` and strip surrounding whitespace and trailing dots.

    Returns None for a missing or blank host.
    """
    if host is None:
        return None
    clean = host.strip().rstrip(".").lower()
    return clean or None


def host_from_url(url: str) -> str | None:
    """Extract the host name from a URL, or None if it has none."""
    try:
        return normalize_host(parse.urlparse(url).hostname)
    except ValueError:
        return None


def strip_www(host: str) -> str:
    """Remove a single leading ``www.`` label."""
    if host.startswith("www."):
        return host[len("www.") :]
    return host


def is_same_or_subdomain(host: str, domain: str) -> bool:
    """Check whether ``host`` equals ``domain`` or is one of its subdomains."""
    return host == domain or host.endswith("." + domain)


def parent_domains(host: str) -> Iterator[str]:
    """Yield ``host`` followed by each parent domain with at least two labels.

    ``"a.b.example.com"`` yields ``a.b.example.com``, ``b.example.com``
    and ``example.com``.
    """
    labels = host.split(".")
    for i in range(len(labels) - 1):
        yield ".".join(labels[i:])
    if len(labels) == 1:
        yield host


def is_search_results_url(url: str) -> bool:
    """Check whether ``url`` is a DuckDuckGo search results page."""
    if host_from_url(url) not in SEARCH_HOSTS:
        return False
    return bool(parse.parse_qs(parse.urlparse(url).query).get("q"))
