"""Tests for host name helpers."""

import pytest

from dax_onboarding.trackers.hosts import (
    host_from_url,
    is_same_or_subdomain,
    is_search_results_url,
    normalize_host,
    parent_domains,
    strip_www,
)


class TestNormalizeHost:
    """Tests for normalize_host."""

    def test_lowercases_and_strips(self) -> None:
        assert normalize_host("  WWW.Example.COM. ") == "www.example.com"

    @pytest.mark.parametrize("host", [None, "", "   ", "."])
    def test_blank_is_none(self, host: str | None) -> None:
        assert normalize_host(host) is None


class TestHostFromUrl:
    """Tests for host_from_url."""

    def test_extracts_host(self) -> None:
        assert host_from_url("https://www.Example.com/path?q=1") == "www.example.com"

    def test_no_host(self) -> None:
        assert host_from_url("about:blank") is None

    def test_invalid_url(self) -> None:
        assert host_from_url("http://[::1") is None


class TestStripWww:
    """Tests for strip_www."""

    def test_strips_leading_www(self) -> None:
        assert strip_www("www.youtube.com") == "youtube.com"

    def test_strips_only_once(self) -> None:
        assert strip_www("www.www.example.com") == "www.example.com"

    def test_leaves_other_hosts(self) -> None:
        assert strip_www("wwwexample.com") == "wwwexample.com"
        assert strip_www("m.youtube.com") == "m.youtube.com"


class TestIsSameOrSubdomain:
    """Tests for is_same_or_subdomain."""

    def test_same(self) -> None:
        assert is_same_or_subdomain("google.com", "google.com")

    def test_subdomain(self) -> None:
        assert is_same_or_subdomain("maps.google.com", "google.com")

    def test_lookalike_is_not_subdomain(self) -> None:
        assert not is_same_or_subdomain("notgoogle.com", "google.com")

    def test_parent_is_not_subdomain(self) -> None:
        assert not is_same_or_subdomain("google.com", "maps.google.com")


class TestParentDomains:
    """Tests for parent_domains."""

    def test_walks_to_registrable_domain(self) -> None:
        assert list(parent_domains("a.b.example.com")) == [
            "a.b.example.com",
            "b.example.com",
            "example.com",
        ]

    def test_two_labels(self) -> None:
        assert list(parent_domains("example.com")) == ["example.com"]

    def test_single_label(self) -> None:
        assert list(parent_domains("localhost")) == ["localhost"]


class TestIsSearchResultsUrl:
    """Tests for is_search_results_url."""

    def test_search_page(self) -> None:
        assert is_search_results_url("https://duckduckgo.com/?q=privacy&t=h_")

    def test_search_home_page(self) -> None:
        assert not is_search_results_url("https://duckduckgo.com/")

    def test_other_site_with_query(self) -> None:
        assert not is_search_results_url("https://www.google.com/search?q=privacy")
