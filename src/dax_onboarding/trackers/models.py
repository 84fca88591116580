"""Data models for the trackers module."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from dax_onboarding.trackers.hosts import host_from_url, is_search_results_url


@dataclass(frozen=True)
class Entity:
    """A company that owns one or more tracker domains.

    Attributes:
        display_name: Human-readable company name, e.g. "Google".
        domains: Domains owned by the company (lowercase).
        prevalence: Percentage of top sites carrying the company's trackers,
            or None if unknown.
    """

    display_name: str
    domains: frozenset[str]
    prevalence: float | None = None

    @property
    def ranking_prevalence(self) -> float:
        """Return the prevalence used for ranking, treating unknown as 0.0."""
        return self.prevalence if self.prevalence is not None else 0.0


@dataclass(frozen=True)
class TrackerHit:
    """A tracker request that was blocked on a page.

    Attributes:
        domain: The tracker's host.
        entity: The owning entity, if it could be resolved.
    """

    domain: str
    entity: Entity | None = None


@dataclass(frozen=True)
class PageFacts:
    """Facts about one completed page load.

    Attributes:
        host: The page's host, or None if it could not be resolved.
        is_search_results_page: Whether the page is a DuckDuckGo results page.
        blocked_trackers: Trackers blocked while loading the page.
    """

    host: str | None
    is_search_results_page: bool = False
    blocked_trackers: tuple[TrackerHit, ...] = ()

    @classmethod
    def for_url(
        cls,
        url: str,
        blocked_trackers: Iterable[TrackerHit] = (),
        *,
        is_search_results_page: bool | None = None,
    ) -> PageFacts:
        """Build page facts from a page URL.

        Args:
            url: The loaded page URL.
            blocked_trackers: Trackers blocked on the page.
            is_search_results_page: Override search page detection.

        Returns:
            PageFacts with the host extracted from ``url``.
        """
        if is_search_results_page is None:
            is_search_results_page = is_search_results_url(url)
        return cls(
            host=host_from_url(url),
            is_search_results_page=is_search_results_page,
            blocked_trackers=tuple(blocked_trackers),
        )
