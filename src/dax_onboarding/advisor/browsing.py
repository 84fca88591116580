"""Browsing message selection.

This module provides the BrowsingAdvisor class, which picks at most one
never-before-shown tip after each page load.

Rule order (first match wins):
    1. DuckDuckGo search results page
    2. Site is itself a major tracker
    3. Site is owned by a major tracker
    4. No trackers blocked
    5. Trackers blocked

A matching rule whose tip was already shown ends the evaluation; later
rules are not consulted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any
from dataclasses import dataclass

from dax_onboarding.dialogs.models import BrowsingSpec
from dax_onboarding.dialogs.specs import BrowsingSpecs
from dax_onboarding.storage.base import BrowsingFlag, OnboardingStore
from dax_onboarding.trackers.aggregation import TrackerSummary, summarize_blocked_trackers
from dax_onboarding.trackers.entities import EntityRegistry, MajorTrackerRegistry
from dax_onboarding.trackers.hosts import normalize_host, strip_www
from dax_onboarding.trackers.models import Entity, PageFacts

logger = logging.getLogger(__name__)

# (major entity count, other entities present) -> tip
TRACKER_MESSAGE_SHAPES: dict[tuple[int, bool], BrowsingSpec] = {
    (1, False): BrowsingSpecs.WITH_ONE_MAJOR_TRACKER,
    (1, True): BrowsingSpecs.WITH_ONE_MAJOR_TRACKER_AND_OTHERS,
    (2, False): BrowsingSpecs.WITH_TWO_MAJOR_TRACKERS,
    (2, True): BrowsingSpecs.WITH_TWO_MAJOR_TRACKERS_AND_OTHERS,
}


def select_tracker_message(summary: TrackerSummary) -> BrowsingSpec | None:
    """Pick and format the tracker tip for a page's blocked trackers.

    Args:
        summary: Blocked trackers grouped by entity.

    Returns:
        The formatted tip, or None if no tip covers this combination.
    """
    has_others = summary.other_count > 0
    spec = TRACKER_MESSAGE_SHAPES.get((summary.major_count, has_others))
    if spec is None:
        return None

    names = [entity.display_name for entity in summary.major]
    if has_others:
        return spec.format(*names, summary.other_count)
    return spec.format(*names)


@dataclass(frozen=True)
class BrowsingRule:
    """One entry in the browsing rule chain.

    Attributes:
        name: Short rule name used in logs.
        flag: Flag recording that this rule's tip was shown.
        matches: Tests the page facts and normalized host. Returns a truthy
            match value when the rule applies.
        build: Produces the tip from the match value, or None if the page
            has no tip to offer.
    """

    name: str
    flag: BrowsingFlag
    matches: Callable[[PageFacts, str], Any]
    build: Callable[[PageFacts, str, Any], BrowsingSpec | None]


class BrowsingAdvisor:
    """Chooses the browsing tip to show after a page load.

    Example:
        ```python
        advisor = BrowsingAdvisor(store)
        spec = advisor.next_browsing_message(
            PageFacts.for_url("https://example.com", blocked_trackers=hits)
        )
        if spec is not None:
            show_dialog(spec.height, spec.message, spec.cta)
        ```
    """

    def __init__(
        self,
        store: OnboardingStore,
        *,
        entity_registry: EntityRegistry | None = None,
        major_registry: MajorTrackerRegistry | None = None,
    ) -> None:
        """Initialize the advisor.

        Args:
            store: Onboarding state store.
            entity_registry: Host to owner lookup. Defaults to bundled data.
            major_registry: Major tracker domains. Defaults to the bundled list.
        """
        self._store = store
        self._entities = entity_registry if entity_registry is not None else EntityRegistry()
        self._majors = major_registry if major_registry is not None else MajorTrackerRegistry()
        self._rules: tuple[BrowsingRule, ...] = (
            BrowsingRule(
                name="after_search",
                flag=BrowsingFlag.AFTER_SEARCH,
                matches=lambda facts, host: facts.is_search_results_page,
                build=lambda facts, host, match: BrowsingSpecs.AFTER_SEARCH,
            ),
            BrowsingRule(
                name="site_is_major_tracker",
                flag=BrowsingFlag.MAJOR_TRACKING_SITE,
                matches=lambda facts, host: self._majors.is_major_host(host),
                build=lambda facts, host, match: BrowsingSpecs.SITE_IS_MAJOR_TRACKER,
            ),
            BrowsingRule(
                name="site_owned_by_major_tracker",
                flag=BrowsingFlag.OWNED_BY_MAJOR_TRACKING_SITE,
                matches=lambda facts, host: self._major_owner(host),
                build=self._build_owned_by_major_tracker,
            ),
            BrowsingRule(
                name="without_trackers",
                flag=BrowsingFlag.WITHOUT_TRACKERS,
                matches=lambda facts, host: not facts.blocked_trackers,
                build=lambda facts, host, match: BrowsingSpecs.WITHOUT_TRACKERS,
            ),
            BrowsingRule(
                name="with_trackers",
                flag=BrowsingFlag.WITH_TRACKERS,
                matches=lambda facts, host: bool(facts.blocked_trackers),
                build=self._build_with_trackers,
            ),
        )

    @property
    def entity_registry(self) -> EntityRegistry:
        """Return the entity registry used for owner lookups."""
        return self._entities

    @property
    def rules(self) -> tuple[BrowsingRule, ...]:
        """Return the rule chain in evaluation order."""
        return self._rules

    def next_browsing_message(self, facts: PageFacts) -> BrowsingSpec | None:
        """Get the browsing tip for a completed page load.

        Args:
            facts: Facts about the loaded page.

        Returns:
            The formatted tip to show, or None if there is nothing to show.
        """
        host = normalize_host(facts.host)
        if host is None:
            logger.debug("No host for page, skipping browsing message")
            return None

        if self._store.is_dismissed():
            return None

        for rule in self._rules:
            match = rule.matches(facts, host)
            if not match:
                continue

            if self._store.is_shown(rule.flag):
                logger.debug(f"Rule {rule.name} matched {host} but was already shown")
                return None

            spec = rule.build(facts, host, match)
            if spec is None:
                logger.debug(f"Rule {rule.name} matched {host} but has no message")
                return None

            if not self._store.mark_shown(rule.flag):
                return None

            logger.info(f"Showing browsing message {rule.name} on {host}")
            return spec

        return None

    def dismiss(self) -> None:
        """Dismiss onboarding permanently."""
        self._store.dismiss()
        logger.info("Onboarding dismissed")

    def _major_owner(self, host: str) -> Entity | None:
        """Return the host's owner if it is a major tracker entity."""
        owner = self._entities.find_owning_entity(host)
        if owner is None or not self._majors.is_major_entity(owner):
            return None
        return owner

    def _build_owned_by_major_tracker(
        self, facts: PageFacts, host: str, owner: Entity
    ) -> BrowsingSpec | None:
        return BrowsingSpecs.SITE_OWNED_BY_MAJOR_TRACKER.format(
            strip_www(host),
            owner.display_name,
            owner.ranking_prevalence,
        )

    def _build_with_trackers(self, facts: PageFacts, host: str, match: Any) -> BrowsingSpec | None:
        summary = summarize_blocked_trackers(facts.blocked_trackers, self._majors)
        return select_tracker_message(summary)
