"""Onboarding facade combining the home screen and browsing advisors."""

from __future__ import annotations

from dax_onboarding.advisor.browsing import BrowsingAdvisor
from dax_onboarding.advisor.home import HomeScreenAdvisor
from dax_onboarding.dialogs.models import BrowsingSpec, HomeScreenSpec
from dax_onboarding.storage.base import OnboardingState, OnboardingStore, snapshot
from dax_onboarding.trackers.entities import EntityRegistry, MajorTrackerRegistry
from dax_onboarding.trackers.models import PageFacts


class DaxOnboarding:
    """Single entry point for the onboarding flow.

    Both advisors share one store, so a browsing tip unlocks the
    subsequent home screen message and dismissal silences both.
    """

    def __init__(
        self,
        store: OnboardingStore,
        *,
        entity_registry: EntityRegistry | None = None,
        major_registry: MajorTrackerRegistry | None = None,
    ) -> None:
        self.store = store
        self.home = HomeScreenAdvisor(store)
        self.browsing = BrowsingAdvisor(
            store,
            entity_registry=entity_registry,
            major_registry=major_registry,
        )

    def next_home_screen_message(self) -> HomeScreenSpec | None:
        """Get the next home screen message, or None."""
        return self.home.next_home_screen_message()

    def next_browsing_message(self, facts: PageFacts) -> BrowsingSpec | None:
        """Get the browsing tip for a completed page load, or None."""
        return self.browsing.next_browsing_message(facts)

    def dismiss(self) -> None:
        """Dismiss onboarding permanently."""
        self.browsing.dismiss()

    @property
    def is_dismissed(self) -> bool:
        """Return True once onboarding has been dismissed."""
        return self.store.is_dismissed()

    def state(self) -> OnboardingState:
        """Return a snapshot of the stored onboarding state."""
        return snapshot(self.store)
