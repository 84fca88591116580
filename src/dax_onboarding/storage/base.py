"""Onboarding state store interface.

The store holds the only mutable onboarding state: the dismissed flag,
the home screen message counter and one flag per browsing tip. Stores
must make each check-and-set atomic so a tip is shown at most once even
if the host application calls the advisors from several threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

# Number of home screen messages in the flow
HOME_SCREEN_MESSAGE_LIMIT = 2


class BrowsingFlag(Enum):
    """Persisted "already shown" flag for each browsing tip."""

    AFTER_SEARCH = "browsing_after_search_shown"
    WITH_TRACKERS = "browsing_with_trackers_shown"
    WITHOUT_TRACKERS = "browsing_without_trackers_shown"
    MAJOR_TRACKING_SITE = "browsing_major_tracking_site_shown"
    OWNED_BY_MAJOR_TRACKING_SITE = "browsing_owned_by_major_tracking_site_shown"


class OnboardingStore(Protocol):
    """Persistent onboarding state."""

    def is_dismissed(self) -> bool:
        """Return True once the flow has been dismissed."""
        ...

    def dismiss(self) -> None:
        """Dismiss the flow permanently."""
        ...

    def home_screen_messages_seen(self) -> int:
        """Return how many home screen messages have been shown."""
        ...

    def advance_home_screen_messages_seen(self, expected: int) -> bool:
        """Increment the home screen counter if it still equals ``expected``.

        The counter never exceeds HOME_SCREEN_MESSAGE_LIMIT.

        Returns:
            True if this call incremented the counter.
        """
        ...

    def is_shown(self, flag: BrowsingFlag) -> bool:
        """Return True if the browsing tip for ``flag`` has been shown."""
        ...

    def mark_shown(self, flag: BrowsingFlag) -> bool:
        """Set ``flag`` if it is not already set.

        Returns:
            True if this call performed the transition, False if the flag
            was already set.
        """
        ...


@dataclass(frozen=True)
class OnboardingState:
    """Point-in-time copy of a store's contents."""

    is_dismissed: bool
    home_screen_messages_seen: int
    browsing_shown: frozenset[BrowsingFlag]

    def to_dict(self) -> dict[str, object]:
        """Serialize to dictionary, using the persisted flag names."""
        data: dict[str, object] = {
            "is_dismissed": self.is_dismissed,
            "home_screen_messages_seen": self.home_screen_messages_seen,
        }
        for flag in BrowsingFlag:
            data[flag.value] = flag in self.browsing_shown
        return data


def any_browsing_shown(store: OnboardingStore) -> bool:
    """Return True if any browsing tip has been shown."""
    return any(store.is_shown(flag) for flag in BrowsingFlag)


def snapshot(store: OnboardingStore) -> OnboardingState:
    """Read the full state of ``store``."""
    return OnboardingState(
        is_dismissed=store.is_dismissed(),
        home_screen_messages_seen=store.home_screen_messages_seen(),
        browsing_shown=frozenset(flag for flag in BrowsingFlag if store.is_shown(flag)),
    )
