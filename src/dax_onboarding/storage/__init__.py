"""Storage layer - persisted onboarding flags and counters."""

from dax_onboarding.storage.base import (
    HOME_SCREEN_MESSAGE_LIMIT,
    BrowsingFlag,
    OnboardingState,
    OnboardingStore,
    any_browsing_shown,
    snapshot,
)
from dax_onboarding.storage.memory import InMemoryOnboardingStore
from dax_onboarding.storage.redis_store import RedisOnboardingStore

__all__ = [
    "HOME_SCREEN_MESSAGE_LIMIT",
    "BrowsingFlag",
    "InMemoryOnboardingStore",
    "OnboardingState",
    "OnboardingStore",
    "RedisOnboardingStore",
    "any_browsing_shown",
    "snapshot",
]
