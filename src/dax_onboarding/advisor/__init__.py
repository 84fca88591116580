"""Advisors - decide which onboarding message to show next."""

from dax_onboarding.advisor.browsing import (
    TRACKER_MESSAGE_SHAPES,
    BrowsingAdvisor,
    BrowsingRule,
    select_tracker_message,
)
from dax_onboarding.advisor.home import HomeScreenAdvisor
from dax_onboarding.advisor.onboarding import DaxOnboarding

__all__ = [
    "TRACKER_MESSAGE_SHAPES",
    "BrowsingAdvisor",
    "BrowsingRule",
    "DaxOnboarding",
    "HomeScreenAdvisor",
    "select_tracker_message",
]
