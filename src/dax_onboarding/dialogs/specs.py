"""Canonical onboarding dialogs.

All dialogs are immutable constants created at import time. Browsing
dialogs with placeholders are formatted per page visit via
``BrowsingSpec.format``.
"""

from __future__ import annotations

from dax_onboarding.dialogs.models import BrowsingSpec, HomeScreenSpec, MessageTemplate

# Call-to-action labels
CTA_PHEW = "Phew!"
CTA_GOT_IT = "Got It"
CTA_HIGH_FIVE = "High Five!"

# Dialog heights
HOME_INITIAL_HEIGHT = 235
HOME_SUBSEQUENT_HEIGHT = 210
BROWSING_HEIGHT = 250
BROWSING_TALL_HEIGHT = 340

_URL_BAR_HINT = (
    "☝️ You can check the URL bar to see who is trying to track you "
    "when you visit a new site."
)


class HomeScreenSpecs:
    """Home screen dialogs, in the order they are shown."""

    INITIAL = HomeScreenSpec(
        height=HOME_INITIAL_HEIGHT,
        message=(
            "Next, try visiting one of your favorite sites!\n\n"
            "I’ll block trackers so they can’t spy on you. I’ll\n"
            "also upgrade the security of your connection\n"
            "if possible. 🔒"
        ),
    )

    SUBSEQUENT = HomeScreenSpec(
        height=HOME_SUBSEQUENT_HEIGHT,
        message=(
            "You’ve got this!\n\n"
            "Remember: every time you browse with me a\n"
            "creepy ad loses its wings. 👍"
        ),
    )


class BrowsingSpecs:
    """Browsing dialogs, one per onboarding tip."""

    AFTER_SEARCH = BrowsingSpec(
        height=BROWSING_HEIGHT,
        template=MessageTemplate(
            "Your DuckDuckGo searches are anonymous and I never store your "
            "search history. Ever. 🙌"
        ),
        cta=CTA_PHEW,
    )

    WITHOUT_TRACKERS = BrowsingSpec(
        height=BROWSING_HEIGHT,
        template=MessageTemplate(
            "As you tap and scroll, I’ll block pesky trackers.\n\n"
            "Go ahead - keep browsing!"
        ),
        cta=CTA_GOT_IT,
    )

    SITE_IS_MAJOR_TRACKER = BrowsingSpec(
        height=BROWSING_TALL_HEIGHT,
        template=MessageTemplate(
            "Heads up! This site belongs to a major tracking network, so I can’t "
            "stop them from seeing your activity here.\n\n"
            "But browse with me, and I can reduce what they know about you "
            "overall by blocking their trackers on lots of other sites."
        ),
        cta=CTA_GOT_IT,
    )

    # {0} host, {1} owner name, {2} owner prevalence
    SITE_OWNED_BY_MAJOR_TRACKER = BrowsingSpec(
        height=BROWSING_TALL_HEIGHT,
        template=MessageTemplate(
            "Heads up! {0} is owned by {1}.\n\n"
            "{1}’s trackers lurk on about {2:.0f}% of top websites 😱 "
            "but don’t worry!\n\n"
            "I’ll block {1} from seeing your activity on those sites."
        ),
        cta=CTA_GOT_IT,
    )

    WITH_ONE_MAJOR_TRACKER = BrowsingSpec(
        height=BROWSING_HEIGHT,
        template=MessageTemplate(
            "*{0}* was trying to track you here.\n\nI blocked them!\n\n" + _URL_BAR_HINT
        ),
        cta=CTA_HIGH_FIVE,
    )

    WITH_ONE_MAJOR_TRACKER_AND_OTHERS = BrowsingSpec(
        height=BROWSING_HEIGHT,
        template=MessageTemplate(
            "*{0}* and *{1} other(s)* were trying to track you here.\n\n"
            "I blocked them!\n\n" + _URL_BAR_HINT
        ),
        cta=CTA_HIGH_FIVE,
    )

    WITH_TWO_MAJOR_TRACKERS = BrowsingSpec(
        height=BROWSING_HEIGHT,
        template=MessageTemplate(
            "*{0} and {1}* were trying to track you here.\n\n"
            "I blocked them!\n\n" + _URL_BAR_HINT
        ),
        cta=CTA_HIGH_FIVE,
    )

    WITH_TWO_MAJOR_TRACKERS_AND_OTHERS = BrowsingSpec(
        height=BROWSING_HEIGHT,
        template=MessageTemplate(
            "*{0}, {1}* and *{2} other(s)* were trying to track you here.\n\n"
            "I blocked them!\n\n" + _URL_BAR_HINT
        ),
        cta=CTA_HIGH_FIVE,
    )
