"""Home screen message selection."""

from __future__ import annotations

import logging

from dax_onboarding.dialogs.models import HomeScreenSpec
from dax_onboarding.dialogs.specs import HomeScreenSpecs
from dax_onboarding.storage.base import (
    HOME_SCREEN_MESSAGE_LIMIT,
    OnboardingStore,
    any_browsing_shown,
)

logger = logging.getLogger(__name__)


class HomeScreenAdvisor:
    """Chooses the next home screen dialog.

    The first home screen visit always gets the initial dialog. The
    subsequent dialog waits until the user has seen at least one
    browsing tip. After two dialogs the advisor stays silent.
    """

    def __init__(self, store: OnboardingStore) -> None:
        """Initialize the advisor.

        Args:
            store: Onboarding state store.
        """
        self._store = store

    def next_home_screen_message(self) -> HomeScreenSpec | None:
        """Get the next home screen message.

        The counter is only incremented when a message is returned.

        Returns:
            The dialog to show, or None if there is nothing to show.
        """
        if self._store.is_dismissed():
            return None

        seen = self._store.home_screen_messages_seen()
        if seen >= HOME_SCREEN_MESSAGE_LIMIT:
            return None

        if seen == 0:
            spec = HomeScreenSpecs.INITIAL
        elif any_browsing_shown(self._store):
            spec = HomeScreenSpecs.SUBSEQUENT
        else:
            logger.debug("Waiting for a browsing tip before the next home screen message")
            return None

        if not self._store.advance_home_screen_messages_seen(seen):
            logger.debug(f"Home screen counter moved past {seen}, skipping")
            return None

        logger.info(f"Showing home screen message {seen + 1} of {HOME_SCREEN_MESSAGE_LIMIT}")
        return spec
