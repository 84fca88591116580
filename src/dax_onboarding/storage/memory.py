"""In-memory onboarding state store."""

from __future__ import annotations

import logging
import threading

from dax_onboarding.storage.base import HOME_SCREEN_MESSAGE_LIMIT, BrowsingFlag

logger = logging.getLogger(__name__)


class InMemoryOnboardingStore:
    """Onboarding state held in process memory.

    State lasts for the lifetime of the object. A lock makes each
    check-and-set atomic.
    """

    def __init__(
        self,
        *,
        is_dismissed: bool = False,
        home_screen_messages_seen: int = 0,
        browsing_shown: set[BrowsingFlag] | None = None,
    ) -> None:
        """Initialize the store, optionally with existing state.

        Args:
            is_dismissed: Whether the flow starts dismissed.
            home_screen_messages_seen: Initial home screen counter.
            browsing_shown: Browsing flags that start set.

        Raises:
            ValueError: If the counter is outside 0..HOME_SCREEN_MESSAGE_LIMIT.
        """
        if not 0 <= home_screen_messages_seen <= HOME_SCREEN_MESSAGE_LIMIT:
            raise ValueError(
                f"home_screen_messages_seen must be between 0 and {HOME_SCREEN_MESSAGE_LIMIT}"
            )
        self._lock = threading.Lock()
        self._dismissed = is_dismissed
        self._home_seen = home_screen_messages_seen
        self._shown: set[BrowsingFlag] = set(browsing_shown or ())

    def is_dismissed(self) -> bool:
        return self._dismissed

    def dismiss(self) -> None:
        with self._lock:
            self._dismissed = True

    def home_screen_messages_seen(self) -> int:
        return self._home_seen

    def advance_home_screen_messages_seen(self, expected: int) -> bool:
        with self._lock:
            if self._home_seen != expected or self._home_seen >= HOME_SCREEN_MESSAGE_LIMIT:
                return False
            self._home_seen += 1
            return True

    def is_shown(self, flag: BrowsingFlag) -> bool:
        return flag in self._shown

    def mark_shown(self, flag: BrowsingFlag) -> bool:
        with self._lock:
            if flag in self._shown:
                return False
            self._shown.add(flag)
        logger.debug(f"Set {flag.value}")
        return True
