"""Redis-backed onboarding state store.

Flags are stored as individual keys under a common prefix. Setting a
browsing flag uses ``SET ... NX`` so only one caller can win the
false to true transition; the home screen counter is advanced by a Lua
script that compares and increments in a single step.
"""

from __future__ import annotations

import logging
from typing import Any

from dax_onboarding.storage.base import HOME_SCREEN_MESSAGE_LIMIT, BrowsingFlag

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "dax:onboarding:"

# KEYS[1] counter key; ARGV[1] expected value; ARGV[2] limit
ADVANCE_COUNTER_SCRIPT = """
local current = tonumber(redis.call('GET', KEYS[1]) or '0')
if current ~= tonumber(ARGV[1]) or current >= tonumber(ARGV[2]) then
    return 0
end
redis.call('SET', KEYS[1], current + 1)
return 1
"""


class RedisOnboardingStore:
    """Onboarding state persisted in Redis.

    Example:
        ```python
        from redis import Redis

        store = RedisOnboardingStore(Redis.from_url("redis://localhost:6379"))
        advisor = HomeScreenAdvisor(store)
        ```
    """

    KEY_DISMISSED = "dismissed"
    KEY_HOME_SEEN = "home_screen_messages_seen"

    def __init__(self, redis: Any, *, key_prefix: str = DEFAULT_KEY_PREFIX) -> None:
        """Initialize the store.

        Args:
            redis: Redis client (sync).
            key_prefix: Prefix for every key written by this store.
        """
        self.redis = redis
        self.key_prefix = key_prefix
        self._advance_counter = redis.register_script(ADVANCE_COUNTER_SCRIPT)

    def _key(self, name: str) -> str:
        return f"{self.key_prefix}{name}"

    def is_dismissed(self) -> bool:
        return bool(self.redis.exists(self._key(self.KEY_DISMISSED)))

    def dismiss(self) -> None:
        self.redis.set(self._key(self.KEY_DISMISSED), "1")
        logger.debug("Stored dismissal")

    def home_screen_messages_seen(self) -> int:
        value = self.redis.get(self._key(self.KEY_HOME_SEEN))
        if value is None:
            return 0
        if isinstance(value, bytes):
            value = value.decode()
        return min(int(value), HOME_SCREEN_MESSAGE_LIMIT)

    def advance_home_screen_messages_seen(self, expected: int) -> bool:
        result = self._advance_counter(
            keys=[self._key(self.KEY_HOME_SEEN)],
            args=[expected, HOME_SCREEN_MESSAGE_LIMIT],
        )
        return int(result) == 1

    def is_shown(self, flag: BrowsingFlag) -> bool:
        return bool(self.redis.exists(self._key(flag.value)))

    def mark_shown(self, flag: BrowsingFlag) -> bool:
        created = self.redis.set(self._key(flag.value), "1", nx=True)
        if created:
            logger.debug(f"Stored {flag.value}")
        return bool(created)

    def reset(self) -> int:
        """Delete all onboarding state under the key prefix.

        Returns:
            Number of keys removed.
        """
        keys = list(self.redis.scan_iter(match=f"{self.key_prefix}*"))
        if not keys:
            return 0
        removed = int(self.redis.delete(*keys))
        logger.info(f"Reset onboarding state ({removed} keys under {self.key_prefix})")
        return removed
