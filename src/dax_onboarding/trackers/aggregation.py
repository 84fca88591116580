"""Aggregation of blocked trackers by owning entity."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from dax_onboarding.trackers.entities import MajorTrackerRegistry
from dax_onboarding.trackers.models import Entity, TrackerHit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackerSummary:
    """Blocked trackers on a page, grouped by owning entity.

    Attributes:
        major: Major tracker entities, highest prevalence first.
        other: All remaining entities, in order of first appearance.
    """

    major: tuple[Entity, ...]
    other: tuple[Entity, ...]

    @property
    def major_count(self) -> int:
        return len(self.major)

    @property
    def other_count(self) -> int:
        return len(self.other)


def summarize_blocked_trackers(
    hits: Iterable[TrackerHit],
    major_registry: MajorTrackerRegistry,
) -> TrackerSummary:
    """Deduplicate blocked trackers by entity and split out the major ones.

    Hits without a resolved entity are dropped.

    Args:
        hits: Blocked tracker hits for one page.
        major_registry: Registry deciding which entities are major.

    Returns:
        TrackerSummary with major entities sorted by prevalence.
    """
    entities = list(dict.fromkeys(hit.entity for hit in hits if hit.entity is not None))

    major = [e for e in entities if major_registry.is_major_entity(e)]
    other = [e for e in entities if not major_registry.is_major_entity(e)]
    major.sort(key=lambda e: e.ranking_prevalence, reverse=True)

    logger.debug(f"Blocked trackers: {len(major)} major, {len(other)} other entities")
    return TrackerSummary(major=tuple(major), other=tuple(other))
