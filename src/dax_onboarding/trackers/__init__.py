"""Trackers - entity ownership, major tracker classification and aggregation."""

from dax_onboarding.trackers.aggregation import (
    TrackerSummary,
    summarize_blocked_trackers,
)
from dax_onboarding.trackers.entities import (
    EntityDataError,
    EntityRegistry,
    MajorTrackerRegistry,
    load_entity_file,
)
from dax_onboarding.trackers.models import (
    Entity,
    PageFacts,
    TrackerHit,
)

__all__ = [
    # Aggregation
    "TrackerSummary",
    "summarize_blocked_trackers",
    # Registries
    "EntityDataError",
    "EntityRegistry",
    "MajorTrackerRegistry",
    "load_entity_file",
    # Models
    "Entity",
    "PageFacts",
    "TrackerHit",
]
