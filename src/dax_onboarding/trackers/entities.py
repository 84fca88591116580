"""Tracker entity registries.

This module provides the EntityRegistry class for resolving a host to
the company that owns it, and the MajorTrackerRegistry class for
deciding which companies count as major tracking networks.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dax_onboarding.trackers.entity_data import MAJOR_TRACKER_DOMAINS, get_all_known_entities
from dax_onboarding.trackers.hosts import is_same_or_subdomain, normalize_host, parent_domains
from dax_onboarding.trackers.models import Entity

logger = logging.getLogger(__name__)


class EntityDataError(Exception):
    """Raised when an entity data file cannot be read or validated."""


class EntityRecord(BaseModel):
    """One entity in an entity data file."""

    model_config = ConfigDict(populate_by_name=True)

    display_name: str | None = Field(default=None, alias="displayName")
    domains: list[str] = Field(default_factory=list)
    prevalence: float | None = Field(default=None, ge=0.0, le=100.0)


class EntityDataFile(BaseModel):
    """Top-level layout of an entity data file."""

    entities: dict[str, EntityRecord]


def load_entity_file(path: str | Path) -> list[Entity]:
    """Load entities from a JSON file.

    The file layout is::

        {"entities": {"Google LLC": {"displayName": "Google",
                                     "domains": ["google.com"],
                                     "prevalence": 84.6}}}

    Args:
        path: Path to the JSON file.

    Returns:
        List of entities, in file order.

    Raises:
        EntityDataError: If the file is missing, not JSON, or invalid.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise EntityDataError(f"Cannot read entity data file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise EntityDataError(f"Invalid JSON in entity data file {path}: {e.msg}") from e

    try:
        data = EntityDataFile.model_validate(raw)
    except ValidationError as e:
        raise EntityDataError(f"Invalid entity data in {path}: {e}") from e

    entities = [
        Entity(
            display_name=record.display_name or name,
            domains=frozenset(d.strip().lower() for d in record.domains if d.strip()),
            prevalence=record.prevalence,
        )
        for name, record in data.entities.items()
    ]
    logger.info(f"Loaded {len(entities)} entities from {path}")
    return entities


class EntityRegistry:
    """Registry mapping tracker domains to their owning entities.

    Lookups match the host itself or its nearest registered parent
    domain, so ``maps.google.com`` resolves to the entity that owns
    ``google.com``.

    Attributes:
        _entities: Internal mapping of domain to entity.
    """

    def __init__(
        self,
        custom_entities: Iterable[Entity] | None = None,
        *,
        include_defaults: bool = True,
    ) -> None:
        """Initialize the entity registry.

        Args:
            custom_entities: Additional entities to include. These override
                the defaults for any domain they share.
            include_defaults: Whether to include the bundled known entities.
        """
        self._entities: dict[str, Entity] = {}

        if include_defaults:
            self._entities.update(get_all_known_entities())

        for entity in custom_entities or ():
            self.add_entity(entity)

        logger.info(f"EntityRegistry initialized with {len(self._entities)} known domains")

    @classmethod
    def from_file(cls, path: str | Path, *, include_defaults: bool = False) -> EntityRegistry:
        """Create a registry from an entity data file.

        Raises:
            EntityDataError: If the file cannot be loaded.
        """
        return cls(load_entity_file(path), include_defaults=include_defaults)

    def find_owning_entity(self, host: str | None) -> Entity | None:
        """Find the entity that owns a host.

        Args:
            host: The host to look up.

        Returns:
            The owning Entity, or None if the host is unknown.
        """
        clean = normalize_host(host)
        if clean is None:
            return None
        for domain in parent_domains(clean):
            entity = self._entities.get(domain)
            if entity is not None:
                return entity
        return None

    def add_entity(self, entity: Entity) -> None:
        """Add an entity, mapping each of its domains to it."""
        for domain in entity.domains:
            self._entities[domain.lower()] = entity
        logger.debug(f"Added entity {entity.display_name} with {len(entity.domains)} domains")

    def entities(self) -> list[Entity]:
        """Return each distinct entity in the registry."""
        return list(dict.fromkeys(self._entities.values()))

    def __len__(self) -> int:
        """Return the number of domains in the registry."""
        return len(self._entities)

    def __contains__(self, host: str) -> bool:
        """Check if a host resolves to a known entity."""
        return self.find_owning_entity(host) is not None


class MajorTrackerRegistry:
    """The set of domains identifying dominant tracking networks.

    An entity is a major tracker when any of its domains is in the
    registry; a site is a major tracker when its host is, or is a
    subdomain of, a registry domain.
    """

    def __init__(self, domains: Iterable[str] | None = None) -> None:
        """Initialize the major tracker registry.

        Args:
            domains: Major tracker domains. Defaults to MAJOR_TRACKER_DOMAINS.
        """
        if domains is None:
            domains = MAJOR_TRACKER_DOMAINS
        self._domains = frozenset(d.strip().lower() for d in domains if d.strip())

    @property
    def domains(self) -> frozenset[str]:
        """Return the major tracker domains."""
        return self._domains

    def is_major_host(self, host: str) -> bool:
        """Check whether a host belongs to a major tracker domain."""
        return any(is_same_or_subdomain(host, domain) for domain in self._domains)

    def is_major_entity(self, entity: Entity) -> bool:
        """Check whether an entity owns any major tracker domain."""
        return not self._domains.isdisjoint(entity.domains)

    def __len__(self) -> int:
        return len(self._domains)

    def __contains__(self, domain: str) -> bool:
        return domain.lower() in self._domains
