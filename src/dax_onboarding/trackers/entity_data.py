"""Known tracker network entities.

This module contains the bundled entity table used when no entity data
file is configured. Prevalence is the approximate percentage of top
websites on which each company's trackers were found.

Sources:
- DuckDuckGo Tracker Radar
- Published company domain lists
"""

from __future__ import annotations

from dax_onboarding.trackers.models import Entity

# Domains that identify the dominant tracking networks
MAJOR_TRACKER_DOMAINS = ("facebook.com", "google.com")

GOOGLE = Entity(
    display_name="Google",
    domains=frozenset(
        [
            "google.com",
            "google-analytics.com",
            "googleadservices.com",
            "googlesyndication.com",
            "googletagmanager.com",
            "googleapis.com",
            "gstatic.com",
            "doubleclick.net",
            "youtube.com",
            "blogger.com",
        ]
    ),
    prevalence=84.6,
)

FACEBOOK = Entity(
    display_name="Facebook",
    domains=frozenset(
        [
            "facebook.com",
            "facebook.net",
            "fbcdn.net",
            "instagram.com",
            "messenger.com",
            "whatsapp.com",
        ]
    ),
    prevalence=36.4,
)

AMAZON = Entity(
    display_name="Amazon.com",
    domains=frozenset(["amazon.com", "amazon-adsystem.com", "amazon.co.uk", "imdb.com"]),
    prevalence=21.4,
)

MICROSOFT = Entity(
    display_name="Microsoft",
    domains=frozenset(["microsoft.com", "bing.com", "clarity.ms", "linkedin.com", "live.com"]),
    prevalence=12.3,
)

XANDR = Entity(
    display_name="Xandr",
    domains=frozenset(["adnxs.com", "appnexus.com"]),
    prevalence=10.6,
)

TWITTER = Entity(
    display_name="Twitter",
    domains=frozenset(["twitter.com", "twimg.com", "t.co"]),
    prevalence=9.2,
)

ORACLE = Entity(
    display_name="Oracle",
    domains=frozenset(["oracle.com", "bluekai.com", "addthis.com"]),
    prevalence=8.1,
)

ADOBE = Entity(
    display_name="Adobe",
    domains=frozenset(["adobe.com", "demdex.net", "omtrdc.net", "typekit.net"]),
    prevalence=7.9,
)

CRITEO = Entity(
    display_name="Criteo",
    domains=frozenset(["criteo.com", "criteo.net"]),
    prevalence=5.7,
)

YANDEX = Entity(
    display_name="Yandex",
    domains=frozenset(["yandex.ru", "yandex.com", "yandex.net"]),
    prevalence=4.2,
)

KNOWN_ENTITIES: tuple[Entity, ...] = (
    GOOGLE,
    FACEBOOK,
    AMAZON,
    MICROSOFT,
    XANDR,
    TWITTER,
    ORACLE,
    ADOBE,
    CRITEO,
    YANDEX,
)


def get_all_known_entities() -> dict[str, Entity]:
    """Get a combined mapping of every known domain to its entity.

    Returns:
        Dictionary mapping lowercase domain to owning Entity.
    """
    return {domain: entity for entity in KNOWN_ENTITIES for domain in entity.domains}
