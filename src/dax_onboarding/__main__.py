"""CLI entry point for the Dax onboarding engine.

This module lets developers drive the onboarding flow from the command
line, against either a throwaway in-memory store or a Redis store.

Usage:
    python -m dax_onboarding [options] {home,browse,dismiss,status,reset}
"""

from __future__ import annotations

import argparse
import logging
import logging.config
import sys
from typing import NoReturn

from pydantic import ValidationError
from redis import Redis, RedisError

from dax_onboarding import __version__
from dax_onboarding.advisor.onboarding import DaxOnboarding
from dax_onboarding.config import Settings, clear_settings_cache, get_settings
from dax_onboarding.dialogs.models import BrowsingSpec, HomeScreenSpec
from dax_onboarding.storage.base import OnboardingStore
from dax_onboarding.storage.memory import InMemoryOnboardingStore
from dax_onboarding.storage.redis_store import RedisOnboardingStore
from dax_onboarding.trackers.entities import EntityDataError, EntityRegistry, MajorTrackerRegistry
from dax_onboarding.trackers.models import PageFacts, TrackerHit

# Application info
APP_NAME = "Dax Onboarding"
APP_VERSION = __version__

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="dax-onboarding",
        description="Pick the next onboarding tip for the home screen or a page load.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m dax_onboarding home                                  Next home screen tip
  python -m dax_onboarding browse https://duckduckgo.com/?q=x    Tip after a search
  python -m dax_onboarding browse https://example.com --tracker doubleclick.net
  python -m dax_onboarding --config-check                        Validate config and exit

With ONBOARDING_STORE=memory (the default) state lasts for one command only.
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    parser.add_argument(
        "--config-check",
        action="store_true",
        help="Validate configuration and exit",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level (default: from settings)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    home = subparsers.add_parser("home", help="Show the next home screen message")
    home.set_defaults(handler=run_home)

    browse = subparsers.add_parser("browse", help="Show the browsing message for a page load")
    browse.add_argument("url", help="URL of the loaded page")
    browse.add_argument(
        "--search",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Treat the page as a search results page (default: detect from URL)",
    )
    browse.add_argument(
        "--tracker",
        dest="trackers",
        action="append",
        default=[],
        metavar="DOMAIN",
        help="Domain of a blocked tracker (repeatable)",
    )
    browse.set_defaults(handler=run_browse)

    dismiss = subparsers.add_parser("dismiss", help="Dismiss onboarding permanently")
    dismiss.set_defaults(handler=run_dismiss)

    status = subparsers.add_parser("status", help="Print the stored onboarding state")
    status.set_defaults(handler=run_status)

    reset = subparsers.add_parser("reset", help="Clear stored onboarding state (Redis only)")
    reset.set_defaults(handler=run_reset)

    return parser


def configure_logging(level: str) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level string (DEBUG, INFO, etc.)
    """
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": (
                    "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "detailed" if level == "DEBUG" else "standard",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
        # Quieter logging for noisy libraries
        "loggers": {
            "redis": {"level": "WARNING"},
        },
    }
    logging.config.dictConfig(config)


def validate_config() -> Settings | None:
    """Validate and load configuration.

    Returns:
        Settings instance if valid, None if invalid.
    """
    try:
        # Clear cache to force reload
        clear_settings_cache()
        return get_settings()
    except ValidationError as e:
        print("Configuration validation failed:", file=sys.stderr)
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            msg = error["msg"]
            print(f"  {field}: {msg}", file=sys.stderr)
        return None


def print_config_summary(settings: Settings) -> None:
    """Print a summary of the configuration."""
    summary = settings.redacted_summary()
    print("Configuration:")
    print(f"  Store: {summary['store']}")
    if settings.store.backend == "redis":
        print(f"  Redis: {summary['redis_url']}")
        print(f"  Key Prefix: {summary['key_prefix']}")
    print(f"  Major Trackers: {summary['major_tracker_domains']}")
    print(f"  Entity Data: {summary['entity_data']}")
    print(f"  Log Level: {summary['log_level']}")
    print()


def run_config_check(settings: Settings) -> int:
    """Run configuration check and exit.

    Args:
        settings: Validated settings.

    Returns:
        Exit code (0 for success, 2 if entity data cannot be loaded).
    """
    print("Configuration is valid!")
    print()
    print_config_summary(settings)

    try:
        registry = create_entity_registry(settings)
    except EntityDataError as e:
        print(f"Entity data: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    print(f"Entity data: {len(registry.entities())} entities, {len(registry)} domains")
    print()
    print("All checks passed.")
    return EXIT_SUCCESS


def create_store(settings: Settings) -> OnboardingStore:
    """Create the onboarding store selected by the settings."""
    if settings.store.backend == "redis":
        client = Redis.from_url(settings.redis.url)
        return RedisOnboardingStore(client, key_prefix=settings.store.key_prefix)
    return InMemoryOnboardingStore()


def create_entity_registry(settings: Settings) -> EntityRegistry:
    """Create the entity registry from the configured data file or bundled data.

    Raises:
        EntityDataError: If the configured data file cannot be loaded.
    """
    path = settings.trackers.entity_data_path
    if path is None:
        return EntityRegistry()
    return EntityRegistry.from_file(path)


def create_onboarding(settings: Settings) -> DaxOnboarding:
    """Wire the onboarding flow from settings."""
    return DaxOnboarding(
        create_store(settings),
        entity_registry=create_entity_registry(settings),
        major_registry=MajorTrackerRegistry(settings.trackers.major_domains),
    )


def print_message(spec: HomeScreenSpec | BrowsingSpec | None) -> None:
    """Print a dialog, or a note that there is nothing to show."""
    if spec is None:
        print("No message to show.")
        return
    print(f"[height {spec.height}]")
    print(spec.message)
    if isinstance(spec, BrowsingSpec):
        print(f"[{spec.cta}]")


def run_home(onboarding: DaxOnboarding, args: argparse.Namespace) -> int:
    print_message(onboarding.next_home_screen_message())
    return EXIT_SUCCESS


def run_browse(onboarding: DaxOnboarding, args: argparse.Namespace) -> int:
    registry = onboarding.browsing.entity_registry
    hits = [TrackerHit(domain, registry.find_owning_entity(domain)) for domain in args.trackers]
    facts = PageFacts.for_url(args.url, hits, is_search_results_page=args.search)
    print_message(onboarding.next_browsing_message(facts))
    return EXIT_SUCCESS


def run_dismiss(onboarding: DaxOnboarding, args: argparse.Namespace) -> int:
    onboarding.dismiss()
    print("Onboarding dismissed.")
    return EXIT_SUCCESS


def run_status(onboarding: DaxOnboarding, args: argparse.Namespace) -> int:
    for name, value in onboarding.state().to_dict().items():
        print(f"{name}: {value}")
    return EXIT_SUCCESS


def run_reset(onboarding: DaxOnboarding, args: argparse.Namespace) -> int:
    if not isinstance(onboarding.store, RedisOnboardingStore):
        print("Nothing to reset: the in-memory store keeps no state between runs.")
        return EXIT_SUCCESS
    removed = onboarding.store.reset()
    print(f"Removed {removed} key(s).")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Validate configuration first
    settings = validate_config()
    if settings is None:
        sys.exit(EXIT_CONFIG_ERROR)

    log_level = args.log_level or settings.log_level
    configure_logging(log_level)

    if args.config_check:
        sys.exit(run_config_check(settings))

    if args.command is None:
        parser.print_help()
        sys.exit(EXIT_ERROR)

    try:
        onboarding = create_onboarding(settings)
        exit_code = args.handler(onboarding, args)
    except EntityDataError as e:
        print(f"Entity data: {e}", file=sys.stderr)
        exit_code = EXIT_CONFIG_ERROR
    except RedisError as e:
        logger.error(f"Onboarding store unavailable: {e}")
        exit_code = EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        exit_code = EXIT_INTERRUPTED
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
