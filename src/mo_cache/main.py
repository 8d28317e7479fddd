"""Main entry point - wires settings, cache backend and the translator registry."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from mo_cache.coordinators import TranslatorRegistry
from mo_cache.services import (
    RedisSharedCacheClient,
    SettingsManager,
    SharedCacheClient,
    create_cache_store,
)

logger = logging.getLogger(__name__)


def detect_shared_client(settings: SettingsManager) -> Optional[SharedCacheClient]:
    """Return a Redis client when one is configured and answering, else None."""
    url = settings.get_redis_url()
    if url is None:
        return None

    try:
        client = RedisSharedCacheClient.from_url(url)
    except ValueError as e:
        logger.warning("Invalid shared cache URL %s: %s; falling back to files", url, e)
        return None
    if not client.is_available():
        logger.warning("Shared cache at %s is not reachable; falling back to files", url)
        return None
    return client


def create_registry(
    settings: Optional[SettingsManager] = None, flush_at_exit: bool = True
) -> TranslatorRegistry:
    """
    Bootstrap the caching layer following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    settings = settings or SettingsManager()
    store = create_cache_store(settings, detect_shared_client(settings))
    return TranslatorRegistry(store=store, flush_at_exit=flush_at_exit)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="mo-cache",
        description="Translate messages from a .mo catalog through the persistent cache.",
    )
    parser.add_argument("catalog", type=Path, help="Path to the compiled .mo catalog")
    parser.add_argument("domain", help="Text domain the catalog belongs to")
    parser.add_argument("texts", nargs="+", help="Messages to translate")
    parser.add_argument("--context", default=None, help="Message context")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    registry = create_registry(flush_at_exit=False)
    if not registry.override_load_catalog(args.domain, args.catalog):
        print(f"Catalog not readable: {args.catalog}", file=sys.stderr)
        return 1

    try:
        for text in args.texts:
            print(registry.translate(args.domain, text, args.context))
    finally:
        registry.close_all()

    return 0


if __name__ == "__main__":
    sys.exit(main())
