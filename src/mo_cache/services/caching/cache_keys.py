"""Cache key derivation for translation requests and persisted records."""

import hashlib
import json
from pathlib import Path
from typing import Any, Sequence

SHARED_KEY_PREFIX = "mo__"
CACHE_FILE_SUFFIX = ".cache"


def _md5(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def derive_key(args: Sequence[Any], domain: str) -> str:
    """
    Compute a stable key for a translation request.

    Args:
        args: Request arguments in call order (strings, ints or None).
        domain: Text domain the request belongs to.

    Returns:
        32-character hex digest; equal inputs always give equal keys.
    """
    payload = json.dumps([list(args), domain], ensure_ascii=False, separators=(",", ":"))
    return _md5(payload)


def file_cache_name(site_id: str, domain: str, catalog_path: Path) -> str:
    """File name of the cache artifact for a (site, domain, catalog) triple."""
    return _md5(" ".join([site_id, domain, str(catalog_path)])) + CACHE_FILE_SUFFIX


def shared_cache_key(catalog_path: Path) -> str:
    """Shared cache key for a catalog; scoped by path only."""
    return SHARED_KEY_PREFIX + _md5(str(catalog_path))
