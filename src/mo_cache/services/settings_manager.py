"""Settings Manager - Handles cache location, site scoping and shared cache configuration."""

import os
import tempfile
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_SITE_ID = "default"


class SettingsManager:
    """
    Manages settings read from the environment.

    Values come from process environment variables, seeded from a .env file
    in the project root.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_site_id(self) -> str:
        """Identifier scoping file cache artifacts to this installation."""
        return self._get("MOCACHE_SITE_ID") or DEFAULT_SITE_ID

    def get_cache_dir(self) -> Path:
        """Directory for file cache artifacts; the system temp dir unless configured."""
        configured = self._get("MOCACHE_CACHE_DIR")
        return Path(configured) if configured else Path(tempfile.gettempdir())

    def get_redis_url(self) -> Optional[str]:
        """URL of the shared object cache, if one is configured."""
        return self._get("MOCACHE_REDIS_URL")

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
