"""Domain entity identifying one compiled catalog file for one domain."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CatalogHandle:
    """Identifies a catalog file loaded for a text domain.

    Attributes:
        path: Path to the compiled (.mo) catalog file.
        domain: Text domain the catalog provides translations for.
        mtime: Modification time of the file (whole seconds) captured at load time.
    """

    path: Path
    domain: str
    mtime: int

    @classmethod
    def from_path(cls, path: Path, domain: str) -> "CatalogHandle":
        """Build a handle, reading the catalog's current modification time.

        Raises:
            OSError: If the catalog file cannot be stat'ed.
        """
        catalog_path = Path(path)
        return cls(
            path=catalog_path,
            domain=domain,
            mtime=int(catalog_path.stat().st_mtime),
        )
