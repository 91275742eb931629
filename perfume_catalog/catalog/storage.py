"""
==============================================================================
Snapshot Storage Module
==============================================================================

JSON file persistence for the perfume catalog.

The whole catalog is written as one pretty-printed JSON array. Writes go
to a temporary file in the same directory which is then renamed over the
snapshot, so a crash mid-write leaves the previous snapshot intact.

File Format:
-----------
[
  {"id": "1", "name": "...", "price": 450000, "originalPrice": 675000, ...},
  ...
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
import os
from contextlib import suppress
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import PersistenceError


# Module logger
logger = logging.getLogger(__name__)


class SnapshotStorage:
    """
    Reads and rewrites the catalog snapshot file.

    Attributes:
        path: Location of the snapshot file

    Example:
        >>> storage = SnapshotStorage(Path("perfumes.json"))
        >>> storage.save([{"id": "1", "price": 10}])
        >>> storage.load()
        [{'id': '1', 'price': 10}]
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def exists(self) -> bool:
        """Whether the snapshot file is present."""
        return self._path.is_file()

    def load(self) -> Optional[List[Dict[str, Any]]]:
        """
        Read the snapshot.

        Returns:
            List of raw records, or None when the file is missing,
            unreadable, malformed, or not a JSON array
        """
        if not self.exists:
            logger.info(f"No snapshot found at {self._path}")
            return None

        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading snapshot {self._path}: {e}")
            return None
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in snapshot {self._path}: {e}")
            return None

        if not isinstance(data, list):
            logger.error(
                f"Snapshot {self._path} holds {type(data).__name__}, expected a list"
            )
            return None

        return data

    def save(self, records: List[Dict[str, Any]]) -> None:
        """
        Replace the snapshot with the given records.

        Args:
            records: Serialized catalog records

        Raises:
            PersistenceError: If the file cannot be written
        """
        tmp_path = self._path.with_name(f".{self._path.name}.tmp")

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            tmp_path.replace(self._path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving snapshot {self._path}: {e}")
            with suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise PersistenceError(f"Failed to write {self._path.name}: {e}") from e

        logger.debug(f"Saved {len(records)} records to {self._path}")
