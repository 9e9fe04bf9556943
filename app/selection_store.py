from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging
import re

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


@dataclass
class FileSelectionStore:
    """
    Keeps one blob per selection slot as a file under `directory`.

    Blobs are written verbatim; decoding (and any fallback) belongs to the
    selection codec.
    """
    directory: Path

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid selection key: {key!r}")
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[bytes]:
        """Return the stored blob for `key`, or None if nothing readable is there."""
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as exc:
            logger.warning("Could not read selection slot %s: %s", path, exc)
            return None

    def write(self, key: str, blob: bytes) -> None:
        """Persist the blob for `key`, replacing the previous one atomically."""
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".json.tmp")
        try:
            tmp.write_bytes(blob)
            tmp.replace(path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("Persisted selection slot %s (%d bytes)", key, len(blob))


@dataclass
class MemorySelectionStore:
    """Process-local store, for sessions that should not outlive the process."""
    blobs: dict[str, bytes] = field(default_factory=dict)

    def read(self, key: str) -> Optional[bytes]:
        return self.blobs.get(key)

    def write(self, key: str, blob: bytes) -> None:
        self.blobs[key] = bytes(blob)
