# programhub/adapters/persistence/key_value.py
import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Optional

import structlog

logger = structlog.get_logger()

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


class InMemoryKeyValueStorage:
    """
    Process-local storage. Values are kept as strings, exactly as they would
    be written to disk, so every read parses a fresh copy.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def health_check(self) -> bool:
        return True


class FileSystemKeyValueStorage:
    """
    Concrete storage using one JSON file per key under ``base_path``.

    Structure: .../<base_path>/<key>.json
    """

    def __init__(self, base_path: str):
        self.base_path = Path(base_path)

    def _get_file_path(self, key: str) -> Path:
        safe_key = _UNSAFE_KEY_CHARS.sub("_", key).strip("._") or "default"
        return self.base_path / f"{safe_key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._get_file_path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        """Writes through a temporary file so a crash never leaves half a document."""
        path = self._get_file_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.debug("storage_item_written", key=key, path=str(path), size=len(value))

    def remove_item(self, key: str) -> None:
        self._get_file_path(key).unlink(missing_ok=True)

    def health_check(self) -> bool:
        """Checks if the data directory exists (or can be created) and is writable."""
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError:
            return False
        return os.access(self.base_path, os.R_OK | os.W_OK)


def build_key_value_storage(backend: str, base_path: str):
    """Picks the storage adapter named by the STORAGE_BACKEND setting."""
    if backend == "memory":
        return InMemoryKeyValueStorage()
    if backend == "filesystem":
        return FileSystemKeyValueStorage(base_path)
    raise ValueError(f"Unknown storage backend '{backend}'.")
