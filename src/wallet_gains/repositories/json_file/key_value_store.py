"""KeyValueStore kept in a single JSON object file."""

import json
import os
import threading
from pathlib import Path
from typing import Any, Optional

from wallet_gains.core.exceptions import CostBasisStoreError


class JsonFileKeyValueStore:
    """
    Stores all keys in one JSON object on disk.

    The file is created as `{}` on first use. Writes go through a temporary
    file and an atomic rename.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def ensure_initialized(self) -> None:
        with self._lock:
            self._ensure_file()

    def get(self, key: str) -> Optional[float]:
        with self._lock:
            self._ensure_file()
            return self._read().get(key)

    def put(self, key: str, value: float) -> None:
        with self._lock:
            self._ensure_file()
            data = self._read()
            data[key] = value
            self._write(data)

    def _ensure_file(self) -> None:
        if self._path.exists():
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._write({})
        except OSError as e:
            raise CostBasisStoreError(f"Cannot create {self._path}: {e}") from e

    def _read(self) -> dict[str, Any]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except OSError as e:
            raise CostBasisStoreError(f"Cannot read {self._path}: {e}") from e
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError and oversized integer literals
            raise CostBasisStoreError(f"Corrupt cost basis file {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise CostBasisStoreError(f"Corrupt cost basis file {self._path}: expected an object")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise CostBasisStoreError(f"Cannot write {self._path}: {e}") from e
