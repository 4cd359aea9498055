"""JSON-file-backed implementation of KeyValueStore.

All keys live in a single JSON object ``{key: value}``. Writes go to a
sibling temporary file that is then renamed over the original, so a
crash mid-write leaves the previous contents intact.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from storefront.domain.exceptions import PersistenceError
from storefront.domain.repository.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- KeyValueStore interface ----------------------------------------------

    def get(self, key: str) -> str | None:
        return self._load_raw().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            records = self._load_raw()
        except PersistenceError:
            logger.warning("Overwriting unreadable store file %s", self._file_path)
            records = {}
        records[key] = value
        self._persist_raw(records)

    def delete(self, key: str) -> None:
        records = self._load_raw()
        if records.pop(key, None) is not None:
            self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise PersistenceError(
                f"Expected a JSON object in {self._file_path}, got {type(raw).__name__}"
            )
        return raw

    def _persist_raw(self, records: dict[str, str]) -> None:
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc
