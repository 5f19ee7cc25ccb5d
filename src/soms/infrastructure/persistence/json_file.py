"""A JSON array on disk, shared by the file-backed repositories.

Filesystem and decode failures surface as DependencyError.  Each call is a
synchronous read-modify-write, so callers sharing one event loop never
interleave partial writes.
"""

from __future__ import annotations

import json
from pathlib import Path

from soms.domain.exceptions import DependencyError


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise DependencyError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(records, list):
            raise DependencyError(f"{self._file_path} does not hold a JSON array")
        return records

    def persist(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise DependencyError(f"Cannot write {self._file_path}: {exc}") from exc

    def upsert(self, record: dict) -> None:
        """Replace the record with the same ``id``, or append it."""
        records = self.load()
        for i, raw in enumerate(records):
            if raw["id"] == record["id"]:
                records[i] = record
                break
        else:
            records.append(record)
        self.persist(records)

    def remove(self, record_id: str) -> None:
        records = self.load()
        remaining = [raw for raw in records if raw["id"] != record_id]
        if len(remaining) != len(records):
            self.persist(remaining)

    def find(self, record_id: str) -> dict | None:
        for raw in self.load():
            if raw["id"] == record_id:
                return raw
        return None

    def _ensure_file(self) -> None:
        try:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise DependencyError(f"Cannot create {self._file_path}: {exc}") from exc
