"""Record store persisted as a single JSON document on local disk."""

import json
from dataclasses import dataclass
from pathlib import Path

from studio_tracker.services.records import RecordStore


@dataclass
class JsonFileRecordStore(RecordStore):
    """Reads the whole document on every get and rewrites it on every set."""

    path: Path

    def get(self, name: str) -> object | None:
        return self._read().get(name)

    def set(self, name: str, value: object) -> None:
        document = self._read()
        document[name] = value
        self._write(document)

    def clear(self) -> None:
        self._write({})

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        content = self.path.read_text(encoding="utf-8")
        if not content.strip():
            return {}
        data = json.loads(content)
        return data if isinstance(data, dict) else {}

    def _write(self, document: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(
            json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8"
        )
        tmp_path.replace(self.path)
