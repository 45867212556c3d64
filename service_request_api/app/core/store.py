"""
Record storage for service requests.

Service requests are kept as a flat, ordered list of JSON objects.
Every operation reads the whole list (``load_all``) and writes the
whole list back (``save_all``).  The ``RecordStore`` base class is the
only thing the service layer depends on, so the JSON file can be
swapped for another backend without touching business logic.

``JsonRecordStore`` is the production implementation.  It creates the
data file on first use, replaces its content atomically on every save
and repairs itself when the file holds something other than a JSON
list of objects: the file is reset to ``[]`` and an empty list is
returned.  This loses the corrupt data, so the reset is logged as a
warning.

``InMemoryRecordStore`` keeps the list in memory and is used by tests.
"""

import copy
import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .config import settings
from .errors import StorageCorruptionError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class RecordStore(ABC):
    """Whole-sequence storage of request records.

    ``lock`` guards read‑check‑write sequences.  Callers that mutate
    records must hold it from ``load_all`` until ``save_all`` returns so
    that two writers never interleave.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()

    @abstractmethod
    def load_all(self) -> List[Record]:
        """Return a fresh copy of every record, in stored order."""

    @abstractmethod
    def save_all(self, records: Iterable[Record]) -> None:
        """Replace the stored sequence with ``records``."""


class InMemoryRecordStore(RecordStore):
    """Record store backed by a Python list."""

    def __init__(self, records: Optional[Iterable[Record]] = None) -> None:
        super().__init__()
        self._records: List[Record] = copy.deepcopy(list(records or []))

    def load_all(self) -> List[Record]:
        return copy.deepcopy(self._records)

    def save_all(self, records: Iterable[Record]) -> None:
        self._records = copy.deepcopy(list(records))


class JsonRecordStore(RecordStore):
    """Record store backed by a UTF‑8 JSON file."""

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = Path(path)

    def _ensure_file(self) -> None:
        if not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self._write_text("[]")

    def _write_text(self, text: str) -> None:
        # Write next to the target and rename over it so readers never
        # observe a half-written file.
        fd, tmp_path = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    @staticmethod
    def _parse(raw: str) -> List[Record]:
        raw = raw.strip()
        if not raw:
            return []
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageCorruptionError(f"Invalid JSON in record store: {exc}") from exc
        if not isinstance(parsed, list):
            raise StorageCorruptionError(f"Record store must hold a JSON list, got {type(parsed).__name__}")
        for index, item in enumerate(parsed):
            if not isinstance(item, dict):
                raise StorageCorruptionError(
                    f"Record store entry {index} must be a JSON object, got {type(item).__name__}"
                )
        return parsed

    def load_all(self) -> List[Record]:
        self._ensure_file()
        try:
            raw = self.path.read_text(encoding="utf-8")
            return self._parse(raw)
        except (StorageCorruptionError, UnicodeDecodeError) as exc:
            logger.warning("Resetting corrupt record store %s: %s", self.path, exc)
            self._write_text("[]")
            return []

    def save_all(self, records: Iterable[Record]) -> None:
        self._ensure_file()
        self._write_text(json.dumps(list(records), indent=2, ensure_ascii=False))


def get_data_path() -> str:
    """Compute the path to the JSON data file.

    If ``settings.data_file`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    data_file = settings.data_file
    if os.path.isabs(data_file):
        return data_file
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / data_file).resolve())


_store: Optional[RecordStore] = None


def get_store() -> RecordStore:
    """Return the process-wide record store.

    Used as a FastAPI dependency; tests replace it through
    ``app.dependency_overrides``.
    """
    global _store
    if _store is None:
        _store = JsonRecordStore(get_data_path())
    return _store
