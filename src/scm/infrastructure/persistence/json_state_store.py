"""JSON-file-backed implementation of StateStore.

Stands in for a ledger peer's world state when running locally. The
whole keyspace is one JSON object in a single file. One store instance
models one transaction: its timestamp is fixed at construction.
"""

from __future__ import annotations

import json
import time
from pathlib import Path

from scm.domain.exceptions import StoreReadError, StoreWriteError
from scm.domain.repository.state_store import StateIterator, StateStore


class JsonStateIterator(StateIterator):
    """Cursor over a snapshot of the keyspace taken when the scan opened."""

    def __init__(self, items: list[tuple[str, bytes]]) -> None:
        self._items = iter(items)
        self._closed = False

    def __next__(self) -> tuple[str, bytes]:
        if self._closed:
            raise StopIteration
        return next(self._items)

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed


class JsonStateStore(StateStore):

    def __init__(self, file_path: Path, tx_time_ns: int | None = None) -> None:
        self._file_path = file_path
        self._tx_time_ns = time.time_ns() if tx_time_ns is None else tx_time_ns
        self._ensure_file()

    # --- StateStore interface -------------------------------------------------

    def get(self, key: str) -> bytes | None:
        value = self._load().get(key)
        return None if value is None else value.encode("utf-8")

    def put(self, key: str, value: bytes) -> None:
        try:
            text = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise StoreWriteError(f"Value for '{key}' is not UTF-8: {exc}") from exc

        state = self._load()
        state[key] = text
        self._persist(state)

    def range_scan(self, start_key: str, end_key: str) -> JsonStateIterator:
        state = self._load()
        items = [
            (key, state[key].encode("utf-8"))
            for key in sorted(state)
            if (not start_key or key >= start_key) and (not end_key or key < end_key)
        ]
        return JsonStateIterator(items)

    def tx_timestamp(self) -> tuple[int, int]:
        return divmod(self._tx_time_ns, 1_000_000_000)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, str]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreReadError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(raw, dict) or not all(isinstance(v, str) for v in raw.values()):
            raise StoreReadError(f"{self._file_path} is not a key-value JSON object")
        return raw

    def _persist(self, state: dict[str, str]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(state, indent=2, sort_keys=True) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StoreWriteError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
