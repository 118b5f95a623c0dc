"""Abstract world-state interface.

The world state is owned by the surrounding ledger platform. The domain
only sees it through these interfaces so that the record service never
depends on a concrete store. Implementations (JSON file, in-memory,
a real ledger peer) live outside the domain layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class StateIterator(ABC):
    """Lazy, forward-only cursor over ``(key, value)`` pairs.

    The cursor holds store resources until it is closed, so callers
    must release it on every exit path; using it as a context manager
    does that.
    """

    @abstractmethod
    def __next__(self) -> tuple[str, bytes]:
        """Return the next pair, raising StopIteration when exhausted."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying scan."""

    def __iter__(self) -> StateIterator:
        return self

    def __enter__(self) -> StateIterator:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class StateStore(ABC):

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if absent.

        Raises StoreReadError if the store cannot be read.
        """

    @abstractmethod
    def put(self, key: str, value: bytes) -> None:
        """Write ``value`` under ``key``.

        Raises StoreWriteError if the store cannot be written.
        """

    @abstractmethod
    def range_scan(self, start_key: str, end_key: str) -> StateIterator:
        """Open a scan over keys in ``[start_key, end_key)`` in key order.

        An empty bound is open-ended, so ``range_scan("", "")`` covers
        the whole keyspace. Raises StoreReadError if the scan cannot be
        opened; the returned iterator raises it if iteration fails.
        """

    @abstractmethod
    def tx_timestamp(self) -> tuple[int, int]:
        """Return ``(seconds, nanos)`` of the invoking transaction.

        Raises ClockError if there is no transaction timestamp.
        """
