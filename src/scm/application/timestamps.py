"""Deterministic timestamps derived from the invoking transaction.

Every peer executing the same transaction must write identical bytes,
so record timestamps never come from the local clock. They come from
the transaction's declared time instead.
"""

from __future__ import annotations

from datetime import datetime, timezone

from scm.domain.exceptions import ClockError
from scm.domain.repository.state_store import StateStore

_NANOS_PER_SECOND = 1_000_000_000


def derive_timestamp(state_store: StateStore) -> str:
    """Render the current transaction time as an RFC3339 string.

    Second precision in UTC, e.g. ``2024-05-01T12:30:00Z``; the
    nanosecond part is validated but not rendered.
    """
    stamp = state_store.tx_timestamp()
    if stamp is None:
        raise ClockError("Transaction context has no timestamp")

    seconds, nanos = stamp
    if not 0 <= nanos < _NANOS_PER_SECOND:
        raise ClockError(f"Transaction timestamp has invalid nanos: {nanos}")

    try:
        moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise ClockError(
            f"Transaction timestamp {seconds}s is out of range"
        ) from exc

    return moment.replace(tzinfo=None).isoformat(timespec="seconds") + "Z"
