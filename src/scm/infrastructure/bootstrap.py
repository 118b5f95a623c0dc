"""Composition root — wires the JSON world state to the record service.

The only module that knows about every layer; the CLI asks it for a
service and everything below depends on abstractions.
"""

from __future__ import annotations

from scm.application.record_service import RecordService
from scm.infrastructure.config import get_settings
from scm.infrastructure.persistence.json_state_store import JsonStateStore


def state_store() -> JsonStateStore:
    return JsonStateStore(get_settings().state_path)


def record_service() -> RecordService:
    return RecordService(state_store())
