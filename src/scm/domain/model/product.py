"""Product record entity.

A product record is the only thing kept in the world state. It is
persisted as a flat JSON object keyed by the record ID; that encoding
is the sole representation other peers ever observe, so the field
keys below are part of the contract.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields

from scm.domain.exceptions import DecodeError

MANUFACTURED = "Manufactured"


@dataclass
class ProductRecord:
    """A physical product tracked through the supply chain.

    ``id`` and ``name`` never change after creation. ``status``,
    ``owner``, ``description`` and ``category`` are rewritten by the
    update and transfer operations, each of which also bumps
    ``updated_at``.
    """

    id: str
    name: str
    status: str
    owner: str
    created_at: str
    updated_at: str
    description: str
    category: str

    # --- Serialization --------------------------------------------------------

    def to_bytes(self) -> bytes:
        return json.dumps(asdict(self), ensure_ascii=False).encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> ProductRecord:
        """Decode a record previously produced by :meth:`to_bytes`.

        Raises DecodeError if the payload is not a JSON object carrying
        every record field as a string. Unknown keys are ignored.
        """
        try:
            raw = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DecodeError(f"Malformed product record: {exc}") from exc

        if not isinstance(raw, dict):
            raise DecodeError(
                f"Product record must be a JSON object, got {type(raw).__name__}"
            )

        values: dict[str, str] = {}
        for f in fields(cls):
            if f.name not in raw:
                raise DecodeError(f"Product record is missing field '{f.name}'")
            value = raw[f.name]
            if not isinstance(value, str):
                raise DecodeError(
                    f"Product record field '{f.name}' must be a string, "
                    f"got {type(value).__name__}"
                )
            values[f.name] = value
        return cls(**values)
