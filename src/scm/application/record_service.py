"""Application service: product record lifecycle.

Implements every operation a transaction can invoke on product records:
seeding, creation, point queries, partial updates, ownership transfer
and full enumeration. Each call is one synchronous round-trip against
the world state; nothing is cached between calls and nothing is
retried.
"""

from __future__ import annotations

import logging

from scm.application.timestamps import derive_timestamp
from scm.domain.exceptions import (
    AlreadyExistsError,
    DecodeError,
    NotFoundError,
    StoreReadError,
    StoreWriteError,
    ValidationError,
)
from scm.domain.model.product import MANUFACTURED, ProductRecord
from scm.domain.repository.state_store import StateStore

logger = logging.getLogger(__name__)

# (id, name, owner, description, category) written at ledger genesis.
SEED_PRODUCTS = (
    ("p1", "Laptop", "CompanyA", "High-end gaming laptop", "Electronics"),
    ("p2", "Smartphone", "CompanyB", "Latest model smartphone", "Electronics"),
)


class RecordService:

    def __init__(self, state_store: StateStore) -> None:
        self._store = state_store

    # --- Bootstrap ------------------------------------------------------------

    def seed_initial_records(self) -> list[ProductRecord]:
        """Write the genesis product set.

        Not guarded against re-runs: existing records with the same IDs
        are overwritten with fresh timestamps.
        """
        timestamp = derive_timestamp(self._store)

        seeded: list[ProductRecord] = []
        for product_id, name, owner, description, category in SEED_PRODUCTS:
            record = ProductRecord(
                id=product_id,
                name=name,
                status=MANUFACTURED,
                owner=owner,
                created_at=timestamp,
                updated_at=timestamp,
                description=description,
                category=category,
            )
            self._put("seed", record)
            seeded.append(record)

        logger.info("Seeded %d products at %s", len(seeded), timestamp)
        return seeded

    # --- Commands -------------------------------------------------------------

    def create(
        self,
        product_id: str,
        name: str,
        owner: str,
        description: str,
        category: str,
    ) -> ProductRecord:
        """Register a newly manufactured product."""
        if not product_id:
            raise ValidationError("Product ID is required")
        if not name:
            raise ValidationError("Product name is required")
        if not owner:
            raise ValidationError("Product owner is required")

        if self.exists(product_id):
            raise AlreadyExistsError(f"Product with ID '{product_id}' already exists")

        timestamp = derive_timestamp(self._store)
        record = ProductRecord(
            id=product_id,
            name=name,
            status=MANUFACTURED,
            owner=owner,
            created_at=timestamp,
            updated_at=timestamp,
            description=description,
            category=category,
        )
        self._put("create", record)
        logger.info("Created product %s owned by %s", product_id, owner)
        return record

    def update(
        self,
        product_id: str,
        new_status: str,
        new_owner: str,
        new_description: str,
        new_category: str,
    ) -> ProductRecord:
        """Selectively update the mutable fields of a product.

        An empty string leaves the corresponding field untouched, so a
        field can never be cleared through this operation. ``updated_at``
        is rewritten even when nothing else changes.
        """
        timestamp = derive_timestamp(self._store)
        record = self._load("update", product_id)

        if new_status:
            record.status = new_status
        if new_owner:
            record.owner = new_owner
        if new_description:
            record.description = new_description
        if new_category:
            record.category = new_category
        record.updated_at = timestamp

        self._put("update", record)
        logger.info("Updated product %s (status=%s)", product_id, record.status)
        return record

    def transfer_ownership(self, product_id: str, new_owner: str) -> ProductRecord:
        """Hand a product over to ``new_owner``.

        Unlike :meth:`update`, the owner is always overwritten; an empty
        string is stored as-is.
        """
        timestamp = derive_timestamp(self._store)
        record = self._load("transfer", product_id)

        previous_owner = record.owner
        record.owner = new_owner
        record.updated_at = timestamp

        self._put("transfer", record)
        logger.info(
            "Transferred product %s from %r to %r", product_id, previous_owner, new_owner
        )
        return record

    # --- Queries --------------------------------------------------------------

    def exists(self, product_id: str) -> bool:
        return bool(self._get("exists", product_id))

    def query(self, product_id: str) -> ProductRecord:
        return self._load("query", product_id)

    def list_all(self) -> list[ProductRecord]:
        """Return every record in the world state, in ascending key order.

        Empty values count as absent and are skipped. Aborts on the first
        record that fails to decode.
        """
        products: list[ProductRecord] = []
        try:
            with self._store.range_scan("", "") as results:
                for key, value in results:
                    if not value:
                        continue
                    products.append(self._decode("list_all", key, value))
        except StoreReadError as exc:
            raise StoreReadError(f"list_all: failed to scan world state: {exc}") from exc

        logger.debug("Listed %d products", len(products))
        return products

    # --- Store helpers --------------------------------------------------------

    def _load(self, operation: str, product_id: str) -> ProductRecord:
        data = self._get(operation, product_id)
        if not data:
            raise NotFoundError(f"Product with ID '{product_id}' does not exist")
        return self._decode(operation, product_id, data)

    def _get(self, operation: str, product_id: str) -> bytes | None:
        logger.debug("%s: reading product %s", operation, product_id)
        try:
            return self._store.get(product_id)
        except StoreReadError as exc:
            raise StoreReadError(
                f"{operation}: failed to read product '{product_id}' "
                f"from world state: {exc}"
            ) from exc

    def _put(self, operation: str, record: ProductRecord) -> None:
        try:
            self._store.put(record.id, record.to_bytes())
        except StoreWriteError as exc:
            raise StoreWriteError(
                f"{operation}: failed to write product '{record.id}' "
                f"to world state: {exc}"
            ) from exc

    @staticmethod
    def _decode(operation: str, product_id: str, data: bytes) -> ProductRecord:
        try:
            return ProductRecord.from_bytes(data)
        except DecodeError as exc:
            raise DecodeError(
                f"{operation}: product '{product_id}' is corrupt: {exc}"
            ) from exc
