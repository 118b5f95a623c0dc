"""Integration tests for selective product updates."""

import pytest

from scm.application.record_service import RecordService
from scm.domain.exceptions import ClockError, NotFoundError, StoreWriteError
from tests.fakes import FakeStateStore

CREATED = "2023-11-14T22:13:20Z"
LATER = "2027-01-15T08:00:00Z"


def _setup():
    store = FakeStateStore(tx_time=(1_700_000_000, 0))
    service = RecordService(store)
    service.create("p9", "Drone", "CompanyC", "Quadcopter", "Aerospace")
    store.tx_time = (1_800_000_000, 0)
    return store, service


class TestUpdateSelective:

    def test_all_empty_only_bumps_updated_at(self):
        _, service = _setup()
        before = service.query("p9")

        service.update("p9", "", "", "", "")

        after = service.query("p9")
        assert after.status == before.status
        assert after.owner == before.owner
        assert after.description == before.description
        assert after.category == before.category
        assert after.name == before.name
        assert after.created_at == CREATED
        assert after.updated_at == LATER

    def test_status_and_owner_only(self):
        _, service = _setup()

        service.update("p9", "Shipped", "CompanyD", "", "")

        after = service.query("p9")
        assert after.status == "Shipped"
        assert after.owner == "CompanyD"
        assert after.description == "Quadcopter"
        assert after.category == "Aerospace"
        assert after.updated_at == LATER
        assert after.created_at == CREATED

    def test_all_fields(self):
        _, service = _setup()
        record = service.update("p9", "Delivered", "Retailer", "Refurbished", "Toys")
        assert (record.status, record.owner, record.description, record.category) == (
            "Delivered", "Retailer", "Refurbished", "Toys",
        )
        assert service.query("p9") == record

    def test_any_status_may_follow_any_other(self):
        _, service = _setup()
        service.update("p9", "Delivered", "", "", "")
        service.update("p9", "Manufactured", "", "", "")
        assert service.query("p9").status == "Manufactured"

    def test_created_at_never_after_updated_at(self):
        _, service = _setup()
        record = service.update("p9", "Shipped", "", "", "")
        assert record.created_at <= record.updated_at


class TestUpdateFailures:

    def test_unknown_id_not_found(self):
        store, service = _setup()
        with pytest.raises(NotFoundError, match="does not exist"):
            service.update("nope", "Shipped", "", "", "")
        assert store.raw_get("nope") is None

    def test_missing_clock_leaves_record_untouched(self):
        store, service = _setup()
        before = store.raw_get("p9")
        store.tx_time = None
        with pytest.raises(ClockError):
            service.update("p9", "Shipped", "", "", "")
        assert store.raw_get("p9") == before

    def test_write_failure(self):
        store, service = _setup()
        store.fail_writes = True
        with pytest.raises(StoreWriteError, match="update: failed to write product 'p9'"):
            service.update("p9", "Shipped", "", "", "")
