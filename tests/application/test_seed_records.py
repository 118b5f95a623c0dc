"""Integration tests for ledger seeding."""

import pytest

from scm.application.record_service import RecordService
from scm.domain.exceptions import ClockError, StoreWriteError
from tests.fakes import FakeStateStore


def _setup():
    store = FakeStateStore(tx_time=(1_700_000_000, 0))
    return store, RecordService(store)


class TestSeedInitialRecords:

    def test_seed_then_list_returns_seeded_records_in_order(self):
        _, service = _setup()
        service.seed_initial_records()

        products = service.list_all()

        assert [p.id for p in products] == ["p1", "p2"]
        p1, p2 = products
        assert (p1.name, p1.owner) == ("Laptop", "CompanyA")
        assert (p2.name, p2.owner) == ("Smartphone", "CompanyB")
        assert p1.description == "High-end gaming laptop"
        assert p2.description == "Latest model smartphone"
        for p in products:
            assert p.status == "Manufactured"
            assert p.category == "Electronics"
            assert p.created_at == p.updated_at == "2023-11-14T22:13:20Z"

    def test_seed_returns_what_was_written(self):
        _, service = _setup()
        seeded = service.seed_initial_records()
        assert seeded == service.list_all()

    def test_reseed_overwrites_existing_records(self):
        store, service = _setup()
        service.seed_initial_records()
        service.transfer_ownership("p1", "Distributor")

        store.tx_time = (1_800_000_000, 0)
        service.seed_initial_records()

        p1 = service.query("p1")
        assert p1.owner == "CompanyA"
        assert p1.created_at == "2027-01-15T08:00:00Z"

    def test_seed_leaves_other_records_alone(self):
        _, service = _setup()
        service.create("p9", "Drone", "CompanyC", "", "")
        service.seed_initial_records()
        assert [p.id for p in service.list_all()] == ["p1", "p2", "p9"]


class TestSeedFailures:

    def test_missing_clock_writes_nothing(self):
        store, service = _setup()
        store.tx_time = None
        with pytest.raises(ClockError):
            service.seed_initial_records()
        assert store.writes == []

    def test_write_failure(self):
        store, service = _setup()
        store.fail_writes = True
        with pytest.raises(StoreWriteError, match="seed: failed to write product 'p1'"):
            service.seed_initial_records()

    def test_seed_does_not_read_the_store(self):
        store, service = _setup()
        store.fail_reads = True

        seeded = service.seed_initial_records()

        assert [p.id for p in seeded] == ["p1", "p2"]
        assert store.writes == ["p1", "p2"]
