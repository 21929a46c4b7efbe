import pytest
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.provisioning.domain.exceptions import LedgerError
from src.provisioning.domain.label import Label
from src.provisioning.domain.pending_launch import PendingLaunch
from src.provisioning.ledger.in_memory_pending_launch_ledger import InMemoryPendingLaunchLedger
from src.provisioning.ledger.sql_pending_launch_ledger import SqlPendingLaunchLedger

NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
LINUX = Label("linux")
GPU = Label("gpu")


def _sqlite_engine():
    return create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )


# --- Fixtures ---

@pytest.fixture(params=["memory", "sql"])
def ledger(request):
    if request.param == "memory":
        return InMemoryPendingLaunchLedger()
    return SqlPendingLaunchLedger(_sqlite_engine())


# --- Tests ---

def test_record_and_count_per_label(ledger):
    ledger.record([PendingLaunch.new(LINUX, "pool", NOW), PendingLaunch.new(LINUX, "pool", NOW)])
    ledger.record([PendingLaunch.new(GPU, "gpu-pool", NOW)])

    assert ledger.count_for(LINUX) == 2
    assert ledger.count_for(GPU) == 1
    assert ledger.count_for(Label("windows")) == 0
    assert len(ledger.all()) == 3


def test_recording_nothing_is_a_no_op(ledger):
    ledger.record([])
    assert ledger.all() == []


def test_pending_for_round_trips_fields(ledger):
    launch = PendingLaunch.new(LINUX, "pool", NOW, display_name="pool-node-1")
    ledger.record([launch])

    assert ledger.pending_for(LINUX) == [launch]


def test_pending_for_is_ordered_by_request_time(ledger):
    later = PendingLaunch.new(LINUX, "pool", NOW + timedelta(seconds=30))
    earlier = PendingLaunch.new(LINUX, "pool", NOW)
    ledger.record([later, earlier])

    assert [x.id for x in ledger.pending_for(LINUX)] == [earlier.id, later.id]


def test_resolve_removes_launch(ledger):
    keep = PendingLaunch.new(LINUX, "pool", NOW)
    done = PendingLaunch.new(LINUX, "pool", NOW)
    ledger.record([keep, done])

    assert ledger.resolve(done.id) == done
    assert ledger.pending_for(LINUX) == [keep]


def test_resolve_unknown_launch_raises(ledger):
    with pytest.raises(LedgerError):
        ledger.resolve(uuid4())


def test_sql_ledger_survives_new_instance_on_same_engine():
    engine = _sqlite_engine()
    SqlPendingLaunchLedger(engine).record([PendingLaunch.new(LINUX, "pool", NOW)])

    reopened = SqlPendingLaunchLedger(engine)

    assert reopened.count_for(LINUX) == 1


def test_all_is_ordered_by_request_time_across_labels(ledger):
    latest = PendingLaunch.new(LINUX, "pool", NOW + timedelta(seconds=60))
    middle = PendingLaunch.new(GPU, "gpu-pool", NOW + timedelta(seconds=30))
    earliest = PendingLaunch.new(LINUX, "pool", NOW)
    ledger.record([latest, middle])
    ledger.record([earliest])

    assert [x.id for x in ledger.all()] == [earliest.id, middle.id, latest.id]


def test_same_request_time_breaks_ties_by_id(ledger):
    launches = [PendingLaunch.new(LINUX, "pool", NOW) for _ in range(5)]
    ledger.record(launches)

    assert [x.id for x in ledger.pending_for(LINUX)] == sorted((x.id for x in launches), key=str)
