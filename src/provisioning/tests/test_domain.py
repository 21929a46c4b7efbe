import pytest
from datetime import datetime, timezone

from src.provisioning.domain.exceptions import InvalidSnapshotError
from src.provisioning.domain.label import Label
from src.provisioning.domain.load_snapshot import LoadSnapshot
from src.provisioning.domain.pending_launch import PendingLaunch
from src.provisioning.domain.provider_failure import FailureStage, ProviderFailure
from src.provisioning.domain.strategy_decision import StrategyDecision

NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_snapshot_supply():
    assert LoadSnapshot(2, 3, 9).supply == 5


@pytest.mark.parametrize(
    "counts",
    [(-1, 0, 0), (0, -1, 0), (0, 0, -1), (1.5, 0, 0), (0, True, 0), (0, 0, "3")],
)
def test_snapshot_rejects_invalid_counts(counts):
    with pytest.raises(InvalidSnapshotError):
        LoadSnapshot(*counts)


def test_invalid_snapshot_is_a_value_error():
    with pytest.raises(ValueError):
        LoadSnapshot(0, 0, -5)


def test_snapshot_is_immutable():
    snapshot = LoadSnapshot(1, 1, 1)
    with pytest.raises(AttributeError):
        snapshot.queue_length = 4


def test_labels_compare_by_name():
    assert Label("linux") == Label("linux")
    assert Label("linux") != Label("gpu")
    assert str(Label("linux")) == "linux"
    assert len({Label("linux"), Label("linux")}) == 1


def test_pending_launch_defaults_display_name():
    launch = PendingLaunch.new(Label("linux"), "pool", NOW)
    assert launch.display_name.startswith("pool-")
    assert launch.requested_at == NOW
    assert launch != PendingLaunch.new(Label("linux"), "pool", NOW)


def test_decision_values():
    assert StrategyDecision.COMPLETED.value == "PROVISIONING_COMPLETED"
    assert StrategyDecision.DEFERRED.value == "CONSULT_REMAINING_STRATEGIES"


def test_provider_failure_from_exception():
    failure = ProviderFailure.from_exception(
        "cloud-a", Label("linux"), FailureStage.PROVISIONING, TimeoutError("slow api"), NOW
    )
    assert failure.error_type == "TimeoutError"
    assert failure.message == "slow api"
    assert failure.stage == FailureStage.PROVISIONING
