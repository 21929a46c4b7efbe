import logging

import pytest

from src.config.settings import Settings
from src.provisioning.config.bootstrap import build_ledger, build_observer, configure_logging
from src.provisioning.config.runtime_profile import Environment, RuntimeProfile
from src.provisioning.ledger.in_memory_pending_launch_ledger import InMemoryPendingLaunchLedger
from src.provisioning.ledger.sql_pending_launch_ledger import SqlPendingLaunchLedger
from src.provisioning.observability.composite_observer import CompositeProvisioningObserver
from src.provisioning.observability.null_observer import NullProvisioningObserver


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("PROVISIONING_TRACE_ENABLED", "true")
    monkeypatch.setenv("PROVISIONING_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.TRACE_ENABLED is True
    assert settings.LOG_LEVEL == "debug"
    assert settings.TELEMETRY_JSONL_PATH is None


def test_profiles():
    assert RuntimeProfile.test().enable_telemetry is False
    assert RuntimeProfile.dev().include_trace is True
    assert RuntimeProfile.prod().env == Environment.PROD
    assert RuntimeProfile.prod().persist_pending_launches is True


def test_test_profile_gets_null_observer():
    assert isinstance(build_observer(RuntimeProfile.test(), Settings()), NullProvisioningObserver)


def test_dev_profile_gets_composite_observer(tmp_path):
    settings = Settings(TELEMETRY_JSONL_PATH=str(tmp_path / "t.jsonl"))
    assert isinstance(build_observer(RuntimeProfile.dev(), settings), CompositeProvisioningObserver)


def test_ledger_choice_follows_profile():
    settings = Settings(DATABASE_URL="sqlite+pysqlite:///:memory:")
    assert isinstance(build_ledger(RuntimeProfile.dev(), settings), InMemoryPendingLaunchLedger)
    assert isinstance(build_ledger(RuntimeProfile.prod(), settings), SqlPendingLaunchLedger)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging(Settings(LOG_LEVEL="chatty"))
