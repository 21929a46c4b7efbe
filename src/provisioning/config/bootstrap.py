import logging
from typing import List

from src.config.settings import Settings
from src.provisioning.config.runtime_profile import RuntimeProfile
from src.provisioning.interfaces.pending_launch_ledger import PendingLaunchLedger
from src.provisioning.ledger.in_memory_pending_launch_ledger import InMemoryPendingLaunchLedger
from src.provisioning.ledger.sql_pending_launch_ledger import SqlPendingLaunchLedger
from src.provisioning.logging.structured_runtime_logger import TRACE
from src.provisioning.observability.composite_observer import CompositeProvisioningObserver
from src.provisioning.observability.jsonl_observer import JsonlProvisioningObserver
from src.provisioning.observability.logging_observer import LoggingProvisioningObserver
from src.provisioning.observability.null_observer import NullProvisioningObserver
from src.provisioning.observability.provisioning_observer import ProvisioningObserver


def configure_logging(settings: Settings) -> None:
    level = TRACE if settings.TRACE_ENABLED else logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.LOG_LEVEL}")
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")


def build_observer(profile: RuntimeProfile, settings: Settings) -> ProvisioningObserver:
    if not profile.enable_telemetry:
        return NullProvisioningObserver()

    include_trace = profile.include_trace or settings.TRACE_ENABLED
    observers: List[ProvisioningObserver] = [LoggingProvisioningObserver(include_trace=include_trace)]
    if settings.TELEMETRY_JSONL_PATH:
        observers.append(JsonlProvisioningObserver(settings.TELEMETRY_JSONL_PATH))
    return CompositeProvisioningObserver(observers)


def build_ledger(profile: RuntimeProfile, settings: Settings) -> PendingLaunchLedger:
    if profile.persist_pending_launches:
        return SqlPendingLaunchLedger.from_dsn(settings.DATABASE_URL)
    return InMemoryPendingLaunchLedger()
