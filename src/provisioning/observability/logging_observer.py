import logging
from typing import Optional

from src.provisioning.domain.provider_failure import ProviderFailure
from src.provisioning.logging.structured_runtime_logger import TRACE, StructuredRuntimeLogger
from src.provisioning.observability.provisioning_observer import ProvisioningObserver
from src.provisioning.observability.telemetry_event import ProvisioningTelemetryEvent, TelemetryDetail

_LEVELS = {
    TelemetryDetail.TRACE: TRACE,
    TelemetryDetail.DEBUG: logging.DEBUG,
}


class LoggingProvisioningObserver(ProvisioningObserver):
    """
    Forwards telemetry to the standard logging tree as JSON lines.
    TRACE detail goes out at level 5, DEBUG at logging.DEBUG, provider failures at WARNING.
    """

    def __init__(self, logger: Optional[StructuredRuntimeLogger] = None, include_trace: bool = True):
        self._logger = logger or StructuredRuntimeLogger()
        self._include_trace = include_trace

    def on_telemetry(self, event: ProvisioningTelemetryEvent) -> None:
        if event.detail == TelemetryDetail.TRACE and not self._include_trace:
            return
        level = _LEVELS[event.detail]
        if not self._logger.is_enabled_for(level):
            return
        self._logger.emit(
            event.event_type,
            level=level,
            label=event.label,
            source=event.source_component,
            at=event.timestamp,
            **event.payload,
        )

    def on_provider_failure(self, failure: ProviderFailure) -> None:
        self._logger.emit(
            "provider_failure",
            level=logging.WARNING,
            provider=failure.provider_name,
            label=str(failure.label),
            stage=failure.stage.value,
            error_type=failure.error_type,
            message=failure.message,
            at=failure.at,
        )
