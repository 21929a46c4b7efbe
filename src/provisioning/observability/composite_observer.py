import logging
from typing import Iterable, List

from src.provisioning.domain.provider_failure import ProviderFailure
from src.provisioning.observability.provisioning_observer import ProvisioningObserver
from src.provisioning.observability.telemetry_event import ProvisioningTelemetryEvent

logger = logging.getLogger(__name__)


class CompositeProvisioningObserver(ProvisioningObserver):
    """
    Fans every event out to several observers.
    A failing observer is logged and skipped; the rest still receive the event.
    """

    def __init__(self, observers: Iterable[ProvisioningObserver]):
        self._observers: List[ProvisioningObserver] = list(observers)

    def on_telemetry(self, event: ProvisioningTelemetryEvent) -> None:
        for observer in self._observers:
            try:
                observer.on_telemetry(event)
            except Exception:
                logger.exception("Observer %s failed on telemetry %s", type(observer).__name__, event.event_type)

    def on_provider_failure(self, failure: ProviderFailure) -> None:
        for observer in self._observers:
            try:
                observer.on_provider_failure(failure)
            except Exception:
                logger.exception("Observer %s failed on provider failure", type(observer).__name__)
