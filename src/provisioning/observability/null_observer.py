from src.provisioning.domain.provider_failure import ProviderFailure
from src.provisioning.observability.provisioning_observer import ProvisioningObserver
from src.provisioning.observability.telemetry_event import ProvisioningTelemetryEvent

class NullProvisioningObserver(ProvisioningObserver):
    """
    Default no-op observer.
    """
    def on_telemetry(self, event: ProvisioningTelemetryEvent) -> None:
        pass

    def on_provider_failure(self, failure: ProviderFailure) -> None:
        pass
