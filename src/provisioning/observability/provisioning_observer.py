from abc import ABC, abstractmethod

from src.provisioning.domain.provider_failure import ProviderFailure
from src.provisioning.observability.telemetry_event import ProvisioningTelemetryEvent


class ProvisioningObserver(ABC):
    """
    Hook interface for diagnostics emitted by the decider and the provisioning loop.
    Implementations must not have side effects on the decision itself.
    """

    @abstractmethod
    def on_telemetry(self, event: ProvisioningTelemetryEvent) -> None:
        """Called for trace/debug detail about a decision."""
        pass

    @abstractmethod
    def on_provider_failure(self, failure: ProviderFailure) -> None:
        """Called when a provider raised during a capability check or a provisioning call."""
        pass
