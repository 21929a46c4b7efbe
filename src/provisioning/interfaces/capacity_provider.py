from abc import ABC, abstractmethod
from typing import List

from src.provisioning.domain.label import Label
from src.provisioning.domain.pending_launch import PendingLaunch


class CapacityProvider(ABC):
    """
    Boundary interface to an elastic source of executors (a cloud, a pool).
    Implementations must tolerate concurrent calls from decisions for
    different labels and own any timeout on their remote calls.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable identifier, unique within a registry."""
        pass

    @abstractmethod
    def can_serve(self, label: Label) -> bool:
        """Whether this provider is able to launch executors for the label."""
        pass

    @abstractmethod
    def provision(self, label: Label, excess_workload: int) -> List[PendingLaunch]:
        """
        Request up to `excess_workload` new executors for the label.
        Returns the launches actually started, which may be fewer than asked.
        """
        pass
