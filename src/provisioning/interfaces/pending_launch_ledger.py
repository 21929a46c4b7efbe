from abc import ABC, abstractmethod
from typing import List, Sequence
from uuid import UUID

from src.provisioning.domain.label import Label
from src.provisioning.domain.pending_launch import PendingLaunch


class PendingLaunchLedger(ABC):
    """
    Caller-side bookkeeping of launches that have been requested but have not
    connected yet. Survives between ticks; the decider never reads it directly.
    """

    @abstractmethod
    def record(self, launches: Sequence[PendingLaunch]) -> None:
        pass

    @abstractmethod
    def pending_for(self, label: Label) -> List[PendingLaunch]:
        pass

    @abstractmethod
    def count_for(self, label: Label) -> int:
        pass

    @abstractmethod
    def resolve(self, launch_id: UUID) -> PendingLaunch:
        """Drop a launch once it has connected or failed. Unknown ids raise LedgerError."""
        pass

    @abstractmethod
    def all(self) -> List[PendingLaunch]:
        pass
