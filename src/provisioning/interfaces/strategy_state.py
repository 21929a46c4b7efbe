from abc import ABC, abstractmethod
from typing import Sequence

from src.provisioning.domain.label import Label
from src.provisioning.domain.load_snapshot import LoadSnapshot
from src.provisioning.domain.pending_launch import PendingLaunch


class StrategyState(ABC):
    """
    Per-label view handed to a provisioning strategy for one tick.
    Owned by the caller; strategies read it and report new launches back.
    """

    @property
    @abstractmethod
    def label(self) -> Label:
        pass

    @property
    @abstractmethod
    def snapshot(self) -> LoadSnapshot:
        pass

    @property
    @abstractmethod
    def planned_capacity(self) -> int:
        """Launches the caller already tracks as pending for this label."""
        pass

    @abstractmethod
    def record_pending_launches(self, launches: Sequence[PendingLaunch]) -> None:
        pass
