from typing import Sequence

from src.provisioning.domain.label import Label
from src.provisioning.domain.load_snapshot import LoadSnapshot
from src.provisioning.domain.pending_launch import PendingLaunch
from src.provisioning.interfaces.pending_launch_ledger import PendingLaunchLedger
from src.provisioning.interfaces.strategy_state import StrategyState


class LedgerStrategyState(StrategyState):
    """
    Strategy state backed by a pending launch ledger.
    Launches reported by a strategy are appended to the ledger so the next
    tick's bookkeeping sees them.
    """

    def __init__(self, label: Label, snapshot: LoadSnapshot, ledger: PendingLaunchLedger):
        self._label = label
        self._snapshot = snapshot
        self._ledger = ledger

    @property
    def label(self) -> Label:
        return self._label

    @property
    def snapshot(self) -> LoadSnapshot:
        return self._snapshot

    @property
    def planned_capacity(self) -> int:
        return self._ledger.count_for(self._label)

    def record_pending_launches(self, launches: Sequence[PendingLaunch]) -> None:
        self._ledger.record(launches)
