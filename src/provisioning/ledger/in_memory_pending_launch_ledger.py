from threading import Lock
from typing import Dict, Iterable, List, Sequence
from uuid import UUID

from src.provisioning.domain.exceptions import LedgerError
from src.provisioning.domain.label import Label
from src.provisioning.domain.pending_launch import PendingLaunch
from src.provisioning.interfaces.pending_launch_ledger import PendingLaunchLedger


class InMemoryPendingLaunchLedger(PendingLaunchLedger):
    def __init__(self):
        self._launches: Dict[UUID, PendingLaunch] = {}
        self._lock = Lock()

    def record(self, launches: Sequence[PendingLaunch]) -> None:
        with self._lock:
            for launch in launches:
                self._launches[launch.id] = launch

    def pending_for(self, label: Label) -> List[PendingLaunch]:
        with self._lock:
            return _ordered(x for x in self._launches.values() if x.label == label)

    def count_for(self, label: Label) -> int:
        return len(self.pending_for(label))

    def resolve(self, launch_id: UUID) -> PendingLaunch:
        with self._lock:
            if launch_id not in self._launches:
                raise LedgerError(f"Unknown pending launch: {launch_id}")
            return self._launches.pop(launch_id)

    def all(self) -> List[PendingLaunch]:
        with self._lock:
            return _ordered(self._launches.values())


def _ordered(launches: Iterable[PendingLaunch]) -> List[PendingLaunch]:
    # Same order as the SQL ledger: request time, then id text
    return sorted(launches, key=lambda x: (x.requested_at, str(x.id)))
