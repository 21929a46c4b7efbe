from threading import Lock
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from src.provisioning.domain.label import Label
from src.provisioning.domain.pending_launch import PendingLaunch
from src.provisioning.interfaces.capacity_provider import CapacityProvider
from src.provisioning.time.system_time_source import SystemTimeSource
from src.provisioning.time.time_source import TimeSource


class StaticPoolCapacityProvider(CapacityProvider):
    """
    In-process provider with a fixed label set and a hard instance cap.
    Grants as many launches as the cap allows; the rest of a request is dropped.
    """

    def __init__(
        self,
        name: str,
        labels: Iterable[Label],
        max_instances: int,
        time_source: Optional[TimeSource] = None,
    ):
        if max_instances < 0:
            raise ValueError("max_instances must be non-negative")
        self._name = name
        self._labels = frozenset(labels)
        self.max_instances = max_instances
        self.time_source = time_source or SystemTimeSource()
        self._active: Dict[UUID, PendingLaunch] = {}
        self._lock = Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def remaining(self) -> int:
        with self._lock:
            return self.max_instances - len(self._active)

    def can_serve(self, label: Label) -> bool:
        return label in self._labels

    def provision(self, label: Label, excess_workload: int) -> List[PendingLaunch]:
        if not self.can_serve(label):
            return []
        with self._lock:
            granted = max(0, min(excess_workload, self.max_instances - len(self._active)))
            now = self.time_source.now()
            launches = [PendingLaunch.new(label, self._name, now) for _ in range(granted)]
            for launch in launches:
                self._active[launch.id] = launch
        return launches

    def release(self, launch_id: UUID) -> None:
        """Give an instance slot back, e.g. after the executor was terminated."""
        with self._lock:
            self._active.pop(launch_id, None)
