from dataclasses import dataclass

from src.provisioning.domain.exceptions import InvalidSnapshotError


@dataclass(frozen=True)
class LoadSnapshot:
    """
    Point-in-time demand/supply counts for a single label.
    Built fresh by the caller for every decision cycle and never mutated.
    """
    available_executors: int
    connecting_executors: int
    queue_length: int

    def __post_init__(self):
        for field_name in ("available_executors", "connecting_executors", "queue_length"):
            value = getattr(self, field_name)
            # bool is an int subclass but never a meaningful count
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSnapshotError(f"{field_name} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidSnapshotError(f"{field_name} must be non-negative, got {value}")

    @property
    def supply(self) -> int:
        return self.available_executors + self.connecting_executors
