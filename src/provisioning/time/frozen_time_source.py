from datetime import datetime, timedelta
from src.provisioning.time.time_source import TimeSource

class FrozenTimeSource(TimeSource):
    """
    Deterministic clock for tests and simulated ticks.
    Only moves when advance() is called.
    """
    def __init__(self, start_time: datetime):
        if start_time.tzinfo is None:
            raise ValueError("FrozenTimeSource requires timezone-aware datetime")
        self._current_time = start_time

    def now(self) -> datetime:
        return self._current_time

    def advance(self, delta: timedelta) -> None:
        self._current_time += delta
