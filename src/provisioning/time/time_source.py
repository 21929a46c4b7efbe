from abc import ABC, abstractmethod
from datetime import datetime

class TimeSource(ABC):
    """
    Clock used for launch request timestamps and telemetry.
    Implementations must return timezone-aware UTC datetimes.
    """
    @abstractmethod
    def now(self) -> datetime:
        pass
