from datetime import datetime, timezone
from src.provisioning.time.time_source import TimeSource

class SystemTimeSource(TimeSource):
    """Wall clock, UTC."""
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
