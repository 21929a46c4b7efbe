from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

from src.provisioning.domain.label import Label


@dataclass(frozen=True)
class PendingLaunch:
    """
    Handle for capacity requested from a provider but not yet able to take work.
    Produced by a CapacityProvider, tracked by the caller until it connects.
    """
    id: UUID
    label: Label
    provider_name: str
    display_name: str
    requested_at: datetime

    @classmethod
    def new(cls, label: Label, provider_name: str, requested_at: datetime, display_name: str = "") -> "PendingLaunch":
        launch_id = uuid4()
        return cls(
            id=launch_id,
            label=label,
            provider_name=provider_name,
            display_name=display_name or f"{provider_name}-{launch_id.hex[:8]}",
            requested_at=requested_at,
        )
