from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class TelemetryDetail(Enum):
    TRACE = "TRACE"  # Raw snapshot numbers
    DEBUG = "DEBUG"  # Computed capacity/demand and decisions


@dataclass(frozen=True)
class ProvisioningTelemetryEvent:
    """
    Immutable diagnostic data point emitted while deciding for a label.
    Not part of the functional contract of the decider.
    """
    timestamp: datetime
    event_type: str
    detail: TelemetryDetail
    source_component: str
    label: Optional[str] = None
    payload: Dict[str, Any] = field(default_factory=dict)
