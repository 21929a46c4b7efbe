import json
import logging
import os
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID

from src.provisioning.domain.label import Label
from src.provisioning.domain.provider_failure import ProviderFailure
from src.provisioning.observability.provisioning_observer import ProvisioningObserver
from src.provisioning.observability.telemetry_event import ProvisioningTelemetryEvent

logger = logging.getLogger(__name__)


class JsonlProvisioningObserver(ProvisioningObserver):
    """
    Observer that appends structured events to a JSONL file.
    Handles serialization safely.
    """

    def __init__(self, file_path: str):
        self.file_path = file_path
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def _serialize(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, (UUID, Label)):
            return str(obj)
        if isinstance(obj, Enum):
            return obj.value
        return str(obj)

    def _write(self, category: str, data: Any) -> None:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),  # Observer wall clock
            "category": category,
            "data": data,
        }

        try:
            with open(self.file_path, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry, default=self._serialize) + "\n")
        except OSError as e:
            # Observer must never break a decision cycle
            logger.warning("Telemetry write to %s failed: %s", self.file_path, e)

    def on_telemetry(self, event: ProvisioningTelemetryEvent) -> None:
        self._write("TELEMETRY", event.__dict__)

    def on_provider_failure(self, failure: ProviderFailure) -> None:
        self._write("PROVIDER_FAILURE", failure.__dict__)
