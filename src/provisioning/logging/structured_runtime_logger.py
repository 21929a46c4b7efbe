import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class StructuredRuntimeLogger:
    """
    JSON-lines logger for provisioning paths.
    One record per event; level chosen by the caller.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("provisioning")

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def emit(self, event_type: str, level: int = logging.INFO, **fields: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
        }
        payload.update(fields)
        self._logger.log(level, json.dumps(payload, default=str, ensure_ascii=True))
