from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from src.provisioning.domain.label import Label


class FailureStage(Enum):
    CAPABILITY_CHECK = "CAPABILITY_CHECK"
    PROVISIONING = "PROVISIONING"


@dataclass(frozen=True)
class ProviderFailure:
    """
    Record of a provider call that raised.
    Handed to observability only; the decision cycle carries on without it.
    """
    provider_name: str
    label: Label
    stage: FailureStage
    error_type: str
    message: str
    at: datetime

    @classmethod
    def from_exception(
        cls,
        provider_name: str,
        label: Label,
        stage: FailureStage,
        error: BaseException,
        at: datetime,
    ) -> "ProviderFailure":
        return cls(
            provider_name=provider_name,
            label=label,
            stage=stage,
            error_type=type(error).__name__,
            message=str(error),
            at=at,
        )
