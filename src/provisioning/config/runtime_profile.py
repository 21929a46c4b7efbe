from dataclasses import dataclass
from enum import Enum


class Environment(Enum):
    DEV = "DEV"
    TEST = "TEST"
    PROD = "PROD"


@dataclass(frozen=True)
class RuntimeProfile:
    """
    Configuration profile for the provisioning runtime.
    Controls observability verbosity only. Does NOT affect decisions.
    """
    env: Environment

    enable_telemetry: bool = True
    include_trace: bool = False
    persist_pending_launches: bool = False

    @classmethod
    def dev(cls) -> 'RuntimeProfile':
        return cls(
            env=Environment.DEV,
            enable_telemetry=True,
            include_trace=True,
            persist_pending_launches=False
        )

    @classmethod
    def test(cls) -> 'RuntimeProfile':
        return cls(
            env=Environment.TEST,
            enable_telemetry=False,
            include_trace=False,
            persist_pending_launches=False
        )

    @classmethod
    def prod(cls) -> 'RuntimeProfile':
        return cls(
            env=Environment.PROD,
            enable_telemetry=True,
            include_trace=False,  # Trace is per-label per-tick and too chatty
            persist_pending_launches=True
        )
