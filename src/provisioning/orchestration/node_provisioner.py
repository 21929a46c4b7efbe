import logging
from typing import Dict, Iterable, List, Optional, Sequence

from src.provisioning.domain.label import Label
from src.provisioning.domain.strategy_decision import StrategyDecision
from src.provisioning.interfaces.provisioning_strategy import ProvisioningStrategy
from src.provisioning.interfaces.strategy_state import StrategyState
from src.provisioning.observability.null_observer import NullProvisioningObserver
from src.provisioning.observability.provisioning_observer import ProvisioningObserver
from src.provisioning.observability.telemetry_event import ProvisioningTelemetryEvent, TelemetryDetail
from src.provisioning.time.system_time_source import SystemTimeSource
from src.provisioning.time.time_source import TimeSource

SOURCE_COMPONENT = "node_provisioner"

logger = logging.getLogger(__name__)


class NodeProvisioner:
    """
    Scheduling-tick loop around the provisioning strategies.

    For each label, strategies are applied in order until one reports
    COMPLETED. A strategy that raises is reported and counted as DEFERRED,
    so one broken strategy never stalls the tick for other labels.
    """

    def __init__(
        self,
        strategies: Sequence[ProvisioningStrategy],
        observer: Optional[ProvisioningObserver] = None,
        time_source: Optional[TimeSource] = None,
    ):
        self.strategies: List[ProvisioningStrategy] = list(strategies)
        self.observer = observer or NullProvisioningObserver()
        self.time_source = time_source or SystemTimeSource()

    def run_for_label(self, state: StrategyState) -> StrategyDecision:
        for strategy in self.strategies:
            try:
                decision = strategy.apply(state)
            except Exception as e:
                self._emit(
                    "strategy_failed",
                    state.label,
                    strategy=type(strategy).__name__,
                    error_type=type(e).__name__,
                    message=str(e),
                )
                continue
            if decision == StrategyDecision.COMPLETED:
                self._emit("label_completed", state.label, strategy=type(strategy).__name__)
                return decision
        self._emit("label_unsatisfied", state.label, strategies=len(self.strategies))
        return StrategyDecision.DEFERRED

    def run_tick(self, states: Iterable[StrategyState]) -> Dict[Label, StrategyDecision]:
        return {state.label: self.run_for_label(state) for state in states}

    def _emit(self, event_type: str, label: Label, **payload) -> None:
        event = ProvisioningTelemetryEvent(
            timestamp=self.time_source.now(),
            event_type=event_type,
            detail=TelemetryDetail.DEBUG,
            source_component=SOURCE_COMPONENT,
            label=str(label),
            payload=payload,
        )
        try:
            self.observer.on_telemetry(event)
        except Exception:
            logger.exception("Observer %s failed on telemetry %s", type(self.observer).__name__, event_type)
