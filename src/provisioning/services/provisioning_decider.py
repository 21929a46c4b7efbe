import logging
from typing import Any, List, Optional, Sequence

from src.provisioning.domain.label import Label
from src.provisioning.domain.pending_launch import PendingLaunch
from src.provisioning.domain.provider_failure import FailureStage, ProviderFailure
from src.provisioning.domain.strategy_decision import StrategyDecision
from src.provisioning.interfaces.capacity_provider import CapacityProvider
from src.provisioning.interfaces.strategy_state import StrategyState
from src.provisioning.observability.null_observer import NullProvisioningObserver
from src.provisioning.observability.provisioning_observer import ProvisioningObserver
from src.provisioning.observability.telemetry_event import ProvisioningTelemetryEvent, TelemetryDetail
from src.provisioning.time.system_time_source import SystemTimeSource
from src.provisioning.time.time_source import TimeSource

SOURCE_COMPONENT = "provisioning_decider"

logger = logging.getLogger(__name__)


class ProvisioningDecider:
    """
    Decides whether a label needs more executors right now and, if so,
    asks the first capable provider for exactly the missing amount.

    Stateless across calls: every input arrives with the call, and the only
    side effects are the provisioning request, the bookkeeping callback on
    the state, and diagnostics sent to the observer.
    """

    def __init__(
        self,
        observer: Optional[ProvisioningObserver] = None,
        time_source: Optional[TimeSource] = None,
    ):
        self.observer = observer or NullProvisioningObserver()
        self.time_source = time_source or SystemTimeSource()

    def decide(
        self,
        state: StrategyState,
        providers: Sequence[CapacityProvider],
        system_quiescing: bool,
    ) -> StrategyDecision:
        label = state.label

        if system_quiescing:
            self._emit("quiescing", TelemetryDetail.DEBUG, label)
            return StrategyDecision.DEFERRED

        for provider in providers:
            if self._can_serve(provider, label):
                # Only the first capable provider is consulted per cycle
                return self._decide_for_provider(state, provider)

        self._emit("no_capable_provider", TelemetryDetail.DEBUG, label, providers=len(providers))
        return StrategyDecision.DEFERRED

    def _decide_for_provider(self, state: StrategyState, provider: CapacityProvider) -> StrategyDecision:
        label = state.label
        snapshot = state.snapshot
        provider_name = _provider_name(provider)

        self._emit(
            "snapshot_observed",
            TelemetryDetail.TRACE,
            label,
            available_executors=snapshot.available_executors,
            connecting_executors=snapshot.connecting_executors,
            queue_length=snapshot.queue_length,
            planned_capacity=state.planned_capacity,
        )

        available_capacity = snapshot.available_executors + snapshot.connecting_executors
        current_demand = snapshot.queue_length
        self._emit(
            "capacity_evaluated",
            TelemetryDetail.DEBUG,
            label,
            provider=provider_name,
            available_capacity=available_capacity,
            current_demand=current_demand,
        )

        if available_capacity < current_demand:
            launches = self._provision(provider, label, current_demand - available_capacity)
            self._emit("launches_planned", TelemetryDetail.DEBUG, label, provider=provider_name, planned=len(launches))
            state.record_pending_launches(launches)
            available_capacity += len(launches)
            self._emit(
                "capacity_after_provisioning",
                TelemetryDetail.DEBUG,
                label,
                provider=provider_name,
                available_capacity=available_capacity,
                current_demand=current_demand,
            )

        decision = StrategyDecision.COMPLETED if available_capacity >= current_demand else StrategyDecision.DEFERRED
        self._emit("decision", TelemetryDetail.DEBUG, label, provider=provider_name, decision=decision.value)
        return decision

    def _can_serve(self, provider: CapacityProvider, label: Label) -> bool:
        try:
            return bool(provider.can_serve(label))
        except Exception as e:
            self._report_failure(provider, label, FailureStage.CAPABILITY_CHECK, e)
            return False

    def _provision(self, provider: CapacityProvider, label: Label, excess_workload: int) -> List[PendingLaunch]:
        try:
            # Lazy results may raise while being consumed
            return list(provider.provision(label, excess_workload) or [])
        except Exception as e:
            self._report_failure(provider, label, FailureStage.PROVISIONING, e)
            return []

    def _report_failure(self, provider: CapacityProvider, label: Label, stage: FailureStage, error: Exception) -> None:
        failure = ProviderFailure.from_exception(
            provider_name=_provider_name(provider),
            label=label,
            stage=stage,
            error=error,
            at=self.time_source.now(),
        )
        try:
            self.observer.on_provider_failure(failure)
        except Exception:
            logger.exception("Observer %s failed on provider failure", type(self.observer).__name__)

    def _emit(self, event_type: str, detail: TelemetryDetail, label: Label, **payload: Any) -> None:
        event = ProvisioningTelemetryEvent(
            timestamp=self.time_source.now(),
            event_type=event_type,
            detail=detail,
            source_component=SOURCE_COMPONENT,
            label=str(label),
            payload=payload,
        )
        try:
            self.observer.on_telemetry(event)
        except Exception:
            logger.exception("Observer %s failed on telemetry %s", type(self.observer).__name__, event_type)


def _provider_name(provider: CapacityProvider) -> str:
    try:
        return provider.name
    except Exception:
        return type(provider).__name__


def decide(
    state: StrategyState,
    providers: Sequence[CapacityProvider],
    system_quiescing: bool,
    observer: Optional[ProvisioningObserver] = None,
    time_source: Optional[TimeSource] = None,
) -> StrategyDecision:
    """Single-call form of ProvisioningDecider.decide."""
    return ProvisioningDecider(observer=observer, time_source=time_source).decide(
        state, providers, system_quiescing
    )
