from typing import Optional

from src.provisioning.domain.strategy_decision import StrategyDecision
from src.provisioning.interfaces.provisioning_strategy import ProvisioningStrategy
from src.provisioning.interfaces.strategy_state import StrategyState
from src.provisioning.lifecycle.quiescence import QuiescenceSignal
from src.provisioning.registry.provider_registry import CapacityProviderRegistry
from src.provisioning.services.provisioning_decider import ProvisioningDecider


class FastProvisioningStrategy(ProvisioningStrategy):
    """
    Requests the whole shortfall for a label from the first capable provider
    on every tick, instead of waiting for load averages to build up.
    Registry contents and the quiescence flag are read once per apply()
    and handed to the decider explicitly.
    """

    def __init__(
        self,
        registry: CapacityProviderRegistry,
        quiescence: QuiescenceSignal,
        decider: Optional[ProvisioningDecider] = None,
    ):
        self.registry = registry
        self.quiescence = quiescence
        self.decider = decider or ProvisioningDecider()

    def apply(self, state: StrategyState) -> StrategyDecision:
        return self.decider.decide(
            state,
            self.registry.providers(),
            self.quiescence.is_quieting_down(),
        )
