from abc import ABC, abstractmethod

from src.provisioning.domain.strategy_decision import StrategyDecision
from src.provisioning.interfaces.strategy_state import StrategyState


class ProvisioningStrategy(ABC):
    """
    One step of the provisioning chain. The orchestration loop applies
    strategies in order until one reports COMPLETED.
    """

    @abstractmethod
    def apply(self, state: StrategyState) -> StrategyDecision:
        pass
