from enum import Enum


class StrategyDecision(Enum):
    """
    Outcome of a single provisioning strategy for one label in one tick.
    """
    COMPLETED = "PROVISIONING_COMPLETED"  # Demand for the label is covered
    DEFERRED = "CONSULT_REMAINING_STRATEGIES"  # Leave it to another strategy or tick
