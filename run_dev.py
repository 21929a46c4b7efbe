from datetime import datetime, timedelta, timezone

from src.config.settings import settings
from src.provisioning.adapters.static_pool_provider import StaticPoolCapacityProvider
from src.provisioning.config.bootstrap import build_ledger, build_observer, configure_logging
from src.provisioning.config.runtime_profile import RuntimeProfile
from src.provisioning.domain.label import Label
from src.provisioning.domain.load_snapshot import LoadSnapshot
from src.provisioning.lifecycle.quiescence import QuiescenceSignal
from src.provisioning.orchestration.node_provisioner import NodeProvisioner
from src.provisioning.registry.provider_registry import CapacityProviderRegistry
from src.provisioning.services.fast_provisioning_strategy import FastProvisioningStrategy
from src.provisioning.services.ledger_strategy_state import LedgerStrategyState
from src.provisioning.services.provisioning_decider import ProvisioningDecider
from src.provisioning.time.frozen_time_source import FrozenTimeSource


def main():
    print("Initializing DEV environment...")
    configure_logging(settings)
    profile = RuntimeProfile.dev()

    # 1. Infrastructure
    time_source = FrozenTimeSource(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))
    observer = build_observer(profile, settings)
    ledger = build_ledger(profile, settings)
    quiescence = QuiescenceSignal()

    # 2. Providers, in search order
    linux = Label("linux")
    gpu = Label("gpu")
    registry = CapacityProviderRegistry()
    registry.register(StaticPoolCapacityProvider("gpu-pool", [gpu], max_instances=2, time_source=time_source))
    registry.register(StaticPoolCapacityProvider("general-pool", [linux, gpu], max_instances=8, time_source=time_source))

    # 3. Provisioning loop
    decider = ProvisioningDecider(observer=observer, time_source=time_source)
    provisioner = NodeProvisioner(
        [FastProvisioningStrategy(registry, quiescence, decider)],
        observer=observer,
        time_source=time_source,
    )

    # 4. Simulated ticks: (available, queued) per label; connecting comes from the ledger
    demand = [
        {linux: (0, 3), gpu: (0, 4)},
        {linux: (1, 5), gpu: (0, 4)},
        {linux: (4, 2), gpu: (2, 1)},
    ]
    for tick, loads in enumerate(demand):
        states = [
            LedgerStrategyState(
                label,
                LoadSnapshot(available, ledger.count_for(label), queued),
                ledger,
            )
            for label, (available, queued) in loads.items()
        ]
        decisions = provisioner.run_tick(states)
        for label, decision in decisions.items():
            print(f"[tick {tick}] {label}: {decision.value} (pending={ledger.count_for(label)})")
        time_source.advance(timedelta(seconds=10))

    quiescence.quiet_down()
    state = LedgerStrategyState(linux, LoadSnapshot(0, 0, 10), ledger)
    print(f"[quiescing] {linux}: {provisioner.run_for_label(state).value}")


if __name__ == "__main__":
    main()
