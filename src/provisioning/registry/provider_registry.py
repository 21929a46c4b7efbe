from threading import Lock
from typing import Dict, List

from src.provisioning.domain.exceptions import DuplicateProviderError, UnknownProviderError
from src.provisioning.interfaces.capacity_provider import CapacityProvider


class CapacityProviderRegistry:
    """
    Ordered set of capacity providers. Registration order is search order.
    Passed explicitly to whoever needs it; there is no process-wide instance.
    """

    def __init__(self):
        self._providers: Dict[str, CapacityProvider] = {}
        self._lock = Lock()

    def register(self, provider: CapacityProvider) -> None:
        with self._lock:
            if provider.name in self._providers:
                raise DuplicateProviderError(f"Provider already registered: {provider.name}")
            self._providers[provider.name] = provider

    def unregister(self, name: str) -> CapacityProvider:
        with self._lock:
            if name not in self._providers:
                raise UnknownProviderError(name)
            return self._providers.pop(name)

    def get(self, name: str) -> CapacityProvider:
        with self._lock:
            if name not in self._providers:
                raise UnknownProviderError(name)
            return self._providers[name]

    def providers(self) -> List[CapacityProvider]:
        """Copy of the providers in registration order, safe to iterate while others register."""
        with self._lock:
            return list(self._providers.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._providers)
