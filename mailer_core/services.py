"""Service container used as the registry lookup for mail services."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Set

__all__ = ["ServiceContainer", "ServiceNotFoundError"]

ServiceProvider = Callable[["ServiceContainer"], Any]


class ServiceNotFoundError(KeyError):
    """Raised when a service name is not registered."""


@dataclass(frozen=True)
class _ServiceRegistration:
    provider: ServiceProvider
    singleton: bool


class ServiceContainer:
    """Simple dependency container with lazy initialization."""

    def __init__(self) -> None:
        self._registrations: Dict[str, _ServiceRegistration] = {}
        self._singletons: Dict[str, Any] = {}
        self._initializing: Set[str] = set()
        # re-entrant so providers may resolve their own dependencies
        self._lock = threading.RLock()

    def register(
        self,
        name: str,
        provider: ServiceProvider,
        *,
        singleton: bool = True,
    ) -> None:
        """Register a provider that will be invoked lazily."""
        with self._lock:
            if name in self._registrations:
                raise ValueError(f"service {name!r} already registered")
            self._registrations[name] = _ServiceRegistration(provider=provider, singleton=singleton)

    def set(self, name: str, instance: Any) -> None:
        """Register an already built ``instance`` under ``name``."""
        with self._lock:
            self.register(name, lambda _: instance)
            self._singletons[name] = instance

    def has(self, name: str) -> bool:
        return name in self._registrations

    def get(self, name: str) -> Any:
        """Resolve `name`, instantiating it only when first requested."""
        with self._lock:
            registration = self._registrations.get(name)
            if registration is None:
                raise ServiceNotFoundError(f"service {name!r} is not registered")

            if registration.singleton and name in self._singletons:
                return self._singletons[name]

            if name in self._initializing:
                raise RuntimeError(f"re-entrant initialization detected for {name!r}")

            self._initializing.add(name)
            try:
                instance = registration.provider(self)
            finally:
                self._initializing.remove(name)

            if registration.singleton:
                self._singletons[name] = instance

            return instance
