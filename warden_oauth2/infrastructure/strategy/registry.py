"""In-memory registry implementations.

All three registries are process-wide state owned by the DI container's
application scope. Each guards its mapping with a lock so concurrent
configuration code cannot create duplicate descriptors or lose registrations.
"""

import logging
import threading

from warden_oauth2.domain.strategy.model.descriptor import StrategyDescriptor
from warden_oauth2.domain.strategy.model.value import UserResolver
from warden_oauth2.domain.strategy.port.dispatch_registry import DispatchRegistry
from warden_oauth2.domain.strategy.port.resolver_table import ResolverTable
from warden_oauth2.domain.strategy.port.type_registry import StrategyTypeRegistry

logger = logging.getLogger(__name__)


class InMemoryStrategyTypeRegistry(StrategyTypeRegistry):
    """In-memory strategy type registry.

    Descriptors are created on first request for a canonical name and kept
    for the lifetime of the registry.
    """

    def __init__(self) -> None:
        self._descriptors: dict[str, StrategyDescriptor] = {}
        self._lock = threading.Lock()

    def get_or_create(self, name: str, keyword: str | None = None) -> StrategyDescriptor:
        with self._lock:
            descriptor = self._descriptors.get(name)
            if descriptor is None:
                descriptor = StrategyDescriptor(name, keyword)
                self._descriptors[name] = descriptor
                logger.debug("Created strategy type %s", name)
            return descriptor

    def get(self, name: str) -> StrategyDescriptor | None:
        with self._lock:
            return self._descriptors.get(name)

    def names(self) -> list[str]:
        with self._lock:
            return list(self._descriptors)


class InMemoryDispatchRegistry(DispatchRegistry):
    """In-memory dispatch registry.

    Stores a mapping of dispatch keys to descriptors. The first registration
    for a key wins.
    """

    def __init__(self, strategies: dict[str, StrategyDescriptor] | None = None) -> None:
        """Initialize registry with optional initial strategies.

        Args:
            strategies: Optional dict mapping dispatch keys to descriptors
        """
        self._strategies: dict[str, StrategyDescriptor] = dict(strategies or {})
        self._lock = threading.Lock()

    def register_if_absent(self, key: str, descriptor: StrategyDescriptor) -> bool:
        with self._lock:
            if key in self._strategies:
                return False
            self._strategies[key] = descriptor
        logger.info("Registered strategy %s as %s", descriptor.name, key)
        return True

    def lookup(self, key: str) -> StrategyDescriptor | None:
        with self._lock:
            return self._strategies.get(key)

    def available_strategies(self) -> list[str]:
        with self._lock:
            return list(self._strategies)


class InMemoryResolverTable(ResolverTable):
    """In-memory table of access token user resolvers."""

    def __init__(self) -> None:
        self._resolvers: dict[str, UserResolver] = {}
        self._lock = threading.Lock()

    def register(self, keyword: str, resolver: UserResolver) -> None:
        with self._lock:
            self._resolvers[keyword] = resolver

    def get(self, keyword: str) -> UserResolver | None:
        with self._lock:
            return self._resolvers.get(keyword)
