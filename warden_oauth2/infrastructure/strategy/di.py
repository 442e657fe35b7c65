"""DI provider for strategy infrastructure."""

from dishka import provide

from warden_oauth2.domain.strategy.port.dispatch_registry import DispatchRegistry
from warden_oauth2.domain.strategy.port.resolver_table import ResolverTable
from warden_oauth2.domain.strategy.port.type_registry import StrategyTypeRegistry
from warden_oauth2.infrastructure.strategy.registry import (
    InMemoryDispatchRegistry,
    InMemoryResolverTable,
    InMemoryStrategyTypeRegistry,
)
from warden_oauth2.util.di.base import Provider
from warden_oauth2.util.di.scope import Scope


class StrategyInfraProvider(Provider):
    """DI provider for the process-wide strategy registries."""

    type_registry = provide(
        InMemoryStrategyTypeRegistry,
        scope=Scope.APP,
        provides=StrategyTypeRegistry,
    )
    resolver_table = provide(
        InMemoryResolverTable,
        scope=Scope.APP,
        provides=ResolverTable,
    )

    @provide(scope=Scope.APP)
    def get_dispatch_registry(self) -> DispatchRegistry:
        """Provide an empty DispatchRegistry; strategies are added by the builder."""
        return InMemoryDispatchRegistry()
