"""Strategy infrastructure - in-memory registries and DI provider.

Import modules directly:
    from warden_oauth2.infrastructure.strategy.di import StrategyInfraProvider
    from warden_oauth2.infrastructure.strategy.registry import InMemoryDispatchRegistry
"""

__all__: list[str] = []
