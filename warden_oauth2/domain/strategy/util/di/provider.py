"""DI provider for strategy domain services."""

from dishka import provide

from warden_oauth2.domain.strategy.service.binding import (
    ConfigurationBinder,
    UserResolverBinding,
)
from warden_oauth2.domain.strategy.service.builder import StrategyBuilder
from warden_oauth2.util.di.base import Provider
from warden_oauth2.util.di.scope import Scope


class StrategyProvider(Provider):
    """DI provider for strategy domain services."""

    config_binder = provide(ConfigurationBinder, scope=Scope.APP)
    resolver_binding = provide(UserResolverBinding, scope=Scope.APP)
    strategy_builder = provide(StrategyBuilder, scope=Scope.APP)
