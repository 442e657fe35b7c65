"""Global test fixtures."""

import logging
import os

import pytest

from warden_oauth2.domain.strategy.service.binding import (
    ConfigurationBinder,
    UserResolverBinding,
)
from warden_oauth2.domain.strategy.service.builder import StrategyBuilder
from warden_oauth2.infrastructure.strategy.registry import (
    InMemoryDispatchRegistry,
    InMemoryResolverTable,
    InMemoryStrategyTypeRegistry,
)


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of Config() in tests."""
    for name in list(os.environ):
        if name.startswith("WARDEN_OAUTH2_"):
            monkeypatch.delenv(name)


@pytest.fixture
def type_registry() -> InMemoryStrategyTypeRegistry:
    return InMemoryStrategyTypeRegistry()


@pytest.fixture
def dispatch_registry() -> InMemoryDispatchRegistry:
    return InMemoryDispatchRegistry()


@pytest.fixture
def resolver_table() -> InMemoryResolverTable:
    return InMemoryResolverTable()


@pytest.fixture
def builder(
    type_registry: InMemoryStrategyTypeRegistry,
    dispatch_registry: InMemoryDispatchRegistry,
    resolver_table: InMemoryResolverTable,
) -> StrategyBuilder:
    return StrategyBuilder(
        _type_registry=type_registry,
        _dispatch_registry=dispatch_registry,
        _config_binder=ConfigurationBinder(),
        _resolver_binding=UserResolverBinding(_resolver_table=resolver_table),
    )


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging() changes to the root logger."""
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
