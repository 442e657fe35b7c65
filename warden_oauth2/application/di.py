from dishka import Container, from_context, make_container, provide

from warden_oauth2.application.manager import Manager
from warden_oauth2.config import Config, configure_logging
from warden_oauth2.domain.strategy.util.di import StrategyProvider
from warden_oauth2.infrastructure.strategy.di import StrategyInfraProvider
from warden_oauth2.util.di.base import Provider
from warden_oauth2.util.di.scope import Scope


class ApplicationProvider(Provider):
    """DI provider for the application-facing setup surface."""

    config = from_context(provides=Config, scope=Scope.APP)
    manager = provide(Manager, scope=Scope.APP)


def create_container(config: Config | None = None) -> Container:
    """Create the process-wide container.

    The registries it provides are initialized empty on first use and live
    as long as the container; create one container per process.
    """
    if config is None:
        # Pydantic Settings populates from env vars at runtime
        config = Config()

    return make_container(
        StrategyInfraProvider(),
        StrategyProvider(),
        ApplicationProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )


def setup(config: Config | None = None) -> Container:
    """Configure logging, create the container and build every provider in settings."""
    if config is None:
        config = Config()

    # Configure logging early
    configure_logging(config.logging)

    container = create_container(config)
    container.get(Manager).configure(config)
    return container
