"""Declarative OAuth2 provider setup for the authentication pipeline."""

import logging
from collections.abc import Callable
from typing import Any

from warden_oauth2.config import Config
from warden_oauth2.domain.shared.error import NotFoundError
from warden_oauth2.domain.shared.service import Service
from warden_oauth2.domain.strategy.model.descriptor import StrategyDescriptor
from warden_oauth2.domain.strategy.model.strategy import OAuth2Strategy
from warden_oauth2.domain.strategy.model.value import OAuth2Config, UserResolver
from warden_oauth2.domain.strategy.port.dispatch_registry import DispatchRegistry
from warden_oauth2.domain.strategy.service.builder import StrategyBuilder
from warden_oauth2.domain.strategy.util.naming import dispatch_key

logger = logging.getLogger(__name__)


class Manager(Service):
    """Setup surface applications use to declare their OAuth2 providers.

    - oauth2: Build one provider from a config object or keyword settings
    - user_resolver: Register the access token user resolver of a provider
    - configure: Build every provider declared in settings
    - strategy: Look up a strategy the way the pipeline dispatches to it
    """

    _builder: StrategyBuilder
    _dispatch_registry: DispatchRegistry

    def oauth2(
        self,
        keyword: str,
        config: OAuth2Config | None = None,
        **settings: Any,
    ) -> StrategyDescriptor:
        """Declare an OAuth2 provider.

        Example:
            manager.oauth2("twitter", consumer_key="key", consumer_secret="secret")

        Args:
            keyword: Provider keyword; the strategy is registered as ``<keyword>_oauth2``
            config: Complete provider configuration; mutually exclusive with ``settings``
            **settings: consumer_key, consumer_secret and options of the provider

        Raises:
            ValueError: If both or neither of ``config`` and ``settings`` are given
        """
        if config is not None and settings:
            raise ValueError("Pass either an OAuth2Config or keyword settings, not both")
        if config is None:
            if not settings:
                raise ValueError(f"No configuration given for OAuth2 provider {keyword!r}")
            config = OAuth2Config(**settings)
        return self._builder.build(keyword, config)

    def user_resolver(self, keyword: str) -> Callable[[UserResolver], UserResolver]:
        """Decorator registering the access token user resolver of a provider.

        Resolvers are attached when the provider is built, so register them
        before calling :meth:`oauth2` or :meth:`configure`.
        """
        return self._builder.user_resolver(keyword)

    def configure(self, config: Config) -> list[str]:
        """Build every provider declared in ``config.providers``.

        Providers without credentials are skipped with a warning.

        Returns:
            Dispatch keys of the providers that were built
        """
        built: list[str] = []
        for keyword, provider_config in config.providers.items():
            if not provider_config.is_configured:
                logger.warning(
                    "Skipping OAuth2 provider %s: consumer key or secret not set", keyword
                )
                continue
            self._builder.build(keyword, provider_config.to_oauth2_config())
            built.append(dispatch_key(keyword))
        return built

    def strategy(self, key: str) -> OAuth2Strategy:
        """Get the strategy registered under a dispatch key.

        Raises:
            NotFoundError: If no strategy is registered under ``key``
        """
        descriptor = self._dispatch_registry.lookup(key)
        if descriptor is None:
            raise NotFoundError(f"No strategy registered as {key}")
        return OAuth2Strategy(descriptor)
