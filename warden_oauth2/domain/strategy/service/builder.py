"""Strategy builder - orchestrates registration of one OAuth2 provider."""

import logging
from collections.abc import Callable

from warden_oauth2.domain.shared.error import KeywordCollisionError
from warden_oauth2.domain.shared.service import Service
from warden_oauth2.domain.strategy.model.descriptor import StrategyDescriptor
from warden_oauth2.domain.strategy.model.value import OAuth2Config, UserResolver
from warden_oauth2.domain.strategy.port.dispatch_registry import DispatchRegistry
from warden_oauth2.domain.strategy.port.type_registry import StrategyTypeRegistry
from warden_oauth2.domain.strategy.service.binding import (
    ConfigurationBinder,
    UserResolverBinding,
)
from warden_oauth2.domain.strategy.util.naming import dispatch_key, normalize

logger = logging.getLogger(__name__)


class StrategyBuilder(Service):
    """Creates, registers and configures OAuth2 strategies.

    Every step of ``build`` is a no-op when repeated, so declarative setup
    code may build the same provider as often as convenient: the first
    configuration and the first dispatch registration stand.
    """

    _type_registry: StrategyTypeRegistry
    _dispatch_registry: DispatchRegistry
    _config_binder: ConfigurationBinder
    _resolver_binding: UserResolverBinding

    def build(self, keyword: str, config: OAuth2Config) -> StrategyDescriptor:
        """Build the strategy for an OAuth2 provider.

        Args:
            keyword: Provider keyword (e.g., "twitter")
            config: Credentials and options of the provider

        Returns:
            The provider's descriptor, registered as ``<keyword>_oauth2``

        Raises:
            UnresolvableIdentifierError: If no strategy name can be derived
                from ``keyword``
            KeywordCollisionError: If another keyword already owns the same
                strategy name (e.g. ``my_service`` and ``myService``)
        """
        name = normalize(keyword)
        logger.debug("Building strategy %s for provider %r", name, keyword)
        descriptor = self._type_registry.get_or_create(name, keyword)
        if descriptor.keyword is not None and descriptor.keyword != keyword:
            raise KeywordCollisionError(keyword, name, descriptor.keyword)
        self._dispatch_registry.register_if_absent(dispatch_key(keyword), descriptor)
        self._config_binder.bind_if_absent(descriptor, config)
        self._resolver_binding.attach_if_present(keyword, descriptor)
        return descriptor

    def register_resolver(self, keyword: str, resolver: UserResolver) -> None:
        """Pre-register the access token user resolver for a provider.

        Must happen before the provider is built to take effect.
        """
        self._resolver_binding.register_resolver(keyword, resolver)

    def user_resolver(self, keyword: str) -> Callable[[UserResolver], UserResolver]:
        """Decorator form of :meth:`register_resolver`.

        Example:
            @builder.user_resolver("github")
            def find_user(access_token: str) -> User | None:
                ...
        """

        def decorator(resolver: UserResolver) -> UserResolver:
            self.register_resolver(keyword, resolver)
            return resolver

        return decorator

    def lookup(self, key: str) -> StrategyDescriptor | None:
        """Get the descriptor registered under a dispatch key."""
        return self._dispatch_registry.lookup(key)
