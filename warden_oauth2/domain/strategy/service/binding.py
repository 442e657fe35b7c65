"""Configuration and user resolver binding."""

import logging

from warden_oauth2.domain.shared.service import Service
from warden_oauth2.domain.strategy.model.descriptor import StrategyDescriptor
from warden_oauth2.domain.strategy.model.value import OAuth2Config, UserResolver
from warden_oauth2.domain.strategy.port.resolver_table import ResolverTable

logger = logging.getLogger(__name__)


class ConfigurationBinder(Service):
    """Attaches a configuration payload to a descriptor exactly once."""

    def bind_if_absent(self, descriptor: StrategyDescriptor, config: OAuth2Config) -> bool:
        """Bind ``config`` unless the descriptor is already configured.

        Returns:
            True if the configuration was bound by this call
        """
        bound = descriptor.bind_config(config)
        if bound:
            logger.debug("Bound configuration to strategy %s", descriptor.name)
        return bound


class UserResolverBinding(Service):
    """Wires pre-registered access token user resolvers onto descriptors.

    - register_resolver: Store or replace a provider's resolver in the table
    - attach_if_present: Bind the table entry, if any, onto a descriptor
    """

    _resolver_table: ResolverTable

    def register_resolver(self, keyword: str, resolver: UserResolver) -> None:
        self._resolver_table.register(keyword, resolver)

    def attach_if_present(self, keyword: str, descriptor: StrategyDescriptor) -> bool:
        """Bind the resolver registered for ``keyword`` onto ``descriptor``.

        Only the table entry present at call time is considered; registering a
        resolver later never reaches an already built descriptor.

        Returns:
            True if a resolver was bound by this call
        """
        resolver = self._resolver_table.get(keyword)
        if resolver is None:
            return False

        bound = descriptor.bind_resolver(resolver)
        if bound:
            logger.debug("Attached access token user resolver to strategy %s", descriptor.name)
        return bound
