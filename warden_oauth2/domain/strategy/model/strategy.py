"""The strategy object the authentication pipeline routes to."""

import logging
from typing import Any

from warden_oauth2.domain.shared.error import InvalidStateError, MissingResolverError
from warden_oauth2.domain.strategy.model.descriptor import StrategyDescriptor
from warden_oauth2.domain.strategy.model.value import OAuth2Config

logger = logging.getLogger(__name__)


class OAuth2Strategy:
    """Generic OAuth2 strategy parameterised by a descriptor.

    One class serves every provider; the descriptor carries what differs
    between them (name, configuration, user resolver).
    """

    def __init__(self, descriptor: StrategyDescriptor) -> None:
        self._descriptor = descriptor

    @property
    def descriptor(self) -> StrategyDescriptor:
        return self._descriptor

    @property
    def name(self) -> str:
        return self._descriptor.name

    @property
    def config(self) -> OAuth2Config:
        """Bound configuration of the provider.

        Raises:
            InvalidStateError: If the strategy was registered but never configured.
        """
        config = self._descriptor.config
        if config is None:
            raise InvalidStateError(
                f"Strategy {self.name} has no OAuth2 configuration bound",
                code="MISSING_CONFIG",
            )
        return config

    def find_user_by_access_token(self, access_token: str) -> Any | None:
        """Resolve an application user from an access token.

        Returns:
            The user, or None when the token is valid but matches no user.

        Raises:
            MissingResolverError: If no resolver was registered for the
                provider before it was built.
        """
        resolver = self._descriptor.resolver
        if resolver is None:
            raise MissingResolverError(self.name)

        user = resolver(access_token)
        if user is None:
            logger.debug("No user found for access token via strategy %s", self.name)
        return user
