"""Strategy descriptor: the per-provider strategy type record."""

import threading

from warden_oauth2.domain.strategy.model.value import OAuth2Config, UserResolver


class StrategyDescriptor:
    """One OAuth2 provider's strategy type.

    A descriptor is created empty by the type registry and then mutated at
    most twice, in order: configuration bind, then (optionally) resolver bind.
    Both fields are set-once; later binds are no-ops that return False.
    """

    def __init__(self, name: str, keyword: str | None = None) -> None:
        self._name = name
        self._keyword = keyword
        self._config: OAuth2Config | None = None
        self._resolver: UserResolver | None = None
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Canonical strategy name, e.g. ``Twitter``."""
        return self._name

    @property
    def keyword(self) -> str | None:
        """Provider keyword the descriptor was first created for."""
        return self._keyword

    @property
    def config(self) -> OAuth2Config | None:
        return self._config

    @property
    def resolver(self) -> UserResolver | None:
        return self._resolver

    @property
    def is_configured(self) -> bool:
        return self._config is not None

    @property
    def has_resolver(self) -> bool:
        return self._resolver is not None

    def bind_config(self, config: OAuth2Config) -> bool:
        """Bind the configuration payload unless one is already bound."""
        with self._lock:
            if self._config is not None:
                return False
            self._config = config
            return True

    def bind_resolver(self, resolver: UserResolver) -> bool:
        """Bind the access token user resolver unless one is already bound."""
        with self._lock:
            if self._resolver is not None:
                return False
            self._resolver = resolver
            return True

    def __repr__(self) -> str:
        return (
            f"StrategyDescriptor(name={self._name!r}, keyword={self._keyword!r}, "
            f"configured={self.is_configured}, resolver={self.has_resolver})"
        )
