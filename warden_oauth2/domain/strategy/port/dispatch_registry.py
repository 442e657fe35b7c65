"""Dispatch registry port - the pipeline's view of available strategies."""

from abc import abstractmethod
from typing import Protocol

from warden_oauth2.domain.shared.port import Port
from warden_oauth2.domain.strategy.model.descriptor import StrategyDescriptor


class DispatchRegistry(Port, Protocol):
    """Registry the authentication pipeline queries to route an attempt.

    Maps dispatch keys (e.g. "twitter_oauth2") to descriptors. The first
    registration for a key wins; existing entries are never overwritten.
    """

    @abstractmethod
    def register_if_absent(self, key: str, descriptor: StrategyDescriptor) -> bool:
        """Register a descriptor under ``key`` unless the key is taken.

        Args:
            key: The dispatch key
            descriptor: The strategy descriptor to register

        Returns:
            True if this call registered the descriptor, False if the key was
            already occupied
        """
        ...

    @abstractmethod
    def lookup(self, key: str) -> StrategyDescriptor | None:
        """Get the descriptor registered under a dispatch key."""
        ...

    @abstractmethod
    def available_strategies(self) -> list[str]:
        """Get every registered dispatch key."""
        ...

    def is_available(self, key: str) -> bool:
        """Check if a strategy is registered under ``key``."""
        return self.lookup(key) is not None
