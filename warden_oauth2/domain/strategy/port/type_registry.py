"""Strategy type registry port."""

from abc import abstractmethod
from typing import Protocol

from warden_oauth2.domain.shared.port import Port
from warden_oauth2.domain.strategy.model.descriptor import StrategyDescriptor


class StrategyTypeRegistry(Port, Protocol):
    """Process-wide store of strategy descriptors keyed by canonical name.

    Descriptors are never removed; each canonical name maps to exactly one
    descriptor for the lifetime of the registry.
    """

    @abstractmethod
    def get_or_create(self, name: str, keyword: str | None = None) -> StrategyDescriptor:
        """Return the descriptor stored under ``name``, creating it if missing.

        Args:
            name: Canonical strategy name (e.g., "Twitter")
            keyword: Optional provider keyword recorded on a newly created descriptor

        Returns:
            The single descriptor for ``name``; an existing one is returned unchanged
        """
        ...

    @abstractmethod
    def get(self, name: str) -> StrategyDescriptor | None:
        """Get a descriptor by canonical name without creating it."""
        ...

    @abstractmethod
    def names(self) -> list[str]:
        """Get canonical names of every descriptor created so far."""
        ...
