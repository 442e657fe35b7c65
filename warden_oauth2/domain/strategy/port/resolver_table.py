"""Resolver table port."""

from abc import abstractmethod
from typing import Protocol

from warden_oauth2.domain.shared.port import Port
from warden_oauth2.domain.strategy.model.value import UserResolver


class ResolverTable(Port, Protocol):
    """Provider keyword to user resolver mapping, filled before strategies are built.

    Entries may be overwritten any number of times; only the entry present
    when a provider is built is attached to its strategy.
    """

    @abstractmethod
    def register(self, keyword: str, resolver: UserResolver) -> None:
        """Store or replace the resolver for a provider keyword."""
        ...

    @abstractmethod
    def get(self, keyword: str) -> UserResolver | None:
        """Get the resolver registered for a provider keyword."""
        ...
