"""Base marker for domain ports."""

from typing import Protocol


class Port(Protocol):
    """Marker base for interfaces the domain depends on.

    Adapters live in ``warden_oauth2.infrastructure`` and are bound to their
    ports by the DI providers.
    """
