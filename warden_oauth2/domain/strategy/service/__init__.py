"""Strategy domain services."""

from .binding import ConfigurationBinder, UserResolverBinding
from .builder import StrategyBuilder

__all__ = [
    "ConfigurationBinder",
    "StrategyBuilder",
    "UserResolverBinding",
]
