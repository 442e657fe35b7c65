"""Strategy domain ports."""

from .dispatch_registry import DispatchRegistry
from .resolver_table import ResolverTable
from .type_registry import StrategyTypeRegistry

__all__ = [
    "DispatchRegistry",
    "ResolverTable",
    "StrategyTypeRegistry",
]
