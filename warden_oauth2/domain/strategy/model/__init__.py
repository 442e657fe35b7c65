"""Strategy domain models."""

from .descriptor import StrategyDescriptor
from .strategy import OAuth2Strategy
from .value import OAuth2Config, UserResolver

__all__ = [
    "OAuth2Config",
    "OAuth2Strategy",
    "StrategyDescriptor",
    "UserResolver",
]
