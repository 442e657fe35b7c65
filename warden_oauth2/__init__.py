"""OAuth2 strategy registration for pluggable identity providers."""

from warden_oauth2.application.di import create_container, setup
from warden_oauth2.application.manager import Manager
from warden_oauth2.domain.strategy.model import (
    OAuth2Config,
    OAuth2Strategy,
    StrategyDescriptor,
)

__version__ = "0.1.0"

__all__ = [
    "Manager",
    "OAuth2Config",
    "OAuth2Strategy",
    "StrategyDescriptor",
    "create_container",
    "setup",
]
