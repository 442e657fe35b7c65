from .provider import StrategyProvider

__all__ = ["StrategyProvider"]
