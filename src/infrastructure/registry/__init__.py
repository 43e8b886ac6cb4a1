"""Registry package - name-to-factory lookups for pattern variants."""

from .base_registry import BaseRegistry
from .creator_registry import CreatorRegistry, get_creator_registry
from .strategy_registry import StrategyRegistry, get_strategy_registry

__all__ = [
    "BaseRegistry",
    "CreatorRegistry",
    "StrategyRegistry",
    "get_creator_registry",
    "get_strategy_registry",
]
