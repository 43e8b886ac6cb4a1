"""Strategy Registry - named factories for transform strategies."""

import threading
from typing import Optional

from src.domain.base.ports.transform_strategy_port import TransformStrategyPort
from src.infrastructure.registry.base_registry import BaseRegistry


class StrategyRegistry(BaseRegistry[TransformStrategyPort]):
    """Registry for transform strategies, keyed by ``TransformStrategyPort.name``."""

    registry_name = "Strategy"

    def _register_defaults(self) -> None:
        from src.infrastructure.strategies import ReverseStrategy, SortAscendingStrategy

        self.register(SortAscendingStrategy.name, SortAscendingStrategy)
        self.register(ReverseStrategy.name, ReverseStrategy)


_strategy_registry: Optional[StrategyRegistry] = None
_registry_lock = threading.Lock()


def get_strategy_registry() -> StrategyRegistry:
    """Get the global strategy registry instance."""
    global _strategy_registry

    if _strategy_registry is None:
        with _registry_lock:
            if _strategy_registry is None:
                _strategy_registry = StrategyRegistry()

    return _strategy_registry
