"""Creator Registry - named factories for factory-method creators."""

import threading
from typing import Optional

from src.domain.creator import ConcreteCreator1, ConcreteCreator2, Creator
from src.infrastructure.registry.base_registry import BaseRegistry


class CreatorRegistry(BaseRegistry[Creator]):
    """Registry for creators."""

    registry_name = "Creator"

    def _register_defaults(self) -> None:
        self.register("creator1", ConcreteCreator1)
        self.register("creator2", ConcreteCreator2)


_creator_registry: Optional[CreatorRegistry] = None
_registry_lock = threading.Lock()


def get_creator_registry() -> CreatorRegistry:
    """Get the global creator registry instance."""
    global _creator_registry

    if _creator_registry is None:
        with _registry_lock:
            if _creator_registry is None:
                _creator_registry = CreatorRegistry()

    return _creator_registry
