"""Base registry mapping names to factories."""

import threading
from typing import Any, Callable, Dict, Generic, List, TypeVar

from src.infrastructure.exceptions import UnsupportedTypeError
from src.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class BaseRegistry(Generic[T]):
    """
    Thread-safe registry of named factories.

    Subclasses set ``registry_name`` for messages and register their
    defaults in ``_register_defaults``.
    """

    registry_name = "Registry"

    @staticmethod
    def normalize_name(type_name: str) -> str:
        """Lookup key for a type name: surrounding whitespace and case are ignored."""
        return type_name.strip().lower()

    def __init__(self, register_defaults: bool = True):
        """Initialize the registry."""
        self._factories: Dict[str, Callable[..., T]] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in factories. Nothing by default."""

    def register(self, type_name: str, factory: Callable[..., T]) -> None:
        """
        Register a factory under ``type_name``.

        Args:
            type_name: Lookup name, stored stripped and lower-cased
            factory: Callable returning a new instance
        """
        key = self.normalize_name(type_name)
        with self._lock:
            if key in self._factories:
                self.logger.warning("Overriding existing %s type: %s", self.registry_name, key)
            self._factories[key] = factory
        self.logger.info("Registered %s type: %s", self.registry_name, key)

    def unregister(self, type_name: str) -> bool:
        """Remove a registration. Returns True if one existed."""
        with self._lock:
            return self._factories.pop(self.normalize_name(type_name), None) is not None

    def create(self, type_name: str, **kwargs: Any) -> T:
        """
        Create an instance of the registered type.

        Raises:
            UnsupportedTypeError: If ``type_name`` is not registered
        """
        key = self.normalize_name(type_name)
        with self._lock:
            factory = self._factories.get(key)
            available = list(self._factories.keys())

        if factory is None:
            raise UnsupportedTypeError(self.registry_name, type_name, available)
        return factory(**kwargs)

    def list_names(self) -> List[str]:
        """List registered type names in registration order."""
        with self._lock:
            return list(self._factories.keys())

    def is_registered(self, type_name: str) -> bool:
        with self._lock:
            return self.normalize_name(type_name) in self._factories

    def clear(self) -> None:
        """Remove every registration, including defaults."""
        with self._lock:
            self._factories.clear()
