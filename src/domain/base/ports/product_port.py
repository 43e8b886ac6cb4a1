"""Domain port for objects manufactured by a Creator."""

from abc import ABC, abstractmethod


class ProductPort(ABC):
    """Interface every product returned by ``Creator.factory_method`` implements."""

    @abstractmethod
    def operation(self) -> str:
        """Return the product's descriptive string."""
