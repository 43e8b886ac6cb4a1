# src/domain/creator/creator.py
import logging
from abc import ABC, abstractmethod

from src.domain.base.ports.product_port import ProductPort
from src.domain.creator.products import ConcreteProduct1, ConcreteProduct2

logger = logging.getLogger(__name__)


class Creator(ABC):
    """
    Declares the factory method that returns a product.

    ``some_operation`` holds the shared logic and works with whatever product
    ``factory_method`` hands it. Subclasses override only the factory method.
    """

    @abstractmethod
    def factory_method(self) -> ProductPort:
        """Create the product this creator works with."""

    def some_operation(self) -> str:
        """Build a product through the factory method and report on it."""
        product = self.factory_method()
        logger.debug("%s created %s", self.__class__.__name__, product.__class__.__name__)
        return f"Creator: The same creator's code has just worked with {product.operation()}"


class ConcreteCreator1(Creator):
    def factory_method(self) -> ProductPort:
        return ConcreteProduct1()


class ConcreteCreator2(Creator):
    def factory_method(self) -> ProductPort:
        return ConcreteProduct2()
