"""Creator context - factory method producing product variants."""

from .creator import ConcreteCreator1, ConcreteCreator2, Creator
from .products import ConcreteProduct1, ConcreteProduct2

__all__ = [
    "Creator",
    "ConcreteCreator1",
    "ConcreteCreator2",
    "ConcreteProduct1",
    "ConcreteProduct2",
]
