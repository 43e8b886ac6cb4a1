"""Concrete products manufactured by the creators."""

from src.domain.base.ports.product_port import ProductPort


class ConcreteProduct1(ProductPort):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct1}"


class ConcreteProduct2(ProductPort):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct2}"
