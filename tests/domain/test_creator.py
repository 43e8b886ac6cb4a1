"""Tests for the factory method creators."""

import pytest

from src.domain.base.ports.product_port import ProductPort
from src.domain.creator import (
    ConcreteCreator1,
    ConcreteCreator2,
    ConcreteProduct1,
    ConcreteProduct2,
    Creator,
)


class TestProducts:
    """Test product variants."""

    def test_products_return_fixed_strings(self):
        """Each product returns its own descriptive string."""
        assert ConcreteProduct1().operation() == "{Result of the ConcreteProduct1}"
        assert ConcreteProduct2().operation() == "{Result of the ConcreteProduct2}"

    def test_products_implement_port(self):
        """Products are ProductPort implementations."""
        assert isinstance(ConcreteProduct1(), ProductPort)
        assert isinstance(ConcreteProduct2(), ProductPort)

    def test_cannot_instantiate_product_port(self):
        """ProductPort is abstract."""
        with pytest.raises(TypeError):
            ProductPort()


class TestCreator:
    """Test the creator hierarchy."""

    def test_cannot_instantiate_abstract_creator(self):
        """Creator cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Creator()

    def test_subclass_without_factory_method_is_abstract(self):
        """A subclass must override the factory method to be instantiable."""

        class IncompleteCreator(Creator):
            pass

        with pytest.raises(TypeError):
            IncompleteCreator()

    def test_factory_methods_return_matching_products(self):
        """Each creator builds its own product variant."""
        assert isinstance(ConcreteCreator1().factory_method(), ConcreteProduct1)
        assert isinstance(ConcreteCreator2().factory_method(), ConcreteProduct2)

    def test_factory_method_returns_new_product_each_call(self):
        """Creators hold no product between calls."""
        creator = ConcreteCreator1()
        assert creator.factory_method() is not creator.factory_method()

    def test_creator1_embeds_product1_result(self):
        """ConcreteCreator1 reports the ConcreteProduct1 result."""
        result = ConcreteCreator1().some_operation()

        assert result == (
            "Creator: The same creator's code has just worked with "
            "{Result of the ConcreteProduct1}"
        )
        assert ConcreteProduct1().operation() in result

    def test_creator2_embeds_product2_result(self):
        """ConcreteCreator2 reports the ConcreteProduct2 result."""
        result = ConcreteCreator2().some_operation()

        assert result == (
            "Creator: The same creator's code has just worked with "
            "{Result of the ConcreteProduct2}"
        )
        assert ConcreteProduct2().operation() in result

    def test_creator_outputs_differ(self):
        """The two creators produce different output."""
        assert ConcreteCreator1().some_operation() != ConcreteCreator2().some_operation()

    def test_some_operation_is_shared(self):
        """Concrete creators do not override the shared operation."""
        assert ConcreteCreator1.some_operation is Creator.some_operation
        assert ConcreteCreator2.some_operation is Creator.some_operation

    def test_custom_creator_reuses_shared_logic(self):
        """Any product injected through the hook flows through the same message."""

        class StubProduct(ProductPort):
            def operation(self):
                return "{stub}"

        class StubCreator(Creator):
            def factory_method(self):
                return StubProduct()

        assert StubCreator().some_operation() == (
            "Creator: The same creator's code has just worked with {stub}"
        )
