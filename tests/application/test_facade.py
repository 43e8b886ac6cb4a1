"""Tests for the subsystem facade."""

from unittest.mock import Mock, call

from src.application.facade import Facade
from src.domain.facade.subsystems import Subsystem1, Subsystem2

EXPECTED_OUTPUT = (
    "Facade initializes subsystems:\n"
    "Subsystem1: Ready!\n"
    "Subsystem2: Get ready!\n"
    "Facade orders subsystems to perform the action:\n"
    "Subsystem1: Go!\n"
    "Subsystem2: Fire!"
)


class TestFacade:
    """Test cases for Facade."""

    def test_default_subsystems_output(self):
        """Default facade produces the fixed report."""
        assert Facade().operation() == EXPECTED_OUTPUT

    def test_default_subsystems_are_owned(self):
        """Omitted subsystems are created and owned by the facade."""
        facade = Facade()

        assert isinstance(facade.subsystem1, Subsystem1)
        assert isinstance(facade.subsystem2, Subsystem2)
        assert facade.owns_subsystem1
        assert facade.owns_subsystem2

    def test_supplied_subsystems_are_referenced(self):
        """Supplied subsystems are used as-is and not owned."""
        subsystem1 = Subsystem1()
        subsystem2 = Subsystem2()

        facade = Facade(subsystem1, subsystem2)

        assert facade.subsystem1 is subsystem1
        assert facade.subsystem2 is subsystem2
        assert not facade.owns_subsystem1
        assert not facade.owns_subsystem2
        assert facade.operation() == EXPECTED_OUTPUT

    def test_mixed_ownership(self):
        """Only the omitted subsystem is owned."""
        facade = Facade(subsystem2=Subsystem2())

        assert facade.owns_subsystem1
        assert not facade.owns_subsystem2

    def test_call_order_is_fixed(self):
        """Initialization calls happen before action calls, in a fixed order."""
        manager = Mock()
        manager.subsystem1.operation1.return_value = "s1-init\n"
        manager.subsystem1.operation_n.return_value = "s1-go\n"
        manager.subsystem2.operation1.return_value = "s2-init\n"
        manager.subsystem2.operation_z.return_value = "s2-fire"

        facade = Facade(manager.subsystem1, manager.subsystem2)
        result = facade.operation()

        assert manager.mock_calls == [
            call.subsystem1.operation1(),
            call.subsystem2.operation1(),
            call.subsystem1.operation_n(),
            call.subsystem2.operation_z(),
        ]
        assert result == (
            "Facade initializes subsystems:\n"
            "s1-init\n"
            "s2-init\n"
            "Facade orders subsystems to perform the action:\n"
            "s1-go\n"
            "s2-fire"
        )

    def test_operation_is_repeatable(self):
        """Subsystems are not changed by running the facade."""
        facade = Facade()
        assert facade.operation() == facade.operation()
