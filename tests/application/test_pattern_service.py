"""Tests for the pattern application service."""

from unittest.mock import Mock

import pytest

from src.application.facade import Facade
from src.application.service import PatternApplicationService
from src.config.schemas import AppConfig, CreatorConfig, StrategyConfig
from src.infrastructure.exceptions import UnsupportedTypeError


class TestStrategyOperations:
    """Strategy operations of PatternApplicationService."""

    def test_execute_default_strategy(self, pattern_service):
        """The configured default strategy is used when no name is given."""
        result = pattern_service.execute_strategy(["c", "a", "b"])

        assert result == {"strategy": "sort", "input": ["c", "a", "b"], "result": ["a", "b", "c"]}

    def test_execute_named_strategy(self, pattern_service):
        """A named strategy is resolved through the registry."""
        result = pattern_service.execute_strategy(["a", "b", "c"], "reverse")

        assert result["strategy"] == "reverse"
        assert result["result"] == ["c", "b", "a"]

    def test_strategy_name_is_case_insensitive(self, pattern_service):
        assert pattern_service.execute_strategy(["b", "a"], "SORT")["result"] == ["a", "b"]

    def test_strategy_name_with_whitespace(self, pattern_service):
        result = pattern_service.execute_strategy(["a", "b"], " Reverse ")

        assert result == {"strategy": "reverse", "input": ["a", "b"], "result": ["b", "a"]}

    def test_configured_default_strategy(self, strategy_registry, creator_registry):
        """The default comes from StrategyConfig."""
        config = AppConfig(strategy=StrategyConfig(default="reverse"))
        service = PatternApplicationService(strategy_registry, creator_registry, config)

        assert service.execute_strategy(["a", "b"])["result"] == ["b", "a"]

    def test_unknown_strategy_raises(self, pattern_service):
        with pytest.raises(UnsupportedTypeError, match="shuffle"):
            pattern_service.execute_strategy(["a"], "shuffle")

    def test_compare_strategies(self, pattern_service):
        """Every registered strategy runs over the same input."""
        result = pattern_service.compare_strategies(["b", "c", "a"])

        assert result == {
            "input": ["b", "c", "a"],
            "results": {"sort": ["a", "b", "c"], "reverse": ["a", "c", "b"]},
        }

    def test_list_strategies(self, pattern_service):
        assert pattern_service.list_strategies() == {"strategies": ["sort", "reverse"]}

    def test_accepts_any_iterable(self, pattern_service):
        result = pattern_service.execute_strategy(iter(["b", "a"]), "reverse")

        assert result["input"] == ["b", "a"]
        assert result["result"] == ["a", "b"]


class TestCreatorOperations:
    """Creator operations of PatternApplicationService."""

    def test_run_default_creator(self, pattern_service):
        result = pattern_service.run_creator()

        assert result["creator"] == "creator1"
        assert result["result"].endswith("{Result of the ConcreteProduct1}")

    def test_run_named_creator(self, pattern_service):
        result = pattern_service.run_creator("creator2")

        assert result["result"].endswith("{Result of the ConcreteProduct2}")

    def test_creator_name_with_whitespace(self, pattern_service):
        result = pattern_service.run_creator(" Creator2\n")

        assert result["creator"] == "creator2"
        assert result["result"].endswith("{Result of the ConcreteProduct2}")

    def test_configured_default_creator(self, strategy_registry, creator_registry):
        config = AppConfig(creator=CreatorConfig(default="creator2"))
        service = PatternApplicationService(strategy_registry, creator_registry, config)

        assert service.run_creator()["creator"] == "creator2"

    def test_unknown_creator_raises(self, pattern_service):
        with pytest.raises(UnsupportedTypeError):
            pattern_service.run_creator("creator9")

    def test_list_creators(self, pattern_service):
        assert pattern_service.list_creators() == {"creators": ["creator1", "creator2"]}


class TestFacadeOperations:
    """Facade operations of PatternApplicationService."""

    def test_run_default_facade(self, pattern_service):
        result = pattern_service.run_facade()

        assert result["facade"] == "Facade"
        assert result["result"].startswith("Facade initializes subsystems:\n")
        assert result["result"].endswith("Subsystem2: Fire!")

    def test_run_supplied_facade(self, pattern_service):
        facade = Mock(spec=Facade)
        facade.operation.return_value = "custom"

        result = pattern_service.run_facade(facade)

        assert result["result"] == "custom"
        facade.operation.assert_called_once_with()


def test_service_defaults_config(strategy_registry, creator_registry):
    service = PatternApplicationService(strategy_registry, creator_registry)
    assert service.config == AppConfig()
