"""
Application Service - entry point for running the pattern catalog.

This service coordinates the strategy, creator and facade contexts and
returns plain dictionaries so external consumers (CLI, tests) do not deal
with domain objects directly.
"""
from typing import Any, Dict, Iterable, Optional

from src.application.facade import Facade
from src.config.schemas import AppConfig
from src.domain.strategy.context import Context
from src.infrastructure.logging.logger import get_logger
from src.infrastructure.registry.creator_registry import CreatorRegistry
from src.infrastructure.registry.strategy_registry import StrategyRegistry


class PatternApplicationService:
    """Runs the catalog's patterns by name."""

    def __init__(self,
                 strategy_registry: StrategyRegistry,
                 creator_registry: CreatorRegistry,
                 config: Optional[AppConfig] = None):
        """
        Initialize the service.

        Args:
            strategy_registry: Registry used to resolve strategy names
            creator_registry: Registry used to resolve creator names
            config: Application configuration; defaults are used when None
        """
        self._strategy_registry = strategy_registry
        self._creator_registry = creator_registry
        self._config = config or AppConfig()
        self._logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        return self._config

    def execute_strategy(self, data: Iterable[str], strategy_name: Optional[str] = None) -> Dict[str, Any]:
        """Run ``data`` through one named strategy (the configured default when None)."""
        name = self._strategy_registry.normalize_name(strategy_name or self._config.strategy.default)
        items = list(data)
        strategy = self._strategy_registry.create(name)

        context = Context(strategy)
        result = context.execute(items)
        self._logger.debug("Executed strategy %s on %d items", name, len(items))
        return {"strategy": name, "input": items, "result": result}

    def compare_strategies(self, data: Iterable[str]) -> Dict[str, Any]:
        """Run ``data`` through every registered strategy, swapping one Context between runs."""
        items = list(data)
        context = Context()
        results: Dict[str, Any] = {}
        for name in self._strategy_registry.list_names():
            context.set_strategy(self._strategy_registry.create(name))
            results[name] = context.execute(items)
        return {"input": items, "results": results}

    def list_strategies(self) -> Dict[str, Any]:
        return {"strategies": self._strategy_registry.list_names()}

    def run_creator(self, creator_name: Optional[str] = None) -> Dict[str, Any]:
        """Run ``some_operation`` on one named creator (the configured default when None)."""
        name = self._creator_registry.normalize_name(creator_name or self._config.creator.default)
        creator = self._creator_registry.create(name)
        return {"creator": name, "result": creator.some_operation()}

    def list_creators(self) -> Dict[str, Any]:
        return {"creators": self._creator_registry.list_names()}

    def run_facade(self, facade: Optional[Facade] = None) -> Dict[str, Any]:
        """Run the facade operation; a default-constructed Facade is used when None."""
        facade = facade if facade is not None else Facade()
        return {"facade": facade.__class__.__name__, "result": facade.operation()}
