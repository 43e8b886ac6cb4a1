import logging
import os
import pytest
from unittest.mock import patch
from src.application.service import PatternApplicationService
from src.config.defaults import ENV_PREFIX
from src.config.manager import reset_config_manager
from src.config.schemas import AppConfig
from src.infrastructure.logging.logger import DetailedFormatter
from src.infrastructure.registry.creator_registry import CreatorRegistry
from src.infrastructure.registry.strategy_registry import StrategyRegistry

SAMPLE_SEQUENCES = [
    [],
    ["a"],
    ["a", "b", "c", "d", "e"],
    ["e", "d", "c", "b", "a"],
    ["pear", "apple", "fig", "apple"],
    ["B", "a", "C", "b"],
    ["10", "9", "100", "1"],
    ["", "z", "", "y"],
]

@pytest.fixture(autouse=True)
def clean_environment():
    """Drop PATTERNS_* overrides and the cached configuration manager around each test."""
    env = {k: v for k, v in os.environ.items() if not k.startswith(ENV_PREFIX)}
    with patch.dict(os.environ, env, clear=True):
        reset_config_manager()
        yield
        reset_config_manager()

@pytest.fixture
def strategy_registry():
    return StrategyRegistry()

@pytest.fixture
def creator_registry():
    return CreatorRegistry()

@pytest.fixture
def pattern_service(strategy_registry, creator_registry):
    return PatternApplicationService(
        strategy_registry=strategy_registry,
        creator_registry=creator_registry,
        config=AppConfig(),
    )

@pytest.fixture
def restore_root_logger():
    """Drop handlers installed by setup_logging and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, DetailedFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
