"""Application bootstrap - wires configuration, logging and the pattern service."""

from __future__ import annotations

from typing import Optional

from src.application.service import PatternApplicationService
from src.config.defaults import LogLevel
from src.config.schemas import AppConfig, LoggingConfig
from src.infrastructure.logging.logger import get_logger, setup_logging
from src.infrastructure.registry import get_creator_registry, get_strategy_registry


class Application:
    """Application context with lazy initialization."""

    def __init__(self, config_path: Optional[str] = None, log_level: Optional[str] = None) -> None:
        """
        Initialize the instance.

        Args:
            config_path: Optional JSON or YAML configuration file
            log_level: Optional log level overriding the configured one
        """
        self.config_path = config_path
        self.log_level = log_level
        self._initialized = False

        # Defer heavy initialization until first use
        self._config_manager = None
        self._app_config: Optional[AppConfig] = None
        self._service: Optional[PatternApplicationService] = None

        # Only create logger immediately (lightweight)
        self.logger = get_logger(__name__)

    def _ensure_config_manager(self):
        """Ensure config manager is created (lazy initialization)."""
        if self._config_manager is None:
            from src.config.manager import get_config_manager

            self._config_manager = get_config_manager(self.config_path)

    def initialize(self) -> bool:
        """
        Initialize configuration, logging and the service.

        Raises:
            ConfigurationError: If the configuration cannot be loaded
        """
        if self._initialized:
            return True

        self._ensure_config_manager()
        self._app_config = self._config_manager.get_typed(AppConfig)

        logging_config = self._config_manager.get_typed(LoggingConfig)
        if self.log_level:
            logging_config = logging_config.model_copy(
                update={"level": LogLevel(self.log_level.upper())}
            )
        setup_logging(logging_config)

        self._service = PatternApplicationService(
            strategy_registry=get_strategy_registry(),
            creator_registry=get_creator_registry(),
            config=self._app_config,
        )

        self._initialized = True
        self.logger.info(
            "Pattern catalog initialized",
            default_strategy=self._app_config.strategy.default,
            default_creator=self._app_config.creator.default,
        )
        return True

    @property
    def config(self) -> AppConfig:
        if not self._initialized:
            raise RuntimeError("Application not initialized")
        return self._app_config

    def get_service(self) -> PatternApplicationService:
        """Get the pattern service, initializing the application on first use."""
        if not self._initialized:
            self.initialize()
        return self._service


def create_application(config_path: Optional[str] = None, log_level: Optional[str] = None) -> Application:
    """Create and initialize an application."""
    app = Application(config_path, log_level=log_level)
    app.initialize()
    return app
