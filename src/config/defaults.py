# src/config/defaults.py
from enum import Enum
from typing import Any, Dict


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


ENV_PREFIX = "PATTERNS_"

DEFAULT_CONFIG: Dict[str, Any] = {
    # Logging configuration
    "logging": {
        "level": "${PATTERNS_LOG_LEVEL:WARNING}",
        "destination": "stdout",
        "file_path": "${PATTERNS_LOG_DIR:logs}/pattern-catalog.log",
        "max_size_mb": 10,
        "backup_count": 5,
        "format": "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
    },

    # Strategy selection
    "strategy": {
        "default": "sort",
    },

    # Factory method selection
    "creator": {
        "default": "creator1",
    },
}

# Environment variable -> (section, key) overrides applied after file loading
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}LOG_FILE": ("logging", "file_path"),
    f"{ENV_PREFIX}DEFAULT_STRATEGY": ("strategy", "default"),
    f"{ENV_PREFIX}DEFAULT_CREATOR": ("creator", "default"),
}
