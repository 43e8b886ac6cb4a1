"""Base domain layer - shared kernel for all pattern contexts."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    InvalidStateError,
)
from .ports import ProductPort, TransformStrategyPort

__all__ = [
    # Exceptions
    "DomainException",
    "InvalidStateError",
    "ConfigurationError",
    # Ports
    "ProductPort",
    "TransformStrategyPort",
]
