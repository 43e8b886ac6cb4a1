"""
Domain Layer

This domain layer is organized by pattern context:
- base/: Shared kernel with exceptions and ports
- strategy/: Context delegating to a swappable transform strategy
- creator/: Creator hierarchy built around a factory method
- facade/: Independent subsystems coordinated by the application Facade

The pattern contexts are imported from their own packages; this module only
re-exports the shared kernel.
"""

from .base import (
    ConfigurationError,
    DomainException,
    InvalidStateError,
    ProductPort,
    TransformStrategyPort,
)

__all__ = [
    "DomainException",
    "InvalidStateError",
    "ConfigurationError",
    "ProductPort",
    "TransformStrategyPort",
]
