"""Strategy context - runtime-swappable sequence transformations."""

from .context import Context

__all__ = ["Context"]
