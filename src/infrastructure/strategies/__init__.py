"""Concrete transform strategies."""

from .reverse_strategy import ReverseStrategy
from .sort_strategy import SortAscendingStrategy

__all__ = ["ReverseStrategy", "SortAscendingStrategy"]
