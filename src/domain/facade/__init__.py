"""Facade subsystems."""

from .subsystems import Subsystem1, Subsystem2

__all__ = ["Subsystem1", "Subsystem2"]
