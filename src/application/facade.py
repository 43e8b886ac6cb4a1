"""Facade offering one entry point over the two subsystems."""

import logging
from typing import Optional

from src.domain.facade.subsystems import Subsystem1, Subsystem2


class Facade:
    """
    Sequences calls across ``Subsystem1`` and ``Subsystem2``.

    Subsystems not supplied by the caller are created here and owned by the
    facade; supplied ones are only referenced and never modified.
    """

    def __init__(
        self,
        subsystem1: Optional[Subsystem1] = None,
        subsystem2: Optional[Subsystem2] = None,
    ) -> None:
        self._owns_subsystem1 = subsystem1 is None
        self._owns_subsystem2 = subsystem2 is None
        self._subsystem1 = subsystem1 if subsystem1 is not None else Subsystem1()
        self._subsystem2 = subsystem2 if subsystem2 is not None else Subsystem2()
        self._logger = logging.getLogger(__name__)

    @property
    def subsystem1(self) -> Subsystem1:
        return self._subsystem1

    @property
    def subsystem2(self) -> Subsystem2:
        return self._subsystem2

    @property
    def owns_subsystem1(self) -> bool:
        return self._owns_subsystem1

    @property
    def owns_subsystem2(self) -> bool:
        return self._owns_subsystem2

    def operation(self) -> str:
        """Initialize both subsystems, then have them act, and return the combined report."""
        self._logger.debug("Facade initializing subsystems")
        results = ["Facade initializes subsystems:\n"]
        results.append(self._subsystem1.operation1())
        results.append(self._subsystem2.operation1())

        self._logger.debug("Facade ordering subsystems to act")
        results.append("Facade orders subsystems to perform the action:\n")
        results.append(self._subsystem1.operation_n())
        results.append(self._subsystem2.operation_z())
        return "".join(results)
