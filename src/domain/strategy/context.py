# src/domain/strategy/context.py
import logging
from typing import Iterable, List, Optional

from src.domain.base.exceptions import InvalidStateError
from src.domain.base.ports.transform_strategy_port import TransformStrategyPort


class Context:
    """Holds one active transform strategy and delegates to it.

    The strategy can be replaced at any time; the Context does not know
    which concrete algorithm it is running.
    """

    def __init__(self, strategy: Optional[TransformStrategyPort] = None):
        self._strategy = strategy
        self._logger = logging.getLogger(__name__)

    @property
    def strategy(self) -> Optional[TransformStrategyPort]:
        """The active strategy, or None before one is set."""
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: TransformStrategyPort) -> None:
        self.set_strategy(strategy)

    @property
    def has_strategy(self) -> bool:
        return self._strategy is not None

    def set_strategy(self, strategy: TransformStrategyPort) -> None:
        """Replace the active strategy."""
        previous = self._strategy
        self._strategy = strategy
        self._logger.debug("Context strategy changed from %r to %r", previous, strategy)

    def execute(self, data: Iterable[str]) -> List[str]:
        """
        Run the active strategy over ``data``.

        Args:
            data: Sequence of strings to transform

        Returns:
            The strategy's result, a new list

        Raises:
            InvalidStateError: If no strategy has been set
        """
        if self._strategy is None:
            raise InvalidStateError("Context has no active strategy; call set_strategy() first")

        self._logger.debug("Context executing %r", self._strategy)
        return self._strategy.transform(data)
