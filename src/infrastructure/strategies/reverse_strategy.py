"""Order-reversing strategy."""

from typing import Iterable, List

from src.domain.base.ports.transform_strategy_port import TransformStrategyPort


class ReverseStrategy(TransformStrategyPort):
    """Returns the input back-to-front.

    This reverses the given order; it does not sort first.
    """

    name = "reverse"

    def transform(self, data: Iterable[str]) -> List[str]:
        items = list(data)
        items.reverse()
        return items
