"""Ascending lexicographic sort strategy."""

from typing import Iterable, List

from src.domain.base.ports.transform_strategy_port import TransformStrategyPort


class SortAscendingStrategy(TransformStrategyPort):
    """Returns the input sorted ascending; the input itself is left as is."""

    name = "sort"

    def transform(self, data: Iterable[str]) -> List[str]:
        return sorted(data)
