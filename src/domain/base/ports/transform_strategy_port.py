"""Domain port for interchangeable sequence transformations."""

from abc import ABC, abstractmethod
from typing import Iterable, List


class TransformStrategyPort(ABC):
    """Algorithm a Context delegates to.

    Implementations must return a new list holding a permutation of the
    input and must leave the input untouched.
    """

    name: str = ""

    @abstractmethod
    def transform(self, data: Iterable[str]) -> List[str]:
        """Return a reordered copy of ``data``."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
