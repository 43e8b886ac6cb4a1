"""Domain ports - abstract interfaces the pattern implementations plug into."""

from .product_port import ProductPort
from .transform_strategy_port import TransformStrategyPort

__all__ = ["ProductPort", "TransformStrategyPort"]
