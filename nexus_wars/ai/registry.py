from __future__ import annotations

from typing import Dict, Type

from ..types import Difficulty
from .base import BaseStrategy
from .easy import RandomStrategy
from .hard import PositionalStrategy
from .medium import GreedyStrategy

STRATEGY_REGISTRY: Dict[str, Type[BaseStrategy]] = {
    RandomStrategy.name: RandomStrategy,
    GreedyStrategy.name: GreedyStrategy,
    PositionalStrategy.name: PositionalStrategy,
}


def create(difficulty: str | Difficulty, **kwargs) -> BaseStrategy:
    key = difficulty.value if isinstance(difficulty, Difficulty) else str(difficulty)
    cls = STRATEGY_REGISTRY.get(key.lower())
    if cls is None:
        raise KeyError(
            f"Unknown difficulty '{difficulty}'. Available: {list(STRATEGY_REGISTRY)}"
        )
    return cls(**kwargs)


def available() -> Dict[str, Type[BaseStrategy]]:
    return dict(STRATEGY_REGISTRY)
