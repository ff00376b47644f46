"""Heuristic opponent tiers for Nexus Wars."""

from .base import BaseStrategy
from .easy import RandomStrategy
from .features import build_move_options
from .hard import PositionalStrategy
from .medium import GreedyStrategy, base_move_score
from .opponent import Opponent, decide_draft, decide_move
from .registry import available, create
from .types import MoveOption, StrategyContext

__all__ = [
    "BaseStrategy",
    "RandomStrategy",
    "GreedyStrategy",
    "PositionalStrategy",
    "MoveOption",
    "StrategyContext",
    "Opponent",
    "available",
    "base_move_score",
    "build_move_options",
    "create",
    "decide_draft",
    "decide_move",
]
