from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List

from ..config import AIWeights, ai_weights, config
from ..types import Difficulty, PlayerId
from .base import BaseStrategy
from .features import champion_distance
from .types import MoveOption, StrategyContext


def base_move_score(move: MoveOption, weights: AIWeights) -> float:
    """Immediate value of a move: win, capture, bump, then raw progress."""
    if move.wins:
        return weights.instant_win

    score = 0.0
    if move.captures:
        score += weights.capture
        if move.completes_control:
            score += weights.fifth_capture

    if move.bumps:
        score += weights.bump
        if move.bumps_champion:
            score += weights.bump_champion

    step = weights.champion_step if move.is_champion else weights.warrior_step
    score += move.move.die_value * step
    return score


@dataclass(slots=True)
class GreedyStrategy(BaseStrategy):
    """Takes the best immediate gain; drafts for a Champion finish or raw size."""

    name: ClassVar[str] = "medium"
    difficulty: ClassVar[Difficulty] = Difficulty.MEDIUM

    weights: AIWeights = field(default_factory=lambda: ai_weights)

    def _choose_draft(self, game, player_id: PlayerId, available: List[int]) -> int:
        to_win = champion_distance(game, player_id)
        if 0 < to_win <= config.DICE_MAX and to_win in available:
            return available.index(to_win)
        best = max(available)
        return available.index(best)

    def _score_move(self, ctx: StrategyContext, move: MoveOption) -> float:
        return base_move_score(move, self.weights)
