from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List

from ..board import advance
from ..config import AIWeights, ai_weights, config
from ..types import Difficulty, PlayerId
from .base import BaseStrategy, pick_best
from .features import (
    count_bump_opportunities,
    count_capture_opportunities,
    window_count,
)
from .medium import base_move_score
from .types import MoveOption, StrategyContext


@dataclass(slots=True)
class PositionalStrategy(BaseStrategy):
    """Greedy scoring plus board position: Champion approach, spread and power value."""

    name: ClassVar[str] = "hard"
    difficulty: ClassVar[Difficulty] = Difficulty.HARD

    weights: AIWeights = field(default_factory=lambda: ai_weights)

    def _choose_draft(self, game, player_id: PlayerId, available: List[int]) -> int:
        w = self.weights
        player = game.player(player_id)
        scores: List[float] = []
        for value in available:
            score = value * w.draft_value
            if advance(player.champion.position, value) == player.opponent_home_base:
                score += w.draft_win
            score += count_capture_opportunities(game, player_id, value) * w.draft_capture
            score += count_bump_opportunities(game, player_id, value) * w.draft_bump
            # Taking a small die while others remain hands the opponent the big ones
            if len(available) > 1 and value <= w.low_die_threshold:
                score -= w.low_die_penalty
            scores.append(score)
        return pick_best(scores)

    def _score_move(self, ctx: StrategyContext, move: MoveOption) -> float:
        w = self.weights
        score = base_move_score(move, w)
        target = move.move.target

        if move.is_champion:
            score += (config.TRACK_LENGTH - move.distance_to_goal) * w.champion_approach
            nearby_enemies = window_count(
                ctx.opponent_distribution, target, w.exposure_radius
            )
            if nearby_enemies > 0:
                score -= w.champion_exposure_penalty
        elif window_count(ctx.my_distribution, target, w.spread_radius) == 0:
            score += w.spread_bonus

        if (
            move.target_power is not None
            and ctx.game.board.space(target).controller is not ctx.player_id
        ):
            score += w.power_values.get(
                move.target_power.value, w.default_power_value
            )
        return score
