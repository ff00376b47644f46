from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, List, Optional

import numpy as np
from loguru import logger

from ..types import Difficulty, LegalMove, PlayerId
from .features import build_move_options
from .types import MoveOption, StrategyContext

if TYPE_CHECKING:
    from ..game import Game


def pick_best(scores: List[float]) -> int:
    """Index of the strictly highest score; the first one found wins ties."""
    return int(np.argmax(np.asarray(scores, dtype=np.float64)))


class BaseStrategy:
    """Base class for opponent tiers with shared draft and move selection.

    Strategies are read-only with respect to the game: they only inspect it
    and return a decision for the caller to submit to the engine.
    """

    name: ClassVar[str] = "base"
    difficulty: ClassVar[Difficulty]

    def decide_draft(
        self, game: "Game", player_id: PlayerId = PlayerId.AI
    ) -> Optional[int]:
        available = list(game.draft.available)
        if not available:
            return None
        index = self._choose_draft(game, player_id, available)
        logger.debug(
            f"{self.name} drafts index {index} (value {available[index]}) from {available}"
        )
        return index

    def decide_move(
        self, game: "Game", player_id: PlayerId = PlayerId.AI
    ) -> Optional[LegalMove]:
        ctx = build_move_options(game, player_id)
        option = self.select_move(ctx)
        if option is None:
            return None
        logger.debug(f"{self.name} moves {option.move}")
        return option.move

    def select_move(self, ctx: StrategyContext) -> Optional[MoveOption]:
        if not ctx.moves:
            return None
        scores = [self._score_move(ctx, move) for move in ctx.moves]
        return ctx.moves[pick_best(scores)]

    def _choose_draft(
        self, game: "Game", player_id: PlayerId, available: List[int]
    ) -> int:  # pragma: no cover - abstract
        raise NotImplementedError

    def _score_move(
        self, ctx: StrategyContext, move: MoveOption
    ) -> float:  # pragma: no cover - abstract
        raise NotImplementedError
