from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from ..config import ai_config
from ..types import Difficulty, LegalMove, PlayerId
from .base import BaseStrategy
from .registry import create

if TYPE_CHECKING:
    from ..game import Game


@dataclass(slots=True)
class Opponent:
    """A computer-controlled seat with a configured difficulty tier."""

    difficulty: Difficulty | str = ai_config.difficulty
    player_id: PlayerId = PlayerId.AI
    rng_seed: int | None = None
    strategy: BaseStrategy = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.difficulty, Difficulty):
            self.difficulty = Difficulty(self.difficulty.lower())
        kwargs = {"rng_seed": self.rng_seed} if self.difficulty is Difficulty.EASY else {}
        self.strategy = create(self.difficulty, **kwargs)

    def decide_draft(self, game: "Game") -> Optional[int]:
        return self.strategy.decide_draft(game, self.player_id)

    def decide_move(self, game: "Game") -> Optional[LegalMove]:
        return self.strategy.decide_move(game, self.player_id)


def decide_draft(
    game: "Game", difficulty: Difficulty | str, player_id: PlayerId = PlayerId.AI
) -> Optional[int]:
    """Index into the available pool the given tier would draft (read-only)."""
    return create(difficulty).decide_draft(game, player_id)


def decide_move(
    game: "Game", difficulty: Difficulty | str, player_id: PlayerId = PlayerId.AI
) -> Optional[LegalMove]:
    """The (piece, die, target) the given tier would play, or None (read-only)."""
    return create(difficulty).decide_move(game, player_id)
