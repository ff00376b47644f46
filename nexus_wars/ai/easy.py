from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional

from ..types import Difficulty, PlayerId
from .base import BaseStrategy
from .types import MoveOption, StrategyContext


@dataclass(slots=True)
class RandomStrategy(BaseStrategy):
    """Uniformly random drafts and moves. The only tier that consumes randomness."""

    name: ClassVar[str] = "easy"
    difficulty: ClassVar[Difficulty] = Difficulty.EASY

    rng_seed: int | None = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.rng_seed)

    def _choose_draft(self, game, player_id: PlayerId, available: List[int]) -> int:
        return self.rng.randrange(len(available))

    def select_move(self, ctx: StrategyContext) -> Optional[MoveOption]:
        if not ctx.moves:
            return None
        return self.rng.choice(ctx.moves)
