from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

import numpy as np

from ..board import CH_ENEMY, CH_MINE
from ..powers import NexusPower
from ..types import LegalMove, PieceType, PlayerId

if TYPE_CHECKING:
    from ..game import Game


@dataclass(slots=True)
class MoveOption:
    """Structured metadata about a legal move."""

    move: LegalMove
    piece_type: PieceType
    current_pos: int
    wins: bool  # Champion lands on the opponent's home base
    captures: bool  # Warrior takes a bonus point it does not control
    completes_control: bool  # the capture would be the winning bonus point
    bumps: bool  # exactly one enemy piece will be sent home
    bumps_champion: bool
    target_power: Optional[NexusPower]
    distance_to_goal: int  # Champion distance to opponent home after the move

    @property
    def is_champion(self) -> bool:
        return self.piece_type is PieceType.CHAMPION


@dataclass(slots=True)
class StrategyContext:
    """Input payload shared by the opponent strategies."""

    game: "Game"
    player_id: PlayerId
    board: np.ndarray  # shape (channels, track_length + 1)
    moves: List[MoveOption]

    @property
    def my_distribution(self) -> np.ndarray:
        return self.board[CH_MINE]

    @property
    def opponent_distribution(self) -> np.ndarray:
        return self.board[CH_ENEMY]
