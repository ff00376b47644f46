from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PlayerId(str, Enum):
    PLAYER = "PLAYER"
    AI = "AI"

    @property
    def opponent(self) -> "PlayerId":
        return PlayerId.AI if self is PlayerId.PLAYER else PlayerId.PLAYER


class Phase(str, Enum):
    DRAFT = "DRAFT"
    MOVEMENT = "MOVEMENT"
    NEXUS_CHECK = "NEXUS_CHECK"
    GAME_OVER = "GAME_OVER"


class PieceType(str, Enum):
    CHAMPION = "CHAMPION"
    WARRIOR = "WARRIOR"


class SpaceType(str, Enum):
    NORMAL = "NORMAL"
    HOME_BASE_A = "HOME_BASE_A"  # PLAYER's home
    HOME_BASE_B = "HOME_BASE_B"  # AI's home
    BONUS_POINT = "BONUS_POINT"


class VictoryType(str, Enum):
    CONTROL = "CONTROL"
    ARRIVAL = "ARRIVAL"
    TIEBREAKER = "TIEBREAKER"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(slots=True, frozen=True)
class Victory:
    winner: PlayerId
    victory_type: VictoryType


@dataclass(slots=True)
class Bump:
    piece_id: str
    owner: PlayerId
    from_position: int
    to_position: int


@dataclass(slots=True)
class MoveEvents:
    bumped: Optional[Bump] = None
    bump_blocked: bool = False  # lone enemy Warrior protected by Strength
    captured_position: Optional[int] = None
    previous_controller: Optional[PlayerId] = None
    victory: Optional[Victory] = None


@dataclass(slots=True)
class MoveResult:
    player_id: PlayerId
    piece_id: str
    old_position: int
    new_position: int
    die_value: int
    slot: int
    events: MoveEvents


@dataclass(slots=True, frozen=True)
class LegalMove:
    """A legal (piece, die, target) triple for the current mover."""

    piece_id: str
    die_index: int  # index into the mover's still-available dice
    slot: int  # index into the mover's drafted list
    die_value: int
    target: int


@dataclass(slots=True)
class LogEntry:
    round: int
    phase: Phase
    message: str
