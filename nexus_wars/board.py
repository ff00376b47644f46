from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional

import numpy as np

from .config import config
from .errors import InvariantViolation
from .piece import Piece
from .powers import POWER_ORDER, NexusPower
from .types import PlayerId, SpaceType

# Tensor channels produced by Board.build_tensor
CH_MINE = 0
CH_ENEMY = 1
CH_BONUS = 2
CH_MY_CONTROL = 3
CH_ENEMY_CONTROL = 4
NUM_CHANNELS = 5


def advance(position: int, steps: int) -> int:
    """Clockwise destination on the track, wrapping past the last space to 1."""
    return (position + steps - 1) % config.TRACK_LENGTH + 1


def distance(from_pos: int, to_pos: int) -> int:
    """Clockwise number of steps from one space to another (0..19)."""
    return (to_pos - from_pos) % config.TRACK_LENGTH


@dataclass(slots=True)
class Space:
    index: int
    space_type: SpaceType
    power: Optional[NexusPower] = None
    controller: Optional[PlayerId] = None
    occupants: List[str] = field(default_factory=list)  # piece ids

    @property
    def is_bonus(self) -> bool:
        return self.space_type is SpaceType.BONUS_POINT


def _build_spaces() -> List[Space]:
    powers = dict(zip(config.NEXUS_POSITIONS, POWER_ORDER))
    spaces: List[Space] = []
    for i in range(1, config.TRACK_LENGTH + 1):
        if i == config.PLAYER_HOME_BASE:
            spaces.append(Space(index=i, space_type=SpaceType.HOME_BASE_A))
        elif i == config.AI_HOME_BASE:
            spaces.append(Space(index=i, space_type=SpaceType.HOME_BASE_B))
        elif i in powers:
            spaces.append(
                Space(index=i, space_type=SpaceType.BONUS_POINT, power=powers[i])
            )
        else:
            spaces.append(Space(index=i, space_type=SpaceType.NORMAL))
    return spaces


@dataclass(slots=True)
class Board:
    """Owns the 20 spaces and piece occupancy (no rule logic)."""

    pieces: Mapping[str, Piece]  # piece id -> piece, for every piece in play
    spaces: List[Space] = field(init=False)

    def __post_init__(self) -> None:
        self.spaces = _build_spaces()
        for pc in self.pieces.values():
            self.space(pc.position).occupants.append(pc.piece_id)

    def space(self, index: int) -> Space:
        if not 1 <= index <= config.TRACK_LENGTH:
            raise IndexError(f"Space {index} is off the track")
        return self.spaces[index - 1]

    def bonus_spaces(self) -> Iterable[Space]:
        return (s for s in self.spaces if s.is_bonus)

    # --- Occupancy ---
    def occupants(self, index: int) -> List[Piece]:
        return [self.pieces[pid] for pid in self.space(index).occupants]

    def enemy_pieces_at(self, index: int, player_id: PlayerId) -> List[Piece]:
        return [p for p in self.occupants(index) if p.owner is not player_id]

    def count_within(self, position: int, owner: PlayerId, radius: int) -> int:
        """Pieces of ``owner`` on the ``radius`` spaces clockwise ahead of position."""
        total = 0
        for step in range(1, radius + 1):
            total += sum(
                1 for p in self.occupants(advance(position, step)) if p.owner is owner
            )
        return total

    def remove(self, piece: Piece) -> None:
        occupants = self.space(piece.position).occupants
        if piece.piece_id not in occupants:
            raise InvariantViolation(
                f"{piece.piece_id} missing from space {piece.position}"
            )
        occupants.remove(piece.piece_id)

    def place(self, piece: Piece) -> None:
        self.space(piece.position).occupants.append(piece.piece_id)

    def relocate(self, piece: Piece, new_position: int) -> None:
        """Move a piece between spaces without touching its traveled distance."""
        self.remove(piece)
        piece.position = new_position
        self.place(piece)

    def check_occupancy(self) -> None:
        seen: dict[str, int] = {}
        for space in self.spaces:
            for pid in space.occupants:
                if pid in seen:
                    raise InvariantViolation(f"{pid} listed on two spaces")
                seen[pid] = space.index
        for pid, pc in self.pieces.items():
            if seen.get(pid) != pc.position:
                raise InvariantViolation(
                    f"{pid} at {pc.position} but listed on {seen.get(pid)}"
                )

    # --- Control ---
    def count_controlled(self, player_id: PlayerId) -> int:
        return sum(1 for s in self.bonus_spaces() if s.controller is player_id)

    def controls(self, player_id: PlayerId, power: NexusPower) -> bool:
        return any(
            s.power is power and s.controller is player_id for s in self.bonus_spaces()
        )

    # --- Feature tensor ---
    def build_tensor(self, player_id: PlayerId) -> np.ndarray:
        """Build a (NUM_CHANNELS, TRACK_LENGTH + 1) view of the board.

        Column ``i`` is space ``i``; column 0 is unused so positions index
        directly.

        Channels:
        0: Own piece counts
        1: Enemy piece counts
        2: Bonus point spaces
        3: Bonus points controlled by player_id
        4: Bonus points controlled by the opponent
        """
        board = np.zeros((NUM_CHANNELS, config.TRACK_LENGTH + 1), dtype=np.float32)
        for pc in self.pieces.values():
            ch = CH_MINE if pc.owner is player_id else CH_ENEMY
            board[ch, pc.position] += 1.0
        for s in self.bonus_spaces():
            board[CH_BONUS, s.index] = 1.0
            if s.controller is player_id:
                board[CH_MY_CONTROL, s.index] = 1.0
            elif s.controller is not None:
                board[CH_ENEMY_CONTROL, s.index] = 1.0
        return board
