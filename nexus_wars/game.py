from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional

from loguru import logger

from .board import Board
from .config import config
from .dice import DiceSource, DraftState, MovementState
from .piece import Piece
from .player import Player, create_players
from .powers import NexusPower
from .types import LogEntry, Phase, PlayerId, Victory


@dataclass(slots=True)
class Game:
    """Complete state of one match. Mutated only through ``nexus_wars.engine``."""

    max_rounds: int = config.MAX_ROUNDS
    dice: DiceSource = field(default_factory=DiceSource)
    round: int = field(default=1, init=False)
    phase: Phase = field(default=Phase.DRAFT, init=False)
    first_mover: PlayerId = field(default=PlayerId.PLAYER, init=False)
    players: Dict[PlayerId, Player] = field(init=False)
    board: Board = field(init=False)
    draft: DraftState = field(default_factory=DraftState, init=False)
    movement: MovementState = field(default_factory=MovementState, init=False)
    victory: Optional[Victory] = field(default=None, init=False)
    log: Deque[LogEntry] = field(init=False)

    def __post_init__(self) -> None:
        self.players = create_players()
        self.board = Board(pieces={p.piece_id: p for p in self.all_pieces()})
        self.log = deque(maxlen=config.LOG_CAPACITY)

    # --- Lookups ---
    def player(self, player_id: PlayerId) -> Player:
        return self.players[player_id]

    def opponent(self, player_id: PlayerId) -> Player:
        return self.players[player_id.opponent]

    def all_pieces(self) -> List[Piece]:
        return [pc for pl in self.players.values() for pc in pl.pieces]

    @property
    def second_mover(self) -> PlayerId:
        return self.first_mover.opponent

    @property
    def winner(self) -> Optional[PlayerId]:
        return self.victory.winner if self.victory else None

    def draft_quota(self, player_id: PlayerId) -> int:
        if player_id is self.first_mover:
            return config.FIRST_MOVER_DRAFT
        return config.SECOND_MOVER_DRAFT

    # --- Dice bookkeeping ---
    def available_slots(self, player_id: PlayerId) -> List[int]:
        """Slot indices of the player's drafted dice not yet used this round."""
        used = self.movement.used_slots[player_id]
        return [
            i for i in range(len(self.draft.drafted[player_id])) if i not in used
        ]

    def available_dice(self, player_id: PlayerId) -> List[int]:
        drafted = self.draft.drafted[player_id]
        return [drafted[i] for i in self.available_slots(player_id)]

    @property
    def selected_die(self) -> Optional[int]:
        slot = self.movement.selected_slot
        if slot is None or self.movement.mover is None:
            return None
        return self.draft.drafted[self.movement.mover][slot]

    # --- Control ---
    def player_controls(self, player_id: PlayerId, power: NexusPower) -> bool:
        return self.board.controls(player_id, power)

    def recompute_control(self) -> None:
        for pid, pl in self.players.items():
            pl.controlled_count = self.board.count_controlled(pid)

    # --- Log ---
    def add_log(self, message: str) -> None:
        self.log.append(LogEntry(round=self.round, phase=self.phase, message=message))
        logger.debug(f"[round {self.round} {self.phase.value}] {message}")

    def log_messages(self) -> List[str]:
        return [entry.message for entry in self.log]
