"""
Nexus Wars
Rules engine and heuristic opponent for a two-player dice-drafting race on a
20-space circular track.
"""

from nexus_wars.board import Board, Space
from nexus_wars.config import ai_config, ai_weights, config
from nexus_wars.engine import (
    all_legal_moves,
    available_movement_dice,
    check_victory,
    controlled_count,
    create_game,
    current_phase,
    draft,
    legal_targets,
    log_messages,
    move,
    resolve_tiebreaker,
    select_die,
    start_round,
    tiebreaker_scores,
    visible_dice,
    winner,
)
from nexus_wars.errors import (
    IllegalTarget,
    IndexOutOfRange,
    InvalidPhase,
    InvariantViolation,
    NexusWarsError,
    NoDieSelected,
    WrongTurn,
)
from nexus_wars.game import Game
from nexus_wars.piece import Piece
from nexus_wars.player import Player
from nexus_wars.powers import NexusPower
from nexus_wars.types import (
    Difficulty,
    LegalMove,
    MoveResult,
    Phase,
    PieceType,
    PlayerId,
    SpaceType,
    Victory,
    VictoryType,
)

__all__ = [
    "Board",
    "Space",
    "Game",
    "Piece",
    "Player",
    "NexusPower",
    "Difficulty",
    "LegalMove",
    "MoveResult",
    "Phase",
    "PieceType",
    "PlayerId",
    "SpaceType",
    "Victory",
    "VictoryType",
    "NexusWarsError",
    "InvalidPhase",
    "WrongTurn",
    "IndexOutOfRange",
    "IllegalTarget",
    "NoDieSelected",
    "InvariantViolation",
    "create_game",
    "start_round",
    "draft",
    "select_die",
    "move",
    "legal_targets",
    "all_legal_moves",
    "available_movement_dice",
    "check_victory",
    "tiebreaker_scores",
    "resolve_tiebreaker",
    "current_phase",
    "log_messages",
    "controlled_count",
    "winner",
    "visible_dice",
    "config",
    "ai_config",
    "ai_weights",
]
