from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import numpy as np

from ..board import advance, distance
from ..config import config
from ..engine import all_legal_moves, legal_targets
from ..piece import Piece
from ..powers import NexusPower
from ..types import LegalMove, PieceType, PlayerId
from .types import MoveOption, StrategyContext

if TYPE_CHECKING:  # avoid runtime import to prevent circular deps
    from ..game import Game


def window_count(channel: np.ndarray, position: int, radius: int) -> float:
    """Sum of ``channel`` over the ``radius`` spaces clockwise ahead of position."""
    if radius <= 0:
        return 0.0
    idx = [advance(position, step) for step in range(1, radius + 1)]
    return float(channel[idx].sum())


def champion_distance(game: "Game", player_id: PlayerId) -> int:
    player = game.player(player_id)
    return distance(player.champion.position, player.opponent_home_base)


def bump_victim(game: "Game", piece: Piece, target: int) -> Optional[Piece]:
    """The enemy piece a move onto ``target`` would send home, if any."""
    enemies = game.board.enemy_pieces_at(target, piece.owner)
    if len(enemies) != 1:
        return None
    victim = enemies[0]
    if victim.piece_type is PieceType.WARRIOR and game.player_controls(
        victim.owner, NexusPower.STRENGTH
    ):
        return None
    return victim


def captures_bonus(game: "Game", piece: Piece, target: int) -> bool:
    space = game.board.space(target)
    return (
        space.is_bonus
        and piece.piece_type is PieceType.WARRIOR
        and space.controller is not piece.owner
    )


def count_capture_opportunities(game: "Game", player_id: PlayerId, value: int) -> int:
    """Warriors that could legally capture a bonus point with a die of ``value``."""
    count = 0
    for piece in game.player(player_id).warriors:
        for target in legal_targets(game, player_id, piece.piece_id, value):
            if captures_bonus(game, piece, target):
                count += 1
    return count


def count_bump_opportunities(game: "Game", player_id: PlayerId, value: int) -> int:
    """Pieces that could legally bump a lone enemy with a die of ``value``."""
    count = 0
    for piece in game.player(player_id).pieces:
        for target in legal_targets(game, player_id, piece.piece_id, value):
            if bump_victim(game, piece, target) is not None:
                count += 1
    return count


def _create_move_option(game: "Game", player_id: PlayerId, mv: LegalMove) -> MoveOption:
    player = game.player(player_id)
    piece = player.piece(mv.piece_id)
    victim = bump_victim(game, piece, mv.target)
    captures = captures_bonus(game, piece, mv.target)
    return MoveOption(
        move=mv,
        piece_type=piece.piece_type,
        current_pos=piece.position,
        wins=piece.is_champion and mv.target == player.opponent_home_base,
        captures=captures,
        completes_control=captures
        and player.controlled_count == config.CONTROL_TO_WIN - 1,
        bumps=victim is not None,
        bumps_champion=victim is not None and victim.is_champion,
        target_power=game.board.space(mv.target).power,
        distance_to_goal=distance(mv.target, player.opponent_home_base),
    )


def build_move_options(game: "Game", player_id: PlayerId) -> StrategyContext:
    """Enumerate the player's legal moves into a strategy context."""
    moves: List[MoveOption] = [
        _create_move_option(game, player_id, mv)
        for mv in all_legal_moves(game, player_id)
    ]
    return StrategyContext(
        game=game,
        player_id=player_id,
        board=game.board.build_tensor(player_id),
        moves=moves,
    )
