"""Rules engine: the DRAFT -> MOVEMENT -> NEXUS_CHECK state machine.

Every mutating entry point validates completely before changing anything and
raises a :class:`~nexus_wars.errors.NexusWarsError` subclass on rejection, so
a failed call leaves the game untouched. Callers must serialize calls.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from loguru import logger

from .board import advance
from .config import config
from .dice import DiceSource
from .errors import (
    IllegalTarget,
    IndexOutOfRange,
    InvalidPhase,
    NoDieSelected,
    WrongTurn,
)
from .game import Game
from .piece import Piece
from .player import Player
from .powers import NexusPower
from .types import (
    Bump,
    LegalMove,
    MoveEvents,
    MoveResult,
    Phase,
    PieceType,
    PlayerId,
    Victory,
    VictoryType,
)


# --- Game lifecycle ---
def create_game(max_rounds: int | None = None, seed: int | None = None) -> Game:
    """Build a fresh game: pieces on home bases, round 1, dice rolled, DRAFT."""
    game = Game(
        max_rounds=max_rounds if max_rounds is not None else config.MAX_ROUNDS,
        dice=DiceSource(seed=seed),
    )
    game.add_log("New game started!")
    start_round(game)
    return game


def start_round(game: Game) -> None:
    """Roll the round's dice and reset all round-scoped state."""
    game.phase = Phase.DRAFT
    game.movement.reset()

    first = game.player(game.first_mover)
    game.add_log(f"Round {game.round} begins!")

    count = config.DICE_PER_ROUND
    if game.player_controls(first.player_id, NexusPower.SPEED):
        count += config.SPEED_EXTRA_DICE
        game.add_log(f"{first.name} has Nexus of Speed - rolling {count} dice!")

    rolled = game.dice.roll_many(count)
    game.draft.reset(rolled, game.first_mover)
    game.add_log(f"{first.name} rolled: [{', '.join(str(d) for d in rolled)}]")


# --- Draft ---
def draft(game: Game, player_id: PlayerId, die_index: int) -> int:
    """Claim ``available[die_index]`` for ``player_id``. Returns the die value."""
    if game.phase is not Phase.DRAFT:
        raise InvalidPhase(f"Cannot draft during {game.phase.value}")
    if game.draft.drafter is not player_id:
        raise WrongTurn(f"Not {player_id.value}'s turn to draft")
    if not 0 <= die_index < len(game.draft.available):
        raise IndexOutOfRange(
            f"Die index {die_index} outside 0..{len(game.draft.available) - 1}"
        )

    value = game.draft.take(player_id, die_index)
    game.add_log(f"{game.player(player_id).name} drafted a {value}")

    drafted = game.draft.drafted
    if len(drafted[game.first_mover]) == game.draft_quota(game.first_mover) and len(
        drafted[game.second_mover]
    ) == game.draft_quota(game.second_mover):
        game.draft.complete = True
        game.draft.drafter = None
        _start_movement(game)
        return value

    other = player_id.opponent
    if len(drafted[other]) < game.draft_quota(other):
        game.draft.drafter = other
    return value


def _start_movement(game: Game) -> None:
    game.phase = Phase.MOVEMENT
    game.movement.mover = game.first_mover
    game.movement.complete = False
    game.add_log("Movement phase begins!")
    _skip_blocked_movers(game)


# --- Movement ---
def select_die(game: Game, player_id: PlayerId, die_index: int) -> int:
    """Select one of the player's still-unused dice. Returns its value."""
    if game.phase is not Phase.MOVEMENT:
        raise InvalidPhase(f"Cannot select a die during {game.phase.value}")
    if game.movement.mover is not player_id:
        raise WrongTurn(f"Not {player_id.value}'s turn to move")
    slots = game.available_slots(player_id)
    if not 0 <= die_index < len(slots):
        raise IndexOutOfRange(f"Die index {die_index} outside 0..{len(slots) - 1}")

    game.movement.selected_slot = slots[die_index]
    return game.draft.drafted[player_id][slots[die_index]]


def _find_piece(game: Game, player_id: PlayerId, piece_id: str) -> Piece:
    piece = game.player(player_id).piece(piece_id)
    if piece is None:
        raise IndexOutOfRange(f"{player_id.value} has no piece '{piece_id}'")
    return piece


def _targets_for(game: Game, piece: Piece, die_value: int) -> Set[int]:
    target = advance(piece.position, die_value)
    enemies = game.board.enemy_pieces_at(target, piece.owner)
    # Occupied enemy spaces only accept an exact-count landing
    if enemies and len(enemies) != die_value:
        return set()
    return {target}


def legal_targets(
    game: Game, player_id: PlayerId, piece_id: str, die_value: int
) -> Set[int]:
    """Positions ``piece_id`` may legally reach with ``die_value`` (read-only)."""
    piece = _find_piece(game, player_id, piece_id)
    if not config.DICE_MIN <= die_value <= config.DICE_MAX:
        return set()
    return _targets_for(game, piece, die_value)


def all_legal_moves(game: Game, player_id: PlayerId) -> List[LegalMove]:
    """Every legal (piece, die, target) triple using the player's unused dice.

    Ordered by die (drafted order) and then by piece (Champion first).
    """
    moves: List[LegalMove] = []
    drafted = game.draft.drafted[player_id]
    for die_index, slot in enumerate(game.available_slots(player_id)):
        value = drafted[slot]
        for piece in game.player(player_id).pieces:
            for target in sorted(_targets_for(game, piece, value)):
                moves.append(
                    LegalMove(
                        piece_id=piece.piece_id,
                        die_index=die_index,
                        slot=slot,
                        die_value=value,
                        target=target,
                    )
                )
    return moves


def move(game: Game, player_id: PlayerId, piece_id: str, target: int) -> MoveResult:
    """Move a piece with the selected die and advance the turn."""
    if game.phase is not Phase.MOVEMENT:
        raise InvalidPhase(f"Cannot move during {game.phase.value}")
    if game.movement.mover is not player_id:
        raise WrongTurn(f"Not {player_id.value}'s turn to move")
    piece = _find_piece(game, player_id, piece_id)
    slot = game.movement.selected_slot
    if slot is None:
        raise NoDieSelected("Select a die before moving")
    die_value = game.draft.drafted[player_id][slot]
    if target not in _targets_for(game, piece, die_value):
        raise IllegalTarget(
            f"{piece_id} cannot reach space {target} with a {die_value}"
        )

    old_position = piece.position
    events = _apply_move(game, game.player(player_id), piece, target, die_value)
    game.movement.used_slots[player_id].append(slot)
    game.movement.selected_slot = None

    result = MoveResult(
        player_id=player_id,
        piece_id=piece_id,
        old_position=old_position,
        new_position=piece.position,
        die_value=die_value,
        slot=slot,
        events=events,
    )

    if piece.is_champion and game.player(player_id).champion_arrived():
        events.victory = Victory(player_id, VictoryType.ARRIVAL)
        _declare_winner(game, events.victory)
    elif _all_dice_used(game):
        _run_nexus_check(game)
    else:
        _advance_turn(game, player_id)
    return result


def _apply_move(
    game: Game, player: Player, piece: Piece, target: int, die_value: int
) -> MoveEvents:
    events = MoveEvents()
    board = game.board

    board.remove(piece)

    enemies = board.enemy_pieces_at(target, player.player_id)
    if len(enemies) == 1:
        victim = enemies[0]
        if victim.piece_type is PieceType.WARRIOR and game.player_controls(
            victim.owner, NexusPower.STRENGTH
        ):
            events.bump_blocked = True
            game.add_log(
                f"{game.player(victim.owner).name}'s Warrior holds firm (Nexus of Strength)"
            )
        else:
            home = game.player(victim.owner).home_base
            events.bumped = Bump(
                piece_id=victim.piece_id,
                owner=victim.owner,
                from_position=victim.position,
                to_position=home,
            )
            board.relocate(victim, home)
            victim.send_home(home)
            game.add_log(f"{player.name} bumped {victim.piece_type.value} back to home!")

    piece.move_to(target, die_value)
    board.place(piece)

    space = board.space(target)
    if (
        space.is_bonus
        and piece.piece_type is PieceType.WARRIOR
        and space.controller is not player.player_id
    ):
        events.previous_controller = space.controller
        events.captured_position = target
        space.controller = player.player_id
        game.recompute_control()
        game.add_log(f"{player.name} captured {space.power.value} Nexus!")

    game.add_log(f"{player.name} moved {piece.piece_type.value} to space {target}")
    return events


def _all_dice_used(game: Game) -> bool:
    return all(not game.available_slots(pid) for pid in PlayerId)


def _advance_turn(game: Game, just_moved: PlayerId) -> None:
    other = just_moved.opponent
    game.movement.mover = other if game.available_slots(other) else just_moved
    _skip_blocked_movers(game)


def _skip_blocked_movers(game: Game) -> None:
    """Forfeit the dice of a mover with no legal move, until someone can move."""
    while game.phase is Phase.MOVEMENT:
        mover = game.movement.mover
        if all_legal_moves(game, mover):
            return
        forfeited = game.available_slots(mover)
        game.movement.used_slots[mover].extend(forfeited)
        game.add_log(
            f"{game.player(mover).name} has no legal move - "
            f"forfeits {len(forfeited)} {'die' if len(forfeited) == 1 else 'dice'}"
        )
        if _all_dice_used(game):
            _run_nexus_check(game)
            return
        game.movement.mover = mover.opponent


# --- Nexus check / victory ---
def check_victory(game: Game) -> Optional[Victory]:
    """Control victory first, then Champion arrival, in seat order."""
    for pid, pl in game.players.items():
        if pl.controlled_count >= config.CONTROL_TO_WIN:
            return Victory(pid, VictoryType.CONTROL)
    for pid, pl in game.players.items():
        if pl.champion_arrived():
            return Victory(pid, VictoryType.ARRIVAL)
    return None


def tiebreaker_scores(game: Game) -> Dict[PlayerId, int]:
    return {
        pid: config.TIEBREAK_CONTROL_WEIGHT * pl.controlled_count
        + pl.champion.traveled
        for pid, pl in game.players.items()
    }


def resolve_tiebreaker(game: Game) -> PlayerId:
    """Highest score wins; equal scores go to the earlier seat (PLAYER)."""
    scores = tiebreaker_scores(game)
    ranked = sorted(PlayerId, key=lambda pid: -scores[pid])
    return ranked[0]


def _run_nexus_check(game: Game) -> None:
    game.phase = Phase.NEXUS_CHECK
    game.movement.complete = True
    game.movement.mover = None
    game.movement.selected_slot = None
    game.recompute_control()

    victory = check_victory(game)
    if victory is not None:
        _declare_winner(game, victory)
        return

    if game.round >= game.max_rounds:
        scores = tiebreaker_scores(game)
        logger.info(f"Round cap reached, tiebreaker scores: {scores}")
        _declare_winner(game, Victory(resolve_tiebreaker(game), VictoryType.TIEBREAKER))
        return

    game.round += 1
    game.first_mover = game.first_mover.opponent
    start_round(game)


def _declare_winner(game: Game, victory: Victory) -> None:
    game.victory = victory
    game.phase = Phase.GAME_OVER
    game.movement.selected_slot = None
    game.add_log(
        f"GAME OVER! {game.player(victory.winner).name} wins by "
        f"{victory.victory_type.value}!"
    )
    logger.info(
        f"Game over in round {game.round}: {victory.winner.value} "
        f"({victory.victory_type.value})"
    )


# --- Queries ---
def current_phase(game: Game) -> Phase:
    return game.phase


def log_messages(game: Game) -> List[str]:
    return game.log_messages()


def controlled_count(game: Game, player_id: PlayerId) -> int:
    return game.player(player_id).controlled_count


def winner(game: Game) -> Optional[PlayerId]:
    return game.winner


def available_movement_dice(game: Game, player_id: PlayerId) -> List[int]:
    """Values of the player's drafted dice not yet used this round."""
    return game.available_dice(player_id)


def visible_dice(game: Game, viewer: PlayerId) -> Dict[PlayerId, Optional[List[int]]]:
    """Remaining movement dice as seen by ``viewer``.

    The opponent's dice are hidden (``None``) during movement unless the
    viewer controls the Nexus of Vision.
    """
    opponent = viewer.opponent
    shown: Dict[PlayerId, Optional[List[int]]] = {
        viewer: game.available_dice(viewer)
    }
    if game.phase is not Phase.MOVEMENT or game.player_controls(
        viewer, NexusPower.VISION
    ):
        shown[opponent] = game.available_dice(opponent)
    else:
        shown[opponent] = None
    return shown
