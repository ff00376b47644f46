from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np
from loguru import logger

from . import engine
from .ai.opponent import Opponent
from .errors import InvariantViolation
from .game import Game
from .types import Difficulty, Phase, PlayerId, VictoryType


@dataclass(slots=True)
class GameSummary:
    winner: PlayerId
    victory_type: VictoryType
    rounds: int
    actions: int
    scores: Dict[PlayerId, int]
    controlled: Dict[PlayerId, int]


@dataclass(slots=True)
class Simulator:
    """Plays computer-vs-computer games headlessly, serializing every call."""

    player_difficulty: Difficulty | str = Difficulty.MEDIUM
    ai_difficulty: Difficulty | str = Difficulty.MEDIUM
    seed: Optional[int] = None
    max_rounds: Optional[int] = None
    check_invariants: bool = False
    seats: Dict[PlayerId, Opponent] = field(init=False)

    def __post_init__(self) -> None:
        self.seats = {
            PlayerId.PLAYER: Opponent(
                self.player_difficulty, PlayerId.PLAYER, rng_seed=self.seed
            ),
            PlayerId.AI: Opponent(
                self.ai_difficulty,
                PlayerId.AI,
                rng_seed=None if self.seed is None else self.seed + 1,
            ),
        }

    def new_game(self, seed: Optional[int] = None) -> Game:
        return engine.create_game(max_rounds=self.max_rounds, seed=seed)

    def step(self, game: Game) -> bool:
        """Apply one decision for whoever holds the turn. False once the game is over."""
        if game.phase is Phase.DRAFT:
            pid = game.draft.drafter
            index = self.seats[pid].decide_draft(game)
            engine.draft(game, pid, index)
        elif game.phase is Phase.MOVEMENT:
            pid = game.movement.mover
            decision = self.seats[pid].decide_move(game)
            if decision is None:
                # the engine forfeits blocked movers, so this is a bug
                raise InvariantViolation(f"{pid.value} holds the turn with no legal move")
            engine.select_die(game, pid, decision.die_index)
            engine.move(game, pid, decision.piece_id, decision.target)
        else:
            return False
        if self.check_invariants:
            self._check(game)
        return game.phase is not Phase.GAME_OVER

    def play(self, game: Optional[Game] = None) -> GameSummary:
        game = game or self.new_game(seed=self.seed)
        actions = 0
        while game.phase is not Phase.GAME_OVER:
            self.step(game)
            actions += 1
        if game.victory is None:
            raise InvariantViolation("Game ended without a winner")
        summary = GameSummary(
            winner=game.victory.winner,
            victory_type=game.victory.victory_type,
            rounds=game.round,
            actions=actions,
            scores=engine.tiebreaker_scores(game),
            controlled={pid: pl.controlled_count for pid, pl in game.players.items()},
        )
        logger.debug(f"Simulated game: {summary}")
        return summary

    def run_many(self, num_games: int) -> List[GameSummary]:
        results: List[GameSummary] = []
        for i in range(num_games):
            seed = None if self.seed is None else self.seed + i
            results.append(self.play(self.new_game(seed=seed)))
        return results

    @staticmethod
    def _check(game: Game) -> None:
        game.board.check_occupancy()
        for pid, pl in game.players.items():
            if pl.controlled_count != game.board.count_controlled(pid):
                raise InvariantViolation(f"{pid.value} control count drifted")
        if game.phase is Phase.DRAFT:
            pooled = len(game.draft.available) + sum(
                len(d) for d in game.draft.drafted.values()
            )
            if pooled != len(game.draft.rolled):
                raise InvariantViolation("Draft pool no longer partitions the roll")


def summarize(results: List[GameSummary]) -> Dict[str, object]:
    """Win rates, victory types and round statistics over a batch of games."""
    if not results:
        return {"games": 0}
    wins = Counter(r.winner for r in results)
    kinds = Counter(r.victory_type for r in results)
    rounds = np.asarray([r.rounds for r in results], dtype=np.float64)
    return {
        "games": len(results),
        "win_rate": {pid.value: wins.get(pid, 0) / len(results) for pid in PlayerId},
        "victory_types": {k.value: kinds.get(k, 0) for k in VictoryType},
        "mean_rounds": float(rounds.mean()),
        "max_rounds": int(rounds.max()),
    }
