"""Delayed AI turns on an asyncio event loop.

The engine is synchronous; this module only adds pacing. A decision is
computed after the thinking delay and applied only if the game is still in the
exact turn it was scheduled for. Anything else is a stale action and is
dropped.
"""

from __future__ import annotations

import asyncio
from typing import Optional, Tuple

from loguru import logger

from . import engine
from .ai.opponent import Opponent
from .config import ai_config
from .errors import NexusWarsError
from .game import Game
from .types import Phase, PlayerId

TurnToken = Tuple[Phase, int, Optional[PlayerId], int, int]


def turn_token(game: Game) -> TurnToken:
    """Identifies a single decision point; any engine action changes it."""
    used = sum(len(slots) for slots in game.movement.used_slots.values())
    holder = game.draft.drafter if game.phase is Phase.DRAFT else game.movement.mover
    return (game.phase, game.round, holder, len(game.draft.available), used)


def is_turn_of(game: Game, player_id: PlayerId) -> bool:
    if game.phase is Phase.DRAFT:
        return game.draft.drafter is player_id
    if game.phase is Phase.MOVEMENT:
        return game.movement.mover is player_id
    return False


class AITurnScheduler:
    """Runs at most one pending AI action at a time for a single game."""

    def __init__(
        self,
        game: Game,
        opponent: Opponent,
        draft_delay: float = ai_config.draft_delay,
        move_delay: float = ai_config.move_delay,
        select_delay: float = ai_config.select_delay,
    ) -> None:
        self.game = game
        self.opponent = opponent
        self.draft_delay = draft_delay
        self.move_delay = move_delay
        self.select_delay = select_delay
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def schedule(self) -> bool:
        """Queue the AI's next action if it holds the turn. Needs a running loop."""
        if self.pending or not is_turn_of(self.game, self.opponent.player_id):
            return False
        self._task = asyncio.get_running_loop().create_task(
            self._run(turn_token(self.game))
        )
        return True

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()
        self._task = None

    async def wait(self) -> bool:
        """Wait for the pending action. Returns True if it was applied."""
        if self._task is None:
            return False
        try:
            return await self._task
        except asyncio.CancelledError:
            return False
        finally:
            self._task = None

    async def play_until_human(self) -> int:
        """Let the AI act until the turn leaves it or the game ends."""
        applied = 0
        while self.schedule():
            if not await self.wait():
                break
            applied += 1
        return applied

    def _still_valid(self, token: TurnToken) -> bool:
        if turn_token(self.game) != token:
            logger.info(f"Discarding stale AI action scheduled for {token}")
            return False
        return True

    async def _run(self, token: TurnToken) -> bool:
        if token[0] is Phase.DRAFT:
            return await self._run_draft(token)
        return await self._run_move(token)

    async def _run_draft(self, token: TurnToken) -> bool:
        await asyncio.sleep(self.draft_delay)
        if not self._still_valid(token):
            return False
        index = self.opponent.decide_draft(self.game)
        if index is None:
            return False
        try:
            engine.draft(self.game, self.opponent.player_id, index)
        except NexusWarsError as e:
            logger.warning(f"AI draft rejected: {e}")
            return False
        return True

    async def _run_move(self, token: TurnToken) -> bool:
        await asyncio.sleep(self.move_delay)
        if not self._still_valid(token):
            return False
        decision = self.opponent.decide_move(self.game)
        if decision is None:
            return False
        pid = self.opponent.player_id
        try:
            engine.select_die(self.game, pid, decision.die_index)
        except NexusWarsError as e:
            logger.warning(f"AI die selection rejected: {e}")
            return False

        await asyncio.sleep(self.select_delay)
        if not self._still_valid(token) or self.game.movement.selected_slot != decision.slot:
            return False
        try:
            engine.move(self.game, pid, decision.piece_id, decision.target)
        except NexusWarsError as e:
            logger.warning(f"AI move rejected: {e}")
            return False
        return True
