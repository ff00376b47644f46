from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .config import config
from .types import PlayerId


@dataclass(slots=True)
class DiceSource:
    """Uniform d6 roller. Seed it for reproducible games."""

    seed: int | None = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def roll(self) -> int:
        return self.rng.randint(config.DICE_MIN, config.DICE_MAX)

    def roll_many(self, count: int) -> Tuple[int, ...]:
        return tuple(self.roll() for _ in range(count))


def _per_player() -> Dict[PlayerId, List[int]]:
    return {pid: [] for pid in PlayerId}


@dataclass(slots=True)
class DraftState:
    rolled: Tuple[int, ...] = ()
    available: List[int] = field(default_factory=list)
    drafted: Dict[PlayerId, List[int]] = field(default_factory=_per_player)
    drafter: Optional[PlayerId] = None
    complete: bool = False

    def reset(self, rolled: Tuple[int, ...], first_mover: PlayerId) -> None:
        self.rolled = tuple(rolled)
        self.available = list(rolled)
        self.drafted = _per_player()
        self.drafter = first_mover
        self.complete = False

    def take(self, player_id: PlayerId, index: int) -> int:
        value = self.available.pop(index)
        self.drafted[player_id].append(value)
        return value


@dataclass(slots=True)
class MovementState:
    mover: Optional[PlayerId] = None
    selected_slot: Optional[int] = None
    used_slots: Dict[PlayerId, List[int]] = field(default_factory=_per_player)
    complete: bool = False

    def reset(self) -> None:
        self.mover = None
        self.selected_slot = None
        self.used_slots = _per_player()
        self.complete = False
