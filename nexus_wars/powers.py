"""Nexus powers granted to whoever controls the matching bonus point."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class PowerEffect(str, Enum):
    EXTRA_DRAFT_DIE = "extra_draft_die"
    REVEAL_OPPONENT_DICE = "reveal_opponent_dice"
    BUMP_IMMUNITY = "bump_immunity"
    RETURN_USED_DIE = "return_used_die"
    SPLIT_MOVEMENT = "split_movement"
    PLACE_BARRIER = "place_barrier"
    PASS_THROUGH_BOOST = "pass_through_boost"


class NexusPower(str, Enum):
    SPEED = "SPEED"
    VISION = "VISION"
    STRENGTH = "STRENGTH"
    RECALL = "RECALL"
    SHIFTING = "SHIFTING"
    BARRIERS = "BARRIERS"
    MOMENTUM = "MOMENTUM"

    @property
    def descriptor(self) -> "PowerDescriptor":
        return POWER_DESCRIPTORS[self]


@dataclass(slots=True, frozen=True)
class PowerDescriptor:
    title: str
    description: str
    effect: PowerEffect
    enforced: bool  # whether the rules engine applies the effect


POWER_DESCRIPTORS: Dict[NexusPower, PowerDescriptor] = {
    NexusPower.SPEED: PowerDescriptor(
        "Nexus of Speed",
        "Roll one extra die when you open the round's draft",
        PowerEffect.EXTRA_DRAFT_DIE,
        True,
    ),
    NexusPower.VISION: PowerDescriptor(
        "Nexus of Vision",
        "See your opponent's remaining dice",
        PowerEffect.REVEAL_OPPONENT_DICE,
        True,
    ),
    NexusPower.STRENGTH: PowerDescriptor(
        "Nexus of Strength",
        "Your Warriors cannot be bumped",
        PowerEffect.BUMP_IMMUNITY,
        True,
    ),
    NexusPower.RECALL: PowerDescriptor(
        "Nexus of Recall",
        "Once per turn, return one used die to your pool",
        PowerEffect.RETURN_USED_DIE,
        False,
    ),
    NexusPower.SHIFTING: PowerDescriptor(
        "Nexus of Shifting",
        "Split movement across two pieces",
        PowerEffect.SPLIT_MOVEMENT,
        False,
    ),
    NexusPower.BARRIERS: PowerDescriptor(
        "Nexus of Barriers",
        "Place a temporary block token",
        PowerEffect.PLACE_BARRIER,
        False,
    ),
    NexusPower.MOMENTUM: PowerDescriptor(
        "Nexus of Momentum",
        "+2 spaces when passing through",
        PowerEffect.PASS_THROUGH_BOOST,
        False,
    ),
}

# Track order of the bonus points, matched against config.NEXUS_POSITIONS
POWER_ORDER = (
    NexusPower.SPEED,
    NexusPower.VISION,
    NexusPower.STRENGTH,
    NexusPower.RECALL,
    NexusPower.SHIFTING,
    NexusPower.BARRIERS,
    NexusPower.MOMENTUM,
)
