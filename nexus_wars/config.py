import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Board constants (fixed topology) ---
    TRACK_LENGTH: int = 20
    PLAYER_HOME_BASE: int = 1
    AI_HOME_BASE: int = 11
    NEXUS_POSITIONS: list[int] = field(
        default_factory=lambda: [3, 6, 9, 12, 15, 18, 20]
    )  # Speed, Vision, Strength, Recall, Shifting, Barriers, Momentum
    WARRIORS_PER_PLAYER: int = 6

    # --- Dice ---
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    DICE_PER_ROUND: int = 5
    SPEED_EXTRA_DICE: int = 1
    FIRST_MOVER_DRAFT: int = 3
    SECOND_MOVER_DRAFT: int = 2

    # --- Victory ---
    CONTROL_TO_WIN: int = 5
    TIEBREAK_CONTROL_WEIGHT: int = 2
    MAX_ROUNDS: int = int(os.getenv("MAX_ROUNDS", 10))

    LOG_CAPACITY: int = int(os.getenv("LOG_CAPACITY", 20))

    def __post_init__(self):
        if self.MAX_ROUNDS < 1:
            raise ValueError("MAX_ROUNDS must be at least 1")
        if self.LOG_CAPACITY < 1:
            raise ValueError("LOG_CAPACITY must be at least 1")
        if self.FIRST_MOVER_DRAFT + self.SECOND_MOVER_DRAFT > self.DICE_PER_ROUND:
            raise ValueError("Draft quotas exceed the dice rolled per round")


@dataclass(slots=True)
class AIConfig:
    difficulty: str = os.getenv("AI_DIFFICULTY", "medium")
    # Artificial thinking delays (seconds); pacing only
    draft_delay: float = float(os.getenv("AI_DRAFT_DELAY", 0.8))
    move_delay: float = float(os.getenv("AI_MOVE_DELAY", 1.0))
    select_delay: float = float(os.getenv("AI_SELECT_DELAY", 0.4))


@dataclass(slots=True)
class AIWeights:
    # Base move heuristic (MEDIUM)
    instant_win: float = 1000.0
    capture: float = 40.0
    fifth_capture: float = 60.0
    bump: float = 25.0
    bump_champion: float = 15.0
    champion_step: float = 2.0
    warrior_step: float = 1.0

    # Positional terms (HARD move)
    champion_approach: float = 1.5
    spread_bonus: float = 10.0
    spread_radius: int = 3
    champion_exposure_penalty: float = 15.0
    exposure_radius: int = 2

    # Prospective draft terms (HARD draft)
    draft_value: float = 2.0
    draft_win: float = 50.0
    draft_capture: float = 15.0
    draft_bump: float = 10.0
    low_die_penalty: float = 5.0
    low_die_threshold: int = 2

    # Strategic worth of each power when the target bonus is not ours
    power_values: dict[str, float] = field(
        default_factory=lambda: {
            "SPEED": 15.0,
            "VISION": 8.0,
            "STRENGTH": 12.0,
            "RECALL": 10.0,
            "SHIFTING": 9.0,
            "BARRIERS": 7.0,
            "MOMENTUM": 11.0,
        }
    )
    default_power_value: float = 5.0


config = Config()
ai_config = AIConfig()
ai_weights = AIWeights()
