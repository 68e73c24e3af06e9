"""
Single place to:
- Read settings from env (and a local .env if present)
- Hold the balance matrix: (length, difficulty) -> base attempts
- Validate a game configuration before any game starts

Why: a bad length or difficulty should fail here, at configure time,
instead of surfacing later as a KeyError in the middle of a game.
"""

import os
from dataclasses import dataclass
from typing import Dict

from dotenv import load_dotenv

from .errors import ConfigurationError
from .types import Difficulty

# 1) Load env vars from .env if present
load_dotenv()

# 2) Process-level settings
LOG_LEVEL = os.getenv("BULLSCOWS_LOG_LEVEL", "INFO").upper()
RANDOM_SOURCE = os.getenv("BULLSCOWS_RANDOM_SOURCE", "secure")


def read_max_hints() -> int:
    raw = os.getenv("BULLSCOWS_MAX_HINTS", "3")
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        raise ConfigurationError(
            f"BULLSCOWS_MAX_HINTS must be a non-negative integer, got {raw!r}. "
            "Fix it in your environment or local .env."
        )
    return value


MAX_HINTS = read_max_hints()

# 3) Game balance
SUPPORTED_LENGTHS = (3, 4, 5)
DIFFICULTIES = ("easy", "medium", "hard")

BALANCE_MATRIX: Dict[int, Dict[str, int]] = {
    3: {"easy": 8, "medium": 6, "hard": 4},
    4: {"easy": 10, "medium": 8, "hard": 6},
    5: {"easy": 14, "medium": 12, "hard": 10},
}

# Bonus attempts when the secret may repeat digits
REPEATS_BONUS = 2

# At or below this many attempts left the game is "critical" (UI warning)
CRITICAL_ATTEMPTS = 2


@dataclass(frozen=True)
class GameConfig:
    length: int = 4
    difficulty: Difficulty = "medium"
    allow_repeats: bool = False

    def __post_init__(self) -> None:
        # exact int only: True is an int subclass and 4.0 == 4
        if type(self.length) is not int or self.length not in SUPPORTED_LENGTHS:
            raise ConfigurationError(
                f"length must be one of {SUPPORTED_LENGTHS}, got {self.length!r}."
            )
        if self.difficulty not in DIFFICULTIES:
            raise ConfigurationError(
                f"difficulty must be one of {DIFFICULTIES}, got {self.difficulty!r}."
            )
        if not isinstance(self.allow_repeats, bool):
            raise ConfigurationError(
                f"allow_repeats must be True or False, got {self.allow_repeats!r}."
            )

    @property
    def max_attempts(self) -> int:
        return max_attempts(self)


def max_attempts(config: GameConfig) -> int:
    """
    Example:
      length=4, difficulty="medium", allow_repeats=False -> 8
      length=4, difficulty="medium", allow_repeats=True  -> 10
    """
    try:
        base = BALANCE_MATRIX[config.length][config.difficulty]
    except KeyError:
        raise ConfigurationError(
            f"No balance entry for length={config.length}, difficulty={config.difficulty}."
        ) from None
    if config.allow_repeats:
        base += REPEATS_BONUS
    return base


def configure(length: int = 4, difficulty: str = "medium", allow_repeats: bool = False) -> GameConfig:
    """Validate and build an immutable configuration."""
    return GameConfig(length=length, difficulty=difficulty, allow_repeats=allow_repeats)
