"""
Game session (state machine)
Holds one game in memory: config, secret, attempts, hints and history.

States: idle -> active -> won | lost, and back to active via init_game()/restart().
Every transition happens synchronously inside the call that causes it.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from . import config as settings
from .config import GameConfig, configure
from .engine import Score, parse_guess, score_guess
from .errors import HintExhausted, InactiveSession
from .generator import generate_secret
from .random_client import RandBelow, default_source
from .types import Code, GameStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessRecord:
    guess: Tuple[int, ...]
    bulls: int
    cows: int

    @property
    def misses(self) -> int:
        # digits that are neither bulls nor cows
        return len(self.guess) - self.bulls - self.cows


@dataclass(frozen=True)
class Hint:
    position: int
    digit: int


@dataclass(frozen=True)
class GameResult:
    won: bool
    secret: Code
    guesses_made: int
    hints_used: int


@dataclass(frozen=True)
class SessionState:
    status: GameStatus
    length: int
    attempts_remaining: int
    max_attempts: int
    hints_used: int
    max_hints: int
    history: List[GuessRecord] = field(default_factory=list)

    @property
    def active(self) -> bool:
        return self.status == "active"

    @property
    def hints_left(self) -> int:
        return self.max_hints - self.hints_used

    @property
    def critical(self) -> bool:
        return self.active and self.attempts_remaining <= settings.CRITICAL_ATTEMPTS


class GameSession:
    """
    One player, one game at a time. Not thread-safe: the caller
    (a UI event loop, an HTTP adapter, a test) mutates it sequentially.
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        randbelow: Optional[RandBelow] = None,
        max_hints: Optional[int] = None,
    ) -> None:
        self.config = game_config if game_config is not None else GameConfig()
        # config of the game in progress; self.config only applies from the next init_game()
        self._game_config = self.config
        self._randbelow = randbelow if randbelow is not None else default_source()
        self.max_hints = settings.MAX_HINTS if max_hints is None else max_hints
        if self.max_hints < 0:
            raise ValueError("max_hints cannot be negative.")

        self.status: GameStatus = "idle"
        self.secret: Code = []
        self.max_attempts = self.config.max_attempts
        self.attempts_remaining = 0
        self.hints_used = 0
        self.history: List[GuessRecord] = []

    # --- Configuration ---

    def configure(self, length: int, difficulty: str, allow_repeats: bool) -> GameConfig:
        """Store a new configuration. Takes effect on the next init_game()/restart()."""
        self.config = configure(length, difficulty, allow_repeats)
        if self.status == "idle":
            self._game_config = self.config
            self.max_attempts = self.config.max_attempts
        logger.info(
            "Configured length=%d difficulty=%s repeats=%s",
            self.config.length, self.config.difficulty, self.config.allow_repeats,
        )
        return self.config

    # --- Lifecycle ---

    def init_game(self) -> SessionState:
        """Start a fresh game, replacing whatever was there."""
        game_config = self._game_config = self.config
        self.max_attempts = game_config.max_attempts
        self.attempts_remaining = self.max_attempts
        self.hints_used = 0
        self.history = []
        self.secret = generate_secret(game_config.length, game_config.allow_repeats, self._randbelow)
        self.status = "active"

        logger.info(
            "New game: length=%d difficulty=%s repeats=%s attempts=%d",
            game_config.length, game_config.difficulty, game_config.allow_repeats, self.max_attempts,
        )
        logger.debug("Secret: %s", "".join(str(d) for d in self.secret))
        return self.get_state()

    def restart(self) -> SessionState:
        return self.init_game()

    # --- Player actions ---

    def submit_guess(self, raw: str) -> Score:
        if self.status != "active":
            raise InactiveSession(self.status)

        try:
            guess = parse_guess(raw, self._game_config.length)
        except ValueError as exc:
            logger.info("Rejected guess %r: %s", raw, exc)
            raise

        score = score_guess(guess, self.secret)
        self.attempts_remaining -= 1
        self.history.append(GuessRecord(guess=tuple(guess), bulls=score.bulls, cows=score.cows))
        logger.debug("Guess %s -> %d bulls, %d cows", raw, score.bulls, score.cows)

        if score.bulls == self._game_config.length:
            self._end_game(won=True)
        elif self.attempts_remaining <= 0:
            self._end_game(won=False)

        return score

    def use_hint(self, strict: bool = False) -> Optional[Hint]:
        """
        Reveal the digit at one random position. Does not cost an attempt.
        The same position may come up more than once.

        Returns None when the game is not active or the hint budget is spent.
        With strict=True those cases raise InactiveSession / HintExhausted instead.
        """
        if self.status != "active":
            if strict:
                raise InactiveSession(self.status)
            return None
        if self.hints_used >= self.max_hints:
            if strict:
                raise HintExhausted(f"All {self.max_hints} hints used.")
            return None

        position = self._randbelow(self._game_config.length)
        self.hints_used += 1
        return Hint(position=position, digit=self.secret[position])

    # --- Reading state ---

    def get_state(self) -> SessionState:
        return SessionState(
            status=self.status,
            length=self._game_config.length,
            attempts_remaining=self.attempts_remaining,
            max_attempts=self.max_attempts,
            hints_used=self.hints_used,
            max_hints=self.max_hints,
            history=list(self.history),
        )

    def result(self) -> Optional[GameResult]:
        """Final summary once the game is won or lost; None before that."""
        if self.status not in ("won", "lost"):
            return None
        return GameResult(
            won=self.status == "won",
            secret=list(self.secret),
            guesses_made=self.max_attempts - self.attempts_remaining,
            hints_used=self.hints_used,
        )

    def _end_game(self, won: bool) -> None:
        self.status = "won" if won else "lost"
        logger.info(
            "Game %s after %d guess(es), %d hint(s)",
            self.status, self.max_attempts - self.attempts_remaining, self.hints_used,
        )
