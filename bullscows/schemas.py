"""
Explicit validation & Pydantic models
- Defines the structure of API requests and responses.
- The secret is never part of a response until the game is over.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from .session import GameResult, GuessRecord, Hint, SessionState

# 1. Configuration for the next game
class ConfigRequest(BaseModel):
    length: int = Field(4, description="Number of digits in the secret (3, 4 or 5)")
    difficulty: Literal["easy", "medium", "hard"] = Field("medium", description="Selects the attempt budget")
    allow_repeats: bool = Field(False, description="Whether secret digits may repeat (+2 attempts)")

class ConfigOut(BaseModel):
    length: int
    difficulty: Literal["easy", "medium", "hard"]
    allow_repeats: bool
    max_attempts: int = Field(..., description="Attempts the next game will start with")

# 2. Player's raw guess
class GuessRequest(BaseModel):
    guess: str = Field(..., description="The guess as typed, e.g. '0123'")

    model_config = {
        "json_schema_extra": {
            "examples": [
                { "guess": "0123" },     # length 4 (default)
                { "guess": "012" },      # length 3
                { "guess": "01234" },    # length 5
            ]
        }
    }

# 3. Feedback for a single guess
class GuessEntryOut(BaseModel):
    guess: str = Field(..., description="The player's guess")
    bulls: int = Field(..., description="Right digit, right place")
    cows: int = Field(..., description="Right digit, wrong place")
    misses: int = Field(..., description="Digits that are neither")

    @classmethod
    def from_record(cls, record: GuessRecord) -> "GuessEntryOut":
        return cls(
            guess="".join(str(d) for d in record.guess),
            bulls=record.bulls,
            cows=record.cows,
            misses=record.misses,
        )

# 4. Overall state of the game
class GameStateOut(BaseModel):
    status: Literal["idle", "active", "won", "lost"]
    length: int
    attempts_remaining: int
    max_attempts: int
    hints_used: int
    hints_left: int
    max_hints: int
    critical: bool = Field(..., description="True when only a couple of attempts are left")
    history: List[GuessEntryOut] = Field(..., description="Guesses in submission order")

    @classmethod
    def from_state(cls, state: SessionState) -> "GameStateOut":
        return cls(
            status=state.status,
            length=state.length,
            attempts_remaining=state.attempts_remaining,
            max_attempts=state.max_attempts,
            hints_used=state.hints_used,
            hints_left=state.hints_left,
            max_hints=state.max_hints,
            critical=state.critical,
            history=[GuessEntryOut.from_record(r) for r in state.history],
        )

# 5. End-of-game summary
class ResultOut(BaseModel):
    won: bool
    secret: str = Field(..., description="Revealed secret")
    guesses_made: int
    hints_used: int

    @classmethod
    def from_result(cls, result: GameResult) -> "ResultOut":
        return cls(
            won=result.won,
            secret="".join(str(d) for d in result.secret),
            guesses_made=result.guesses_made,
            hints_used=result.hints_used,
        )

# 6. Result of a guess
class GuessResponse(BaseModel):
    bulls: int
    cows: int
    attempts_remaining: int
    status: Literal["idle", "active", "won", "lost"]
    result: Optional[ResultOut] = Field(None, description="Only present once the game is over")

# 7. Hint
class HintOut(BaseModel):
    position: Optional[int] = Field(None, description="Index in the code")
    digit: Optional[int] = Field(None, description="Digit at that index")
    hints_left: int = Field(..., description="Hints remaining")
    note: Optional[str] = Field(None, description="Why no hint was given, if none was")

    @classmethod
    def from_hint(cls, hint: Optional[Hint], hints_left: int, note: Optional[str] = None) -> "HintOut":
        if hint is None:
            return cls(hints_left=hints_left, note=note)
        return cls(position=hint.position, digit=hint.digit, hints_left=hints_left)
