"""
Exceptions raised by the game core.

Everything derives from ValueError so callers that only know "bad input"
can keep catching ValueError, the same way the HTTP layer maps it to a 400.
"""


class BullsCowsError(ValueError):
    """Base class for every error the core raises."""


class ConfigurationError(BullsCowsError):
    """Unsupported length/difficulty or a generator precondition was violated."""


class GuessValidationError(BullsCowsError):
    """A raw guess was rejected before scoring. The session is unchanged."""


class InvalidLength(GuessValidationError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Enter {expected} digits")
        self.expected = expected
        self.actual = actual


class InvalidCharacters(GuessValidationError):
    def __init__(self, raw: str):
        super().__init__("Numbers only")
        self.raw = raw


class InactiveSession(BullsCowsError):
    """Operation attempted while no game is active."""

    def __init__(self, status: str):
        super().__init__(f"No active game (status: {status}).")
        self.status = status


class HintExhausted(BullsCowsError):
    """
    Hint budget consumed.
    GameSession.use_hint() treats this as a no-op and returns None instead of raising.
    """
