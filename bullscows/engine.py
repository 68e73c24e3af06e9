"""
Pure game logic (no HTTP, no session state).
We compute two feedback numbers for each guess:
- bulls: how many indices are exactly correct (right digit, right place)
- cows: digits that appear in the secret but somewhere else, never counting
  a secret position that was already claimed by a bull or an earlier cow

Duplicates are allowed in both the secret and the guess.
"""

from typing import List, NamedTuple, Sequence

from .errors import InvalidCharacters, InvalidLength
from .types import Code


class Score(NamedTuple):
    bulls: int
    cows: int


def score_guess(guess: Sequence[int], secret: Sequence[int]) -> Score:
    """
    Example:
      secret = [1, 1, 2, 3]
      guess  = [1, 1, 1, 1]
      bulls = 2  (positions 0 and 1)
      cows  = 0  (both 1s in the secret are already taken by the bulls)
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    guess_used: List[bool] = [False] * n
    secret_used: List[bool] = [False] * n

    # 1. Bulls first, consuming both positions
    bulls = 0
    i = 0
    while i < n:
        if guess[i] == secret[i]:
            bulls += 1
            guess_used[i] = True
            secret_used[i] = True
        i += 1

    # 2. Cows: first free secret position holding the same digit
    cows = 0
    i = 0
    while i < n:
        if not guess_used[i]:
            j = 0
            while j < n:
                if not secret_used[j] and guess[i] == secret[j]:
                    cows += 1
                    secret_used[j] = True
                    break
                j += 1
        i += 1

    return Score(bulls, cows)


def parse_guess(raw: str, length: int) -> Code:
    """Turn '0123' into [0, 1, 2, 3]. Length is checked before characters."""
    if len(raw) != length:
        raise InvalidLength(expected=length, actual=len(raw))
    # str.isdigit() also accepts things like '²'; only ASCII 0-9 are digits here
    if not all(ch in "0123456789" for ch in raw):
        raise InvalidCharacters(raw)
    return [int(ch) for ch in raw]
