"""
Secret code generation.

- allow_repeats=True: `length` independent digits 0..9
- allow_repeats=False: draw without replacement from the 10-digit pool,
  picking a random index from whatever is left at each step
"""

from typing import List, Optional

from .errors import ConfigurationError
from .random_client import RandBelow, secure_randbelow
from .types import Code

DIGIT_POOL: List[int] = list(range(10))


def generate_secret(length: int, allow_repeats: bool, randbelow: Optional[RandBelow] = None) -> Code:
    """
    Example (fixed draws 0, 0, 0, 0 with repeats off):
      pool [0..9] -> take 0 -> pool [1..9] -> take 1 -> ... -> [0, 1, 2, 3]
    """
    if randbelow is None:
        randbelow = secure_randbelow

    if length < 1:
        raise ConfigurationError("Secret length must be at least 1.")

    if allow_repeats:
        return [randbelow(10) for _ in range(length)]

    if length > len(DIGIT_POOL):
        raise ConfigurationError(
            f"Cannot draw {length} distinct digits from a pool of {len(DIGIT_POOL)}."
        )

    pool = list(DIGIT_POOL)
    secret: Code = []
    while len(secret) < length:
        index = randbelow(len(pool))
        secret.append(pool.pop(index))
    return secret
