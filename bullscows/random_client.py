"""
Random sources for the game.

Everything random in the core goes through a single callable:
    randbelow(n) -> int in [0, n)
so tests can inject a fixed sequence and assert exact secrets and hints.

Two real sources:
- secure_randbelow: Python's `secrets.randbelow` (default, no network)
- RandomOrgSource: asks random.org for each draw. If anything goes wrong
  (no internet, timeout, bad response) we fall back to `secrets.randbelow`
  so the game still works.
"""

import logging
from secrets import randbelow
from typing import Callable

import requests

from . import config

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"

RandBelow = Callable[[int], int]


def secure_randbelow(n: int) -> int:
    return randbelow(n)


class RandomOrgSource:
    """Callable randbelow(n) backed by random.org, with a local fallback."""

    def __init__(self, url: str = RANDOM_URL, timeout_seconds: float = 3.0):
        self.url = url
        # keep network quick; if it takes too long, we will just fallback
        self.timeout_seconds = timeout_seconds

    def __call__(self, n: int) -> int:
        if n <= 0:
            raise ValueError("randbelow bound must be positive.")
        try:
            return self._fetch(n)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("random.org draw failed (%s); using local secure random", exc)
            return randbelow(n)

    def _fetch(self, n: int) -> int:
        params = {
            "num": 1,          # one draw per call
            "min": 0,          # smallest allowed number
            "max": n - 1,      # largest allowed number
            "col": 1,          # one number per line
            "base": 10,        # normal decimal numbers
            "format": "plain", # plain text response
            "rnd": "new",      # always generate new numbers
        }
        response = requests.get(self.url, params=params, timeout=self.timeout_seconds)

        # If the response was not 200 OK, this will raise an error
        response.raise_for_status()

        # The body looks like: "7\n"
        lines = [line.strip() for line in response.text.splitlines() if line.strip()]
        if len(lines) != 1:
            raise ValueError(f"random.org returned {len(lines)} values, expected 1.")

        value = int(lines[0])
        if value < 0 or value >= n:
            raise ValueError(f"random.org number {value} out of range 0..{n - 1}.")
        return value


def default_source() -> RandBelow:
    """Pick the random source named by BULLSCOWS_RANDOM_SOURCE."""
    if config.RANDOM_SOURCE == "random_org":
        return RandomOrgSource()
    if config.RANDOM_SOURCE != "secure":
        logger.warning("Unknown random source %r; using secure", config.RANDOM_SOURCE)
    return secure_randbelow
