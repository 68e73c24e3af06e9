"""
Testing secret generation with injected randomness.
"""

import random

import pytest

from bullscows.errors import ConfigurationError
from bullscows.generator import generate_secret

def test_no_repeats_draws_from_shrinking_pool(fixed_draws):
    # index 1 each time: pool [0..9] -> 1, then [0,2,..] -> 2, then 3, then 4
    assert generate_secret(4, allow_repeats=False, randbelow=fixed_draws(1)) == [1, 2, 3, 4]

def test_no_repeats_last_index_each_step():
    draws = iter([9, 8, 7])
    assert generate_secret(3, allow_repeats=False, randbelow=lambda n: next(draws)) == [9, 8, 7]

def test_no_repeats_bounds_shrink():
    bounds = []

    def record(n):
        bounds.append(n)
        return 0

    generate_secret(5, allow_repeats=False, randbelow=record)
    assert bounds == [10, 9, 8, 7, 6]

def test_repeats_uses_independent_draws(fixed_draws):
    assert generate_secret(4, allow_repeats=True, randbelow=fixed_draws(1, 1, 2, 3)) == [1, 1, 2, 3]

def test_no_repeats_always_distinct():
    rng = random.Random(1234)
    for length in (3, 4, 5):
        for _ in range(200):
            secret = generate_secret(length, allow_repeats=False, randbelow=rng.randrange)
            assert len(secret) == length
            assert len(set(secret)) == length
            assert all(0 <= d <= 9 for d in secret)

def test_default_source_produces_valid_secret():
    secret = generate_secret(5, allow_repeats=True)
    assert len(secret) == 5
    assert all(0 <= d <= 9 for d in secret)

def test_too_long_without_repeats_fails():
    with pytest.raises(ConfigurationError):
        generate_secret(11, allow_repeats=False, randbelow=lambda n: 0)

def test_zero_length_fails():
    with pytest.raises(ConfigurationError):
        generate_secret(0, allow_repeats=True, randbelow=lambda n: 0)
