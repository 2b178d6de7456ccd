"""Shared fixtures for senulator tests."""

import random

import pytest

from senulator.generators.unit import Category, Unit


class ScriptedRandom:
    """Random stand-in returning scripted fractions; randrange always picks slot 0."""

    def __init__(self, fractions: list[float]):
        self.fractions = list(fractions)

    def randrange(self, n: int) -> int:
        return 0

    def random(self) -> float:
        return self.fractions.pop(0)


@pytest.fixture
def rng() -> random.Random:
    """Deterministic randomness source."""
    return random.Random(1234)


@pytest.fixture
def volume_unit() -> Unit:
    """Water volume unit sampled every 15 minutes."""
    return Unit(
        name="volume",
        symbol="m3",
        interval=900,
        categories=[
            Category(weight=0.7, lower=0, upper=0),
            Category(weight=0.2, lower=0.1, upper=19),
            Category(weight=0.1, lower=19.1, upper=56.7812),
        ],
    )


@pytest.fixture
def scripted_rng():
    """Factory for a Random stand-in with scripted fractions."""
    return ScriptedRandom
