import pytest


class FixedRandom:
    """Stand-in random source: random() returns a constant, choice() a fixed index."""

    def __init__(self, value: float = 0.5, pick: int = 0):
        self.value = value
        self.pick = pick

    def random(self) -> float:
        return self.value

    def choice(self, seq):
        return seq[self.pick]


class ExplodingRandom:
    def random(self):
        raise AssertionError("random source should not be used")

    def choice(self, seq):
        raise AssertionError("random source should not be used")


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def no_random():
    return ExplodingRandom()
