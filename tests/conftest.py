"""Shared fixtures for the generator tests."""
from __future__ import annotations

import pytest

from starforge.core.habitable import calculate_habitable_zone
from starforge.core.model import SpectralType, Star


class ScriptedRng:
    """Random source that replays queued values, then falls back to the lowest outcome."""

    def __init__(self, ints=(), floats=()):
        self._ints = list(ints)
        self._floats = list(floats)
        self.int_calls: list[tuple[int, int]] = []

    def random(self) -> float:
        if self._floats:
            return self._floats.pop(0)
        return 0.0

    def randint(self, a: int, b: int) -> int:
        self.int_calls.append((a, b))
        if self._ints:
            value = self._ints.pop(0)
            assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
            return value
        return a


def make_star(luminosity: float, spectral_type: SpectralType = SpectralType.G) -> Star:
    return Star(
        spectral_type=spectral_type,
        age=4.6,
        size=1.0,
        mass=1.0,
        luminosity=luminosity,
        habitable_zone=calculate_habitable_zone(luminosity),
    )


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def sun_like_star() -> Star:
    return make_star(1.0)


@pytest.fixture
def star_factory():
    return make_star
