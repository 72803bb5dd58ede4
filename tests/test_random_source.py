import random

import pytest

from starforge.core.random_source import SplitMix32, make_rng, pick, uniform


class TestSplitMix32:
    def test_same_seed_same_stream(self):
        a = SplitMix32(42)
        b = SplitMix32(42)
        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]

    def test_different_seeds_diverge(self):
        a = SplitMix32(1)
        b = SplitMix32(2)
        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_values_in_unit_interval(self):
        rng = SplitMix32(7)
        values = [rng.random() for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_randint_inclusive_bounds(self):
        rng = SplitMix32(99)
        draws = {rng.randint(3, 5) for _ in range(500)}
        assert draws == {3, 4, 5}

    def test_large_seed_is_masked(self):
        a = SplitMix32(2**32 + 5)
        b = SplitMix32(5)
        assert a.random() == b.random()

    def test_repr_shows_seed(self):
        assert repr(SplitMix32(12)) == "SplitMix32(seed=12)"


class TestMakeRng:
    def test_explicit_rng_wins(self):
        rng = random.Random(3)
        assert make_rng(seed=10, rng=rng) is rng

    def test_seed_builds_splitmix(self):
        rng = make_rng(seed=10)
        assert isinstance(rng, SplitMix32)
        assert rng.seed == 10

    def test_no_seed_gives_random(self):
        assert isinstance(make_rng(), random.Random)


class TestHelpers:
    def test_uniform_range(self):
        rng = random.Random(0)
        values = [uniform(rng, 2.0, 3.0) for _ in range(200)]
        assert all(2.0 <= v < 3.0 for v in values)

    def test_pick_covers_all_options(self):
        rng = random.Random(0)
        assert {pick(rng, "abc") for _ in range(200)} == {"a", "b", "c"}

    def test_pick_empty_raises(self):
        with pytest.raises(ValueError):
            pick(random.Random(0), [])
