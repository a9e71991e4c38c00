"""Tests for the process-wide random source."""

import pytest

from random_api.source import SystemRandomSource


def test_uniform_int_is_exclusive():
    source = SystemRandomSource(seed=7)

    values = {source.uniform_int(0, 3) for _ in range(300)}

    assert values == {0, 1, 2}


def test_seed_makes_fast_draws_reproducible():
    a = SystemRandomSource(seed=99)
    b = SystemRandomSource(seed=99)

    assert [a.uniform_int(0, 1000) for _ in range(5)] == [b.uniform_int(0, 1000) for _ in range(5)]
    assert a.uniform_float01() == b.uniform_float01()
    assert a.seeded
    assert not SystemRandomSource().seeded


def test_uniform_float01_range():
    source = SystemRandomSource()

    for _ in range(1000):
        assert 0.0 <= source.uniform_float01() < 1.0


def test_secure_uniform_int_range():
    source = SystemRandomSource()

    values = {source.secure_uniform_int(5, 8) for _ in range(300)}

    assert values == {5, 6, 7}


@pytest.mark.parametrize("low,high", [(3, 3), (5, 1)])
def test_empty_range_rejected(low, high):
    source = SystemRandomSource()

    with pytest.raises(ValueError):
        source.secure_uniform_int(low, high)
    with pytest.raises(ValueError):
        source.uniform_int(low, high)
