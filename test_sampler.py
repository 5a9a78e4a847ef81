"""
test_sampler.py — Numeric sampling and the gap policy.
"""
import math

import pytest

from mathapp.errors import EngineError
from mathapp.sampler import sample


def test_shape_and_spacing(engine):
    result = sample(engine, 'x**2', (-10, 10), 600)
    assert len(result.xs) == len(result.ys) == 600
    assert result.xs[0] == -10.0
    assert result.xs[-1] == 10.0
    assert all(a < b for a, b in zip(result.xs, result.xs[1:]))
    steps = [b - a for a, b in zip(result.xs, result.xs[1:])]
    assert max(steps) == pytest.approx(min(steps))


def test_values_match_function(engine):
    result = sample(engine, 'sin(x)', (0, 3), 31)
    for x, y in zip(result.xs, result.ys):
        assert y == pytest.approx(math.sin(x))


def test_pole_becomes_gap(engine):
    result = sample(engine, '1/x', (-10, 10), 21)
    gaps = [i for i, y in enumerate(result.ys) if y is None]
    assert gaps == [10]
    assert result.xs[10] == 0.0
    for x, y in zip(result.xs, result.ys):
        if x != 0.0:
            assert y == pytest.approx(1 / x)


def test_non_real_region_is_gaps(engine):
    result = sample(engine, 'sqrt(x)', (-1, 1), 5)
    assert result.ys[:2] == (None, None)
    assert result.ys[2] == 0.0
    assert result.ys[4] == pytest.approx(1.0)


def test_all_gaps_means_no_real_graph(engine):
    result = sample(engine, 'log(x)', (-5, -1), 10)
    assert all(y is None for y in result.ys)
    assert not result.has_real_values


def test_constant_expression_is_broadcast(engine):
    result = sample(engine, '5', (-1, 1), 4)
    assert result.ys == (5.0, 5.0, 5.0, 5.0)


def test_expression_is_kept_for_labels(engine):
    assert sample(engine, 'x+1', (0, 1), 2).expression == 'x+1'


# ── Failures ──────────────────────────────────────────────

def test_other_free_variable_fails(engine):
    with pytest.raises(EngineError) as info:
        sample(engine, 'x*y', (-1, 1), 10)
    assert 'y' in info.value.message


def test_unparseable_fails(engine):
    with pytest.raises(EngineError):
        sample(engine, '(x+', (-1, 1), 10)


@pytest.mark.parametrize('domain,count', [((-1, 1), 1), ((1, 1), 10), ((2, -2), 10)])
def test_bad_partition_is_rejected(engine, domain, count):
    with pytest.raises(ValueError):
        sample(engine, 'x', domain, count)
