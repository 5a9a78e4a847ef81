"""
test_bridge.py — Symbolic commands against the real SymPy engine.
"""
import pytest
from sympy import Rational, sympify

from mathapp.bridge import evaluate
from mathapp.errors import EngineError, UnknownCommand
from mathapp.results import Command, TextResult


def raw_value(result):
    return sympify(result.raw)


# ── Each command ──────────────────────────────────────────

def test_solve_returns_all_roots(engine):
    result = evaluate(engine, 'x**2-4-(0)', Command.SOLVE)
    assert isinstance(result, TextResult)
    assert set(raw_value(result)) == {2, -2}
    assert 'matrix' in result.markup


def test_solve_numeric_gives_decimals(engine):
    result = evaluate(engine, 'x**2-2', Command.SOLVE_NUMERIC)
    roots = sorted(float(r) for r in raw_value(result))
    assert roots == pytest.approx([-2 ** 0.5, 2 ** 0.5])
    assert '1.414' in result.raw


def test_evaluate_literal(engine):
    result = evaluate(engine, '2+3*4', Command.EVALUATE)
    assert float(raw_value(result)) == pytest.approx(14.0)


def test_factor(engine):
    result = evaluate(engine, 'x**2-1', Command.FACTOR)
    assert result.raw in ('(x - 1)*(x + 1)', '(x + 1)*(x - 1)')


def test_differentiate(engine):
    result = evaluate(engine, '2*x+1', Command.DIFFERENTIATE)
    assert raw_value(result) == 2
    assert result.markup == '2'


def test_integrate(engine):
    result = evaluate(engine, 'x', Command.INTEGRATE)
    assert raw_value(result) == sympify('x**2/2')


def test_simplify(engine):
    result = evaluate(engine, 'sin(x)**2+cos(x)**2', Command.SIMPLIFY)
    assert raw_value(result) == 1


def test_expand(engine):
    result = evaluate(engine, '(x+1)**2', Command.EXPAND)
    assert raw_value(result) == sympify('x**2 + 2*x + 1')


def test_string_command_identifiers(engine):
    result = evaluate(engine, 'x**3', 'diff')
    assert raw_value(result) == sympify('3*x**2')


def test_rational_roots_stay_exact(engine):
    result = evaluate(engine, '2*x-1', Command.SOLVE)
    assert list(raw_value(result)) == [Rational(1, 2)]


# ── Failures ──────────────────────────────────────────────

def test_parse_failure_is_engine_error(engine):
    with pytest.raises(EngineError):
        evaluate(engine, 'x+*)', Command.SIMPLIFY)


def test_second_equals_surfaces_as_engine_error(engine):
    with pytest.raises(EngineError):
        evaluate(engine, 'x-(1=2)', Command.SOLVE)


def test_empty_expression_is_engine_error(engine):
    with pytest.raises(EngineError):
        evaluate(engine, '', Command.EXPAND)


def test_engine_fault_is_converted(engine, monkeypatch):
    import mathapp.bridge as bridge

    def boom(expr, x):
        raise ZeroDivisionError('boom')

    monkeypatch.setitem(bridge._HANDLERS, Command.FACTOR, boom)
    with pytest.raises(EngineError) as info:
        evaluate(engine, 'x', Command.FACTOR)
    assert info.value.message.startswith('Error:')
    assert isinstance(info.value.__cause__, ZeroDivisionError)


def test_malformed_engine_response_is_rejected():
    from mathapp.bridge import _make_result

    with pytest.raises(EngineError):
        _make_result('', 'x', Command.EXPAND)
    with pytest.raises(EngineError):
        _make_result('x', None, Command.EXPAND)


def test_graph_is_not_a_bridge_command(engine):
    with pytest.raises(ValueError):
        evaluate(engine, 'x', Command.GRAPH)


def test_unknown_command(engine):
    with pytest.raises(UnknownCommand):
        evaluate(engine, 'x', 'limit')


# ── Untrusted input ───────────────────────────────────────

@pytest.mark.parametrize('payload', [
    "__import__('os').getcwd()",
    'x.__class__',
    "Symbol('x').subs.__globals__",
    'x.func',
    '(1).real',
])
def test_code_in_expression_is_refused(engine, payload):
    with pytest.raises(EngineError):
        evaluate(engine, payload, Command.SIMPLIFY)


def test_import_payload_has_no_side_effect(engine, tmp_path):
    marker = tmp_path / 'marker'
    with pytest.raises(EngineError):
        evaluate(engine, f"__import__('pathlib').Path({str(marker)!r}).touch()", Command.SIMPLIFY)
    assert not marker.exists()


def test_builtins_are_not_reachable(engine):
    # Without the dunder the name is just an unknown function of x
    result = evaluate(engine, 'open(x)', Command.SIMPLIFY)
    assert result.raw == 'open(x)'


def test_decimals_still_parse(engine):
    result = evaluate(engine, '0.5*x', Command.DIFFERENTIATE)
    assert float(raw_value(result)) == 0.5
