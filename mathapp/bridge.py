"""
bridge.py — Symbolic commands on the algebra engine
====================================================
``evaluate(engine, normalized, command)`` runs one symbolic command and
returns a ``TextResult`` holding both renderings of the answer:

    markup : LaTeX, for MathJax
    raw    : plain SymPy string, for the copy box

Anything the engine throws is turned into ``EngineError``; nothing else
leaves this module.
"""

import logging

from sympy import Matrix, N, diff, expand, factor, integrate, latex, simplify, solve, sstr

from .errors import EngineError
from .results import Command, TextResult

logger = logging.getLogger(__name__)


# ── Command Handlers ────────────────────────────────────────
# Each handler returns (result, value_to_typeset)

def _cmd_solve(expr, x):
    roots = solve(expr, x)
    return roots, Matrix(roots)


def _cmd_solve_numeric(expr, x):
    roots = [N(r) for r in solve(expr, x)]
    return roots, Matrix(roots)


def _cmd_evaluate(expr, x):
    value = expr.evalf()
    return value, value


def _cmd_factor(expr, x):
    result = factor(expr)
    return result, result


def _cmd_diff(expr, x):
    result = diff(expr, x)
    return result, result


def _cmd_integrate(expr, x):
    result = integrate(expr, x)
    return result, result


def _cmd_simplify(expr, x):
    result = simplify(expr)
    return result, result


def _cmd_expand(expr, x):
    result = expand(expr)
    return result, result


_HANDLERS = {
    Command.SOLVE: _cmd_solve,
    Command.SOLVE_NUMERIC: _cmd_solve_numeric,
    Command.EVALUATE: _cmd_evaluate,
    Command.FACTOR: _cmd_factor,
    Command.DIFFERENTIATE: _cmd_diff,
    Command.INTEGRATE: _cmd_integrate,
    Command.SIMPLIFY: _cmd_simplify,
    Command.EXPAND: _cmd_expand,
}


def evaluate(engine, normalized, command):
    """Run a symbolic ``command`` on ``normalized``; raises ``EngineError``."""
    command = Command.parse(command)
    handler = _HANDLERS.get(command)
    if handler is None:
        raise ValueError(f'{command.value} is not a symbolic command')

    expr = engine.parse(normalized)
    try:
        result, shown = handler(expr, engine.x)
        markup = latex(shown)
        raw = sstr(result)
    except Exception as exc:
        logger.warning('%s failed for %r: %s', command.value, normalized, exc)
        raise EngineError(f'Error: {exc}') from exc

    return _make_result(markup, raw, command)


def _make_result(markup, raw, command):
    """Validate what came back from the engine before handing it on."""
    if not isinstance(markup, str) or not markup.strip():
        raise EngineError(f'Engine returned no result for {command.value}')
    if not isinstance(raw, str):
        raise EngineError(f'Engine returned a malformed result for {command.value}')
    return TextResult(markup=markup, raw=raw, command=command)
