"""
sampler.py — Numeric samples of f(x) for plotting.

Values that are not finite reals (complex, ±inf, NaN) are recorded as None
so the plot shows a gap instead of the whole graph failing.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

import numpy as np
from sympy import lambdify

from .errors import EngineError
from .results import SampleResult

logger = logging.getLogger(__name__)


def sample(engine, normalized: str, domain: Tuple[float, float] = (-10.0, 10.0), count: int = 600) -> SampleResult:
    """Evaluate ``normalized`` at ``count`` evenly spaced points of ``domain``.

    Both endpoints are included.  Raises ``EngineError`` only when the
    expression cannot be treated as a numeric function of ``x`` at all.
    """
    x_min, x_max = float(domain[0]), float(domain[1])
    count = int(count)
    if count < 2:
        raise ValueError(f'Need at least 2 sample points, got {count}')
    if not x_min < x_max:
        raise ValueError(f'Empty domain [{x_min}, {x_max}]')

    expr = engine.parse(normalized)

    extra = sorted(str(s) for s in expr.free_symbols if s != engine.x)
    if extra:
        raise EngineError(
            'Could not graph the equation. Make sure that your function only '
            f'contains x, no other variables! (found: {", ".join(extra)})'
        )

    xs = np.linspace(x_min, x_max, count)
    try:
        f = lambdify(engine.x, expr, 'numpy')
        with np.errstate(all='ignore'):
            raw = np.asarray(f(xs))
    except Exception as exc:
        logger.warning('Sampling failed for %r: %s', normalized, exc)
        raise EngineError(f'Could not graph the equation: {exc}') from exc

    # Constant expressions come back as a single scalar
    if raw.shape != xs.shape:
        try:
            raw = np.broadcast_to(raw, xs.shape)
        except ValueError as exc:
            raise EngineError(f'Could not graph the equation: unexpected result shape {raw.shape}') from exc

    ys = tuple(_finite_or_none(v) for v in raw.tolist())
    return SampleResult(xs=tuple(xs.tolist()), ys=ys, expression=normalized)


def _finite_or_none(value) -> Optional[float]:
    if isinstance(value, complex):
        if value.imag != 0:
            return None
        value = value.real
    try:
        value = float(value)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None
