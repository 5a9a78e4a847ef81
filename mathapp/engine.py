"""
engine.py — Handle on the embedded algebra runtime (SymPy + NumPy)
===================================================================
The handle owns two pieces of state:
  • whether the runtime has finished loading (``ready``), within a fixed
    deadline after ``start()`` (``load_timeout``)
  • whether a command is currently running on it (the busy guard)

Typical use:

    engine = AlgebraEngine(load_timeout=7.0)
    engine.start()                 # load on a background thread
    engine.wait_until_ready()      # or poll engine.ready / engine.unavailable_reason
    with engine.session():
        ...                        # exactly one command at a time

Expressions come straight from the browser, so ``parse`` evaluates them
against a namespace holding only the SymPy names below, with no builtins.
"""

import logging
import re
import threading
import time
from contextlib import contextmanager

import numpy as np
import sympy
from sympy import Symbol, lambdify
from sympy.parsing.sympy_parser import parse_expr, standard_transformations

from .errors import EngineBusy, EngineError, EngineUnavailable

logger = logging.getLogger(__name__)

# Names an expression may use; anything else becomes a Symbol / Function
_ALLOWED_NAMES = (
    # needed by the parse_expr transformations
    'Symbol', 'Function', 'Integer', 'Float', 'Rational', 'factorial', 'factorial2',
    # constants
    'pi', 'E', 'I', 'oo',
    # functions
    'sin', 'cos', 'tan', 'cot', 'sec', 'csc',
    'asin', 'acos', 'atan', 'atan2',
    'sinh', 'cosh', 'tanh', 'coth',
    'asinh', 'acosh', 'atanh',
    'sqrt', 'cbrt', 'root', 'Abs',
    'log', 'ln', 'exp',
    'binomial', 'gamma',
    'floor', 'ceiling', 'sign', 're', 'im',
    'Max', 'Min',
)

_UNSAFE = re.compile(r'__|\.[A-Za-z_]')


def _safe_globals():
    namespace = {name: getattr(sympy, name) for name in _ALLOWED_NAMES}
    namespace['abs'] = sympy.Abs
    namespace['__builtins__'] = {}
    return namespace


class AlgebraEngine:
    def __init__(self, load_timeout=7.0):
        self.x = Symbol('x')
        self.load_timeout = float(load_timeout)
        self.load_error = None
        self._ready = threading.Event()
        self._busy = threading.Lock()
        self._loader = None
        self._started_at = None
        self._globals = _safe_globals()

    # ── Loading ──────────────────────────────────────────────

    def load(self):
        """Load and warm up the runtime on the calling thread."""
        try:
            # First parse / lambdify calls are slow; pay for them here
            expr = self.parse('x**2 + 1')
            f = lambdify(self.x, expr, 'numpy')
            f(np.linspace(0.0, 1.0, 2))
            sympy.latex(expr)
        except Exception as exc:
            self.load_error = str(exc)
            logger.exception('Algebra engine failed to load')
            return False
        self.load_error = None
        self._ready.set()
        logger.info('Algebra engine ready (sympy %s, numpy %s)', sympy.__version__, np.__version__)
        return True

    def start(self):
        """Begin loading in the background; returns immediately."""
        if self._loader is None:
            self._started_at = time.monotonic()
            self._loader = threading.Thread(target=self.load, name='algebra-engine-loader', daemon=True)
            self._loader.start()
        return self

    @property
    def ready(self):
        return self._ready.is_set()

    @property
    def busy(self):
        return self._busy.locked()

    @property
    def unavailable_reason(self):
        """Why the engine is unusable for good, or None while ready or still loading."""
        if self.ready:
            return None
        if self.load_error:
            return f'Algebra engine failed to load: {self.load_error}'
        if self._started_at is not None and time.monotonic() - self._started_at > self.load_timeout:
            return f'Algebra engine failed to load within {self.load_timeout:g} s'
        return None

    def wait_until_ready(self, timeout=None):
        """Block until loaded, at most ``timeout`` seconds (default ``load_timeout``)."""
        if self._ready.wait(self.load_timeout if timeout is None else timeout):
            return self
        if self.load_error:
            raise EngineUnavailable(f'Algebra engine failed to load: {self.load_error}')
        raise EngineUnavailable('Algebra engine is still loading, please wait.')

    # ── Command guard ────────────────────────────────────────

    @contextmanager
    def session(self):
        """Hold the engine for one command; never more than one at a time."""
        if not self.ready:
            reason = self.unavailable_reason
            if reason:
                raise EngineUnavailable(reason)
            raise EngineUnavailable('Please wait for the calculator to load fully.')
        if not self._busy.acquire(blocking=False):
            raise EngineBusy('Another computation is still running.')
        try:
            yield self
        finally:
            self._busy.release()

    # ── Parsing ──────────────────────────────────────────────

    def parse(self, normalized):
        """Parse a normalized expression with ``x`` bound to the engine symbol."""
        if not isinstance(normalized, str) or not normalized.strip():
            raise EngineError('Empty expression')
        if _UNSAFE.search(normalized):
            logger.warning('Rejected expression %r', normalized)
            raise EngineError(f'Could not parse "{normalized}": attribute access and dunder names are not allowed')
        try:
            return parse_expr(
                normalized,
                local_dict={'x': self.x},
                global_dict=dict(self._globals),
                transformations=standard_transformations,
            )
        except Exception as exc:
            raise EngineError(f'Could not parse "{normalized}": {exc}') from exc
