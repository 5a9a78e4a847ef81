"""
dispatcher.py — Route a command to the bridge or the sampler
=============================================================
    dispatch(normalized, command)  → TextResult | SampleResult   (raises)
    compute(raw, command)          → TextResult | SampleResult | Failure

``compute`` is what the front ends call: it normalizes the input and turns
every error into a ``Failure`` so a bad expression only ends the command in
flight.
"""

import logging

from . import bridge, config, sampler
from .errors import MathAppError
from .normalizer import normalize
from .results import Command, Failure

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(self, engine, domain=(config.X_MIN, config.X_MAX),
                 graph_points=config.GRAPH_POINTS, preview_points=config.PREVIEW_POINTS):
        self.engine = engine
        self.domain = (float(domain[0]), float(domain[1]))
        self.graph_points = int(graph_points)
        self.preview_points = int(preview_points)

    def dispatch(self, normalized, command, preview=False):
        """Run ``command`` on an already normalized expression.

        Raises ``UnknownCommand``, ``EngineUnavailable``, ``EngineBusy`` or
        ``EngineError``.
        """
        command = Command.parse(command)
        with self.engine.session():
            if command is Command.GRAPH:
                count = self.preview_points if preview else self.graph_points
                return sampler.sample(self.engine, normalized, self.domain, count)
            return bridge.evaluate(self.engine, normalized, command)

    def compute(self, raw, command, preview=False):
        """Normalize ``raw``, dispatch it, and report failures as values."""
        expression = raw.strip() if isinstance(raw, str) else ''
        if not expression:
            return Failure('Enter an equation!', kind='empty-input')

        normalized = normalize(expression)
        logger.info('Dispatching %s on %r', command, normalized)
        try:
            return self.dispatch(normalized, command, preview=preview)
        except MathAppError as exc:
            logger.warning('%s: %s', exc.kind, exc.message)
            return Failure(exc.message, kind=exc.kind)
