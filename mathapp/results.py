"""
results.py — Commands and the values a single computation produces.

A ``ComputationResult`` is one of:
    TextResult    — symbolic commands (LaTeX markup + plain text)
    SampleResult  — the graph command (xs, ys with gaps as None)
    Failure       — anything that went wrong, tagged with an error kind
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .errors import UnknownCommand


class Command(enum.Enum):
    SOLVE = 'solve'
    SOLVE_NUMERIC = 'solve-numeric'
    EVALUATE = 'evaluate'
    FACTOR = 'factor'
    DIFFERENTIATE = 'differentiate'
    INTEGRATE = 'integrate'
    SIMPLIFY = 'simplify'
    EXPAND = 'expand'
    GRAPH = 'graph'

    @classmethod
    def parse(cls, identifier) -> 'Command':
        """Map a command identifier (as sent by the page) to a ``Command``.

        Accepts the canonical values plus the short names used by the
        original <select> element.  Anything else raises ``UnknownCommand``.
        """
        if isinstance(identifier, cls):
            return identifier
        if isinstance(identifier, str):
            key = identifier.strip().lower()
            key = _ALIASES.get(key, key)
            for command in cls:
                if command.value == key:
                    return command
        raise UnknownCommand(identifier)


_ALIASES = {
    'solvenumeric': 'solve-numeric',
    'diff': 'differentiate',
}


@dataclass(frozen=True)
class TextResult:
    markup: str
    raw: str
    command: Optional[Command] = None

    def to_dict(self):
        return {
            'type': 'text',
            'command': self.command.value if self.command else None,
            'latex': self.markup,
            'raw': self.raw,
        }


@dataclass(frozen=True)
class SampleResult:
    xs: Tuple[float, ...]
    ys: Tuple[Optional[float], ...]
    expression: str = ''

    def __post_init__(self):
        if len(self.xs) != len(self.ys):
            raise ValueError(f'xs/ys length mismatch: {len(self.xs)} != {len(self.ys)}')

    @property
    def has_real_values(self) -> bool:
        """False when every sample is a gap ("no real-valued graph")."""
        return any(y is not None for y in self.ys)

    def to_dict(self):
        return {
            'type': 'graph',
            'expression': self.expression,
            'xs': list(self.xs),
            'ys': list(self.ys),
        }


@dataclass(frozen=True)
class Failure:
    message: str
    kind: str = 'error'

    def to_dict(self):
        return {'type': 'failure', 'kind': self.kind, 'error': self.message}


ComputationResult = Union[TextResult, SampleResult, Failure]
