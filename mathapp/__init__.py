"""Math App — type an expression, pick an operation, get a result or a graph."""

from .dispatcher import Dispatcher
from .engine import AlgebraEngine
from .errors import (
    EngineBusy,
    EngineError,
    EngineUnavailable,
    MathAppError,
    PresentationUnavailable,
    UnknownCommand,
)
from .normalizer import normalize
from .results import Command, Failure, SampleResult, TextResult

__all__ = [
    'AlgebraEngine',
    'Command',
    'Dispatcher',
    'EngineBusy',
    'EngineError',
    'EngineUnavailable',
    'Failure',
    'MathAppError',
    'PresentationUnavailable',
    'SampleResult',
    'TextResult',
    'UnknownCommand',
    'normalize',
]
