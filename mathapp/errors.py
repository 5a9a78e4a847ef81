"""
errors.py — Failure taxonomy shared by the engine, dispatcher and front ends.

Every error carries a short ``kind`` tag which ends up in the JSON sent to the
browser, so the page can tell "still loading" apart from "could not compute".
"""


class MathAppError(Exception):
    kind = 'error'

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class UnknownCommand(MathAppError):
    """The selected command is not one the dispatcher knows."""
    kind = 'unknown-command'

    def __init__(self, identifier):
        super().__init__(f'Unknown command: {identifier}')
        self.identifier = identifier


class EngineUnavailable(MathAppError):
    """The algebra engine has not finished loading (or failed to load)."""
    kind = 'engine-unavailable'


class EngineBusy(MathAppError):
    """Another command is still running on the engine."""
    kind = 'engine-busy'


class EngineError(MathAppError):
    """The engine rejected or failed to evaluate an expression."""
    kind = 'engine-error'


class PresentationUnavailable(MathAppError):
    kind = 'presentation-unavailable'
