"""
Errors raised when a caller breaks the simulation's contract.

Crashes are not errors: a wall hit or a head-on collision ends the round
through a TickResult. These exceptions are only for misuse of the API.
"""


class PreconditionError(Exception):
    """Base class for caller contract violations"""


class RosterError(PreconditionError, ValueError):
    """Round started with a malformed roster or grid"""


class RoundStateError(PreconditionError, RuntimeError):
    """Operation not allowed in the round's current status"""


class UnknownCycleError(PreconditionError, KeyError):
    """No cycle with that id in the round"""
