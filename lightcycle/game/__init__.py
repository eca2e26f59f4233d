"""
Light Cycle Duel Game Module

This module contains the core simulation for the two-player light cycle duel:
cycles, the per-tick collision rules, the live session and its ticker.
"""

from .cycle import ControlMap, Cycle, CycleConfig, Direction, GridPosition
from .errors import PreconditionError, RosterError, RoundStateError, UnknownCycleError
from .lightcycle_game import (
    CrashCause,
    CycleMove,
    LightCycleGame,
    RoundState,
    RoundStatus,
    TickOutcome,
    TickResult,
    advance_tick,
    request_direction,
    start_round,
)
from .ticker import Ticker

__all__ = [
    'ControlMap', 'Cycle', 'CycleConfig', 'Direction', 'GridPosition',
    'PreconditionError', 'RosterError', 'RoundStateError', 'UnknownCycleError',
    'CrashCause', 'CycleMove', 'LightCycleGame', 'RoundState', 'RoundStatus',
    'TickOutcome', 'TickResult', 'advance_tick', 'request_direction', 'start_round',
    'Ticker',
]
