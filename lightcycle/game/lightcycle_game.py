"""
Light Cycle Duel Game Implementation

Two cycles race across a fixed grid, each leaving a trail that is lethal to
everyone for the rest of the round. Both cycles move simultaneously once per
tick; the round ends on the first tick where either of them crashes.

The module has two layers:

- start_round / request_direction / advance_tick are pure functions over an
  immutable RoundState. They never draw, sleep or keep hidden state.
- LightCycleGame wraps them for a live session: it holds the current round
  behind a lock and keeps the score and round counter.
"""

import logging
import threading
from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from .cycle import Cycle, GridPosition
from .errors import RosterError, RoundStateError, UnknownCycleError

logger = logging.getLogger(__name__)

NUM_CYCLES = 2


class RoundStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class TickOutcome(Enum):
    CONTINUING = "continuing"
    PLAYER_ELIMINATED = "player_eliminated"
    DOUBLE_ELIMINATION = "double_elimination"


class CrashCause(Enum):
    WALL = "wall"
    TRAIL = "trail"
    HEAD_ON = "head_on"    # both cycles entered the same cell
    SWAP = "swap"          # cycles tried to pass through each other


@dataclass(frozen=True)
class CycleMove:
    """What one cycle did during a tick"""

    cycle_id: str
    origin: GridPosition
    target: GridPosition
    position: GridPosition
    crashed: bool = False
    cause: CrashCause = None

    def impact(self, width, height):
        """Cell to draw the crash on; the target may lie outside the grid"""
        return self.target.clamped(width, height)


@dataclass(frozen=True)
class TickResult:
    outcome: TickOutcome
    tick: int
    moves: tuple
    winner: str = None

    @property
    def ended(self):
        return self.outcome is not TickOutcome.CONTINUING

    @property
    def crashed(self):
        return [move for move in self.moves if move.crashed]

    def move_for(self, cycle_id):
        for move in self.moves:
            if move.cycle_id == cycle_id:
                return move
        raise UnknownCycleError(cycle_id)


@dataclass(frozen=True)
class RoundState:
    """Authoritative state of one round.

    `occupied` holds every cell any cycle has stood on this round, spawn cells
    included. It only ever grows until the next round replaces the state.
    """

    width: int
    height: int
    cycles: tuple
    occupied: frozenset
    status: RoundStatus = RoundStatus.RUNNING
    tick: int = 0

    def cycle(self, cycle_id):
        for cycle in self.cycles:
            if cycle.cycle_id == cycle_id:
                return cycle
        raise UnknownCycleError(cycle_id)

    @property
    def running(self):
        return self.status is RoundStatus.RUNNING

    def occupancy_grid(self):
        """(height, width) int8 array: owning cycle index per cell, -1 if free"""
        grid = np.full((self.height, self.width), -1, dtype=np.int8)
        for index, cycle in enumerate(self.cycles):
            for x, y in cycle.trail:
                grid[y, x] = index
        return grid


def _validate_roster(roster, width, height):
    if width < 1 or height < 1:
        raise RosterError(f"grid must be at least 1x1, got {width}x{height}")
    if len(roster) != NUM_CYCLES:
        raise RosterError(f"a round needs exactly {NUM_CYCLES} cycles, got {len(roster)}")

    ids = [config.cycle_id for config in roster]
    if len(set(ids)) != len(ids):
        raise RosterError(f"cycle ids must be distinct, got {ids}")

    spawns = [GridPosition(*config.spawn) for config in roster]
    for config, spawn in zip(roster, spawns):
        if not spawn.in_bounds(width, height):
            raise RosterError(
                f"spawn {tuple(spawn)} of {config.cycle_id!r} is outside the {width}x{height} grid"
            )
    if len(set(spawns)) != len(spawns):
        raise RosterError(f"cycles can't share a spawn cell, got {[tuple(s) for s in spawns]}")


def start_round(roster, width, height):
    """Place both cycles on their spawn cells and return a running round"""
    roster = tuple(roster)
    _validate_roster(roster, width, height)

    cycles = tuple(Cycle.spawn(config) for config in roster)
    occupied = frozenset(cycle.position for cycle in cycles)

    return RoundState(
        width=width,
        height=height,
        cycles=cycles,
        occupied=occupied,
        status=RoundStatus.RUNNING,
    )


def request_direction(state, cycle_id, direction):
    """Buffer a heading change for the next tick.

    Returns the new state. A 180 degree turn is dropped silently, as is any
    request against a round that isn't running.
    """
    cycle = state.cycle(cycle_id)
    if not state.running:
        return state

    updated = cycle.request_direction(direction)
    if updated is cycle:
        logger.debug("Dropped reversal of %s from %s to %s", cycle_id, cycle.facing.name, direction.name)
        return state

    cycles = tuple(updated if c.cycle_id == cycle_id else c for c in state.cycles)
    return replace(state, cycles=cycles)


def _collision_causes(state, cycles, targets):
    """Crash cause per cycle index, None for cycles that survive the move"""
    causes = []
    for target in targets:
        if not target.in_bounds(state.width, state.height):
            causes.append(CrashCause.WALL)
        elif target in state.occupied:
            causes.append(CrashCause.TRAIL)
        else:
            causes.append(None)

    # Cross-cycle checks only apply when both moves are individually legal
    a, b = 0, 1
    if causes[a] is None and causes[b] is None:
        if targets[a] == targets[b]:
            causes[a] = causes[b] = CrashCause.HEAD_ON
        elif targets[a] == cycles[b].position and targets[b] == cycles[a].position:
            causes[a] = causes[b] = CrashCause.SWAP

    return causes


def advance_tick(state):
    """Advance the round by exactly one tick.

    Returns (new_state, TickResult). The input state is left untouched.
    Raises RoundStateError if the round is not running.
    """
    if not state.running:
        raise RoundStateError(f"can't advance a round that is {state.status.value}")

    tick = state.tick + 1
    cycles = [cycle.commit_direction() for cycle in state.cycles]
    targets = [cycle.next_position() for cycle in cycles]
    causes = _collision_causes(state, cycles, targets)

    if any(cause is not None for cause in causes):
        # Nobody moves on the tick a round ends
        moves = tuple(
            CycleMove(
                cycle_id=cycle.cycle_id,
                origin=cycle.position,
                target=target,
                position=cycle.position,
                crashed=cause is not None,
                cause=cause,
            )
            for cycle, target, cause in zip(cycles, targets, causes)
        )
        cycles = [cycle.crash() if cause is not None else cycle for cycle, cause in zip(cycles, causes)]

        survivors = [cycle for cycle in cycles if cycle.alive]
        if len(survivors) == 1:
            outcome, winner = TickOutcome.PLAYER_ELIMINATED, survivors[0].cycle_id
        else:
            outcome, winner = TickOutcome.DOUBLE_ELIMINATION, None

        for move in moves:
            if move.crashed:
                logger.debug("Tick %d: %s crashed (%s) at %s", tick, move.cycle_id, move.cause.value, tuple(move.target))

        new_state = replace(state, cycles=tuple(cycles), status=RoundStatus.ENDED, tick=tick)
        return new_state, TickResult(outcome=outcome, tick=tick, moves=moves, winner=winner)

    moves = tuple(
        CycleMove(cycle_id=cycle.cycle_id, origin=cycle.position, target=target, position=target)
        for cycle, target in zip(cycles, targets)
    )
    cycles = [cycle.move_to(target) for cycle, target in zip(cycles, targets)]
    new_state = replace(
        state,
        cycles=tuple(cycles),
        occupied=state.occupied.union(targets),
        tick=tick,
    )
    return new_state, TickResult(outcome=TickOutcome.CONTINUING, tick=tick, moves=moves)


class LightCycleGame:
    """Live duel session around the pure round functions.

    All access to the current round goes through one lock, so input handlers
    and a ticker running on another thread never see a half-applied update.
    Score and round counter live here for the length of the session only.
    """

    def __init__(self, config=None):
        if config is None:
            from ..config import GameConfig
            config = GameConfig()
        self.config = config
        self._lock = threading.RLock()

        self.state = None
        self.round = 1
        self.scores = {entry.cycle_id: 0 for entry in config.roster}
        self.last_result = None
        self.winner = None

    @property
    def status(self):
        with self._lock:
            if self.state is None:
                return RoundStatus.IDLE
            return self.state.status

    def start_round(self):
        """Start a fresh round, replacing whatever round was in progress"""
        with self._lock:
            self.state = start_round(self.config.roster, self.config.width, self.config.height)
            self.last_result = None
            self.winner = None
            logger.info("Round %d started on a %dx%d grid", self.round, self.config.width, self.config.height)
            return self.state

    def request_direction(self, cycle_id, direction):
        """Buffer a heading change; ignored while no round is running"""
        with self._lock:
            if self.state is None:
                if cycle_id not in self.scores:
                    raise UnknownCycleError(cycle_id)
                return
            self.state = request_direction(self.state, cycle_id, direction)

    def handle_key(self, key):
        """Route a key name to the first cycle whose controls use it.

        Returns True if the key is a control key of some cycle.
        """
        for entry in self.config.roster:
            if entry.controls is None:
                continue
            direction = entry.controls.direction_for(key)
            if direction is not None:
                self.request_direction(entry.cycle_id, direction)
                return True
        return False

    def advance_tick(self):
        """Run one tick of the current round and return its TickResult"""
        with self._lock:
            if self.state is None:
                raise RoundStateError("no round has been started")
            self.state, result = advance_tick(self.state)
            self.last_result = result

            if result.ended:
                self._finish_round(result)
            return result

    def _finish_round(self, result):
        self.winner = result.winner
        if result.winner is not None:
            self.scores[result.winner] += 1
            logger.info("Round %d won by %s after %d ticks", self.round, result.winner, result.tick)
        else:
            logger.info("Round %d ended in a double elimination after %d ticks", self.round, result.tick)
        self.round += 1

    def snapshot(self):
        with self._lock:
            return self.state

    def get_scores(self):
        with self._lock:
            return dict(self.scores)
