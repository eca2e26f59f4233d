"""
Individual light cycle for the Light Cycle Duel.

Each cycle has its own position, committed heading, a one-slot buffer for the
next heading, and the trail of cells it has visited this round.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import NamedTuple


class GridPosition(NamedTuple):
    """Cell on the grid, (column, row), 0-indexed"""

    x: int
    y: int

    def step(self, direction):
        """Return the neighbouring cell in direction"""
        dx, dy = direction.value
        return GridPosition(self.x + dx, self.y + dy)

    def in_bounds(self, width, height):
        return 0 <= self.x < width and 0 <= self.y < height

    def clamped(self, width, height):
        """Nearest in-grid cell, used to draw crashes into the wall"""
        return GridPosition(
            min(max(self.x, 0), width - 1),
            min(max(self.y, 0), height - 1),
        )


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    def opposite(self):
        return Direction((-self.dx, -self.dy))

    def is_opposite(self, other):
        """Two directions are opposite when their vectors sum to zero"""
        return self.dx + other.dx == 0 and self.dy + other.dy == 0


@dataclass(frozen=True)
class ControlMap:
    """Four key identifiers steering one cycle"""

    up: str
    down: str
    left: str
    right: str

    def direction_for(self, key):
        """Direction bound to key, or None if the key isn't one of ours"""
        if key == self.up:
            return Direction.UP
        if key == self.down:
            return Direction.DOWN
        if key == self.left:
            return Direction.LEFT
        if key == self.right:
            return Direction.RIGHT
        return None


@dataclass(frozen=True)
class CycleConfig:
    """Seed data for one player: identity, spawn, initial heading, keys, colours"""

    cycle_id: str
    spawn: GridPosition
    direction: Direction
    name: str = ""
    controls: ControlMap = None
    color: tuple = (255, 255, 255)
    accent: tuple = (255, 255, 255)
    trail_color: tuple = (255, 255, 255, 115)

    @property
    def display_name(self):
        return self.name or self.cycle_id


@dataclass(frozen=True)
class Cycle:
    """Runtime state of one cycle within a round.

    Cycles are values: every move or heading change returns a new Cycle, so a
    RoundState holding them can be shared with renderers without copying.

    `pending_direction` is a single-slot buffer. A new valid request overwrites
    whatever was there; the slot is committed to `facing` at the start of the
    next tick.
    """

    cycle_id: str
    position: GridPosition
    facing: Direction
    pending_direction: Direction = None
    trail: tuple = field(default=())
    alive: bool = True

    def __post_init__(self):
        if self.pending_direction is None:
            object.__setattr__(self, "pending_direction", self.facing)
        if not self.trail:
            object.__setattr__(self, "trail", (self.position,))

    @classmethod
    def spawn(cls, config):
        """Fresh cycle sitting on its spawn cell"""
        position = GridPosition(*config.spawn)
        return cls(
            cycle_id=config.cycle_id,
            position=position,
            facing=config.direction,
            pending_direction=config.direction,
            trail=(position,),
        )

    def request_direction(self, direction):
        """Buffer direction unless it would reverse the current heading.

        Returns the updated cycle, or self when the request is a 180 degree
        turn and gets dropped.
        """
        if direction.is_opposite(self.facing):
            return self
        return replace(self, pending_direction=direction)

    def commit_direction(self):
        """Apply the buffered heading"""
        if self.pending_direction.is_opposite(self.facing):
            # Can't happen through request_direction, but never reverse
            return replace(self, pending_direction=self.facing)
        return replace(self, facing=self.pending_direction)

    def next_position(self):
        return self.position.step(self.facing)

    def move_to(self, position):
        return replace(self, position=position, trail=self.trail + (position,))

    def crash(self):
        return replace(self, alive=False)
