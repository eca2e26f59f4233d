"""
Light Cycle Duel configuration

Grid size, tick cadence and the default two-player roster. Everything here is
a load-time constant; a round never changes it.
"""

from dataclasses import dataclass, field

from .game.cycle import ControlMap, CycleConfig, Direction, GridPosition

# ---- Arena ----
GRID_COLS = 64
GRID_ROWS = 36
CELL_SIZE = 18        # pixels per cell
TICK_MS = 70          # ~14 ticks per second

PLAYER_CONFIGS = (
    CycleConfig(
        cycle_id="p1",
        name="Photon",
        spawn=GridPosition(int(GRID_COLS * 0.2), GRID_ROWS // 2),
        direction=Direction.RIGHT,
        controls=ControlMap(up="w", down="s", left="a", right="d"),
        color=(0, 249, 255),
        accent=(104, 255, 249),
        trail_color=(0, 255, 255, 115),
    ),
    CycleConfig(
        cycle_id="p2",
        name="Laser",
        spawn=GridPosition(int(GRID_COLS * 0.8), GRID_ROWS // 2),
        direction=Direction.LEFT,
        controls=ControlMap(up="up", down="down", left="left", right="right"),
        color=(255, 100, 255),
        accent=(255, 155, 255),
        trail_color=(255, 0, 255, 115),
    ),
)


@dataclass(frozen=True)
class GameConfig:
    """Grid, cadence and roster for one session."""

    width: int = GRID_COLS
    height: int = GRID_ROWS
    tick_ms: int = TICK_MS
    roster: tuple = field(default=PLAYER_CONFIGS)

    def __post_init__(self):
        if self.width < 1:
            raise ValueError("width must be >= 1")
        if self.height < 1:
            raise ValueError("height must be >= 1")
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be > 0")
        # Lists are accepted but stored as a tuple so the config stays hashable
        object.__setattr__(self, "roster", tuple(self.roster))

    @property
    def ticks_per_second(self):
        return round(1000 / self.tick_ms)

    def player(self, cycle_id):
        """Return the roster entry for cycle_id"""
        for entry in self.roster:
            if entry.cycle_id == cycle_id:
                return entry
        raise KeyError(cycle_id)


def scaled_roster(width, height):
    """Default roster with spawns placed for a width x height grid"""
    spawns = (
        GridPosition(int(width * 0.2), height // 2),
        GridPosition(int(width * 0.8), height // 2),
    )
    return tuple(
        CycleConfig(
            cycle_id=entry.cycle_id,
            name=entry.name,
            spawn=spawn,
            direction=entry.direction,
            controls=entry.controls,
            color=entry.color,
            accent=entry.accent,
            trail_color=entry.trail_color,
        )
        for entry, spawn in zip(PLAYER_CONFIGS, spawns)
    )
