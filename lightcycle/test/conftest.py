import pytest

from lightcycle.game import ControlMap, CycleConfig, Direction, GridPosition


def make_roster(p1_spawn=(2, 5), p1_dir=Direction.RIGHT, p2_spawn=(7, 5), p2_dir=Direction.LEFT, controls=False):
    """Two-cycle roster; keys are WASD for p1 and arrows for p2 when controls=True"""
    return (
        CycleConfig(
            cycle_id="p1",
            spawn=GridPosition(*p1_spawn),
            direction=p1_dir,
            name="Photon",
            controls=ControlMap(up="w", down="s", left="a", right="d") if controls else None,
            color=(0, 249, 255),
            accent=(104, 255, 249),
            trail_color=(0, 255, 255, 115),
        ),
        CycleConfig(
            cycle_id="p2",
            spawn=GridPosition(*p2_spawn),
            direction=p2_dir,
            name="Laser",
            controls=ControlMap(up="up", down="down", left="left", right="right") if controls else None,
            color=(255, 100, 255),
            accent=(255, 155, 255),
            trail_color=(255, 0, 255, 115),
        ),
    )


@pytest.fixture
def roster():
    return make_roster()
