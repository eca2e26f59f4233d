"""Tests for configuration constants and GameConfig validation."""

import pytest

from lightcycle.config import (
    GRID_COLS,
    GRID_ROWS,
    PLAYER_CONFIGS,
    TICK_MS,
    GameConfig,
    scaled_roster,
)
from lightcycle.game import Direction, start_round


def test_default_roster_matches_arena():
    photon, laser = PLAYER_CONFIGS
    assert (photon.cycle_id, photon.name) == ("p1", "Photon")
    assert (laser.cycle_id, laser.name) == ("p2", "Laser")
    assert photon.spawn == (12, 18)
    assert laser.spawn == (51, 18)
    assert photon.direction is Direction.RIGHT
    assert laser.direction is Direction.LEFT
    assert photon.controls.direction_for("w") is Direction.UP
    assert laser.controls.direction_for("left") is Direction.LEFT


def test_default_config():
    config = GameConfig()
    assert (config.width, config.height, config.tick_ms) == (GRID_COLS, GRID_ROWS, TICK_MS)
    assert config.ticks_per_second == 14
    assert config.roster == PLAYER_CONFIGS

    state = start_round(config.roster, config.width, config.height)
    assert len(state.occupied) == 2


@pytest.mark.parametrize(
    "kwargs",
    [{"width": 0}, {"height": -3}, {"tick_ms": 0}],
)
def test_invalid_config_raises(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_roster_list_is_stored_as_tuple():
    config = GameConfig(roster=list(PLAYER_CONFIGS))
    assert isinstance(config.roster, tuple)
    hash(config)


def test_player_lookup():
    config = GameConfig()
    assert config.player("p2").display_name == "Laser"
    with pytest.raises(KeyError):
        config.player("p3")


def test_scaled_roster_keeps_identity_and_moves_spawns():
    roster = scaled_roster(10, 10)
    assert [entry.spawn for entry in roster] == [(2, 5), (8, 5)]
    assert [entry.cycle_id for entry in roster] == ["p1", "p2"]
    assert roster[0].controls == PLAYER_CONFIGS[0].controls
