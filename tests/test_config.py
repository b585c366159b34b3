"""Tests for game configuration."""

import pytest

from hookline.config.fish import DEFAULT_FISH_COUNT, DEFAULT_TIERS, Tier
from hookline.config.game_config import ControlConfig, GameConfig, PlayfieldConfig
from hookline.config.server import DEFAULT_API_PORT, api_port
from hookline.exceptions import ConfigurationError, HooklineError


def test_defaults_describe_standard_game():
    config = GameConfig()
    config.validate()
    assert config.frame_rate == 60
    assert config.seed is None
    assert config.playfield.collision_radius == 15
    assert (config.playfield.player_min_x, config.playfield.player_max_x) == (20, 580)
    assert (config.playfield.hook_min_y, config.playfield.hook_max_y) == (100, 550)
    assert (config.controls.discrete_step, config.controls.continuous_step) == (8.0, 5.0)
    assert DEFAULT_FISH_COUNT == sum(t.count for t in DEFAULT_TIERS) == 18


def test_from_env_reads_seed_and_frame_rate(monkeypatch):
    monkeypatch.setenv("HOOKLINE_SEED", "1234")
    monkeypatch.setenv("HOOKLINE_FRAME_RATE", "30")
    config = GameConfig.from_env()
    assert config.seed == 1234
    assert config.frame_rate == 30


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv("HOOKLINE_SEED", raising=False)
    monkeypatch.delenv("HOOKLINE_FRAME_RATE", raising=False)
    config = GameConfig.from_env()
    assert config.seed is None
    assert config.frame_rate == 60


def test_from_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("HOOKLINE_SEED", "not-a-number")
    with pytest.raises(ConfigurationError):
        GameConfig.from_env()


def test_from_env_rejects_zero_frame_rate(monkeypatch):
    monkeypatch.delenv("HOOKLINE_SEED", raising=False)
    monkeypatch.setenv("HOOKLINE_FRAME_RATE", "0")
    with pytest.raises(ConfigurationError):
        GameConfig.from_env()


def test_with_overrides_returns_validated_copy():
    base = GameConfig()
    changed = base.with_overrides(seed=7, controls=ControlConfig(discrete_step=4.0))
    assert changed.seed == 7
    assert changed.controls.discrete_step == 4.0
    assert base.seed is None


@pytest.mark.parametrize("overrides", [
    {"playfield": PlayfieldConfig(player_min_x=600)},
    {"playfield": PlayfieldConfig(hook_min_y=600)},
    {"playfield": PlayfieldConfig(fish_min_x=590, fish_max_x=10)},
    {"playfield": PlayfieldConfig(collision_radius=-1)},
    {"controls": ControlConfig(continuous_step=0)},
    {"frame_rate": 0},
    {"tiers": (Tier(name="bad", count=-1, y_min=0, value_min=1, value_span=1, speed_min=0, speed_span=0),)},
    {"tiers": (Tier(name="bad", count=1, y_min=0, value_min=1, value_span=0, speed_min=0, speed_span=0),)},
])
def test_invalid_overrides_rejected(overrides):
    with pytest.raises(ConfigurationError):
        GameConfig().with_overrides(**overrides)


def test_configuration_error_is_a_hookline_error():
    assert issubclass(ConfigurationError, HooklineError)


class TestApiPort:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("HOOKLINE_API_PORT", raising=False)
        assert api_port() == DEFAULT_API_PORT == 8000

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HOOKLINE_API_PORT", "9123")
        assert api_port() == 9123

    @pytest.mark.parametrize("raw", ["http", "0", "70000"])
    def test_invalid(self, monkeypatch, raw):
        monkeypatch.setenv("HOOKLINE_API_PORT", raw)
        with pytest.raises(ConfigurationError):
            api_port()
