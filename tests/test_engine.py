"""Tests for the game engine: lifecycle, input, ticking and events."""

import pytest

from hookline.collision_system import CircleCollisionDetector, CollisionDetector
from hookline.config.game_config import ControlConfig, GameConfig, PlayfieldConfig
from hookline.engine import GameEngine
from hookline.events import FishCaughtEvent, GameOverEvent, GameResetEvent, GameStartedEvent
from hookline.exceptions import CommandError, ConfigurationError, SimulationError
from hookline.game_state import GamePhase, HookState
from hookline.input_controller import ControlSource
from hookline.update_phases import UpdatePhase


def far_fish(make_fish, **overrides):
    fields = dict(fish_id=0, x=50.0, y=500.0, value=30, speed=0.0)
    fields.update(overrides)
    return make_fish(**fields)


class TestLifecycle:
    def test_new_engine_is_idle(self, engine):
        snapshot = engine.snapshot()
        assert snapshot.phase is GamePhase.IDLE
        assert snapshot.score == 0
        assert snapshot.player_x == 300.0
        assert snapshot.hook == HookState(300.0, 100.0)
        assert snapshot.fish == ()

    def test_start_from_idle(self, engine):
        assert engine.start() is True
        snapshot = engine.snapshot()
        assert snapshot.phase is GamePhase.RUNNING
        assert snapshot.score == 0
        assert len(snapshot.fish) == 18
        assert snapshot.hook == HookState(300.0, 100.0)
        assert snapshot.frame == 0

    def test_start_while_running_is_ignored(self, engine):
        engine.start()
        fish = engine.fish
        assert engine.start() is False
        assert engine.fish is fish
        assert engine.phase is GamePhase.RUNNING

    def test_restart_only_from_over(self, engine):
        assert engine.restart() is False
        engine.start()
        assert engine.restart() is False
        assert engine.phase is GamePhase.RUNNING

    def test_catch_ends_game_and_scores_value(self, placed_engine, make_fish):
        engine = placed_engine(make_fish(x=300.0, y=100.0, value=47))
        engine.start()
        caught = engine.tick()
        assert caught is not None and caught.value == 47
        snapshot = engine.snapshot()
        assert snapshot.phase is GamePhase.OVER
        assert snapshot.is_over
        assert snapshot.score == 47
        assert snapshot.caught_fish_id == caught.fish_id

    def test_start_while_over_is_ignored(self, placed_engine, make_fish):
        engine = placed_engine(make_fish(x=300.0, y=100.0))
        engine.start()
        engine.tick()
        assert engine.start() is False
        assert engine.phase is GamePhase.OVER

    def test_restart_resets_score_and_keeps_player_position(self, placed_engine, make_fish):
        engine = placed_engine(make_fish(x=330.0, y=100.0, value=55))
        engine.start()
        engine.move_once("right")
        engine.move_once("right")
        assert engine.tick() is not None
        assert engine.player_x == 316.0

        assert engine.restart() is True
        snapshot = engine.snapshot()
        assert snapshot.phase is GamePhase.IDLE
        assert snapshot.score == 0
        assert snapshot.player_x == 316.0
        assert snapshot.hook == HookState(316.0, 100.0)
        assert snapshot.caught_fish_id is None

    def test_restart_does_not_regenerate_fish(self):
        engine = GameEngine(seed=3, collision_detector=CircleCollisionDetector(radius=10_000))
        engine.start()
        engine.tick()
        fish_after_catch = engine.fish
        engine.restart()
        assert engine.fish == fish_after_catch

    def test_start_after_restart_generates_fresh_fish(self):
        engine = GameEngine(seed=3, collision_detector=CircleCollisionDetector(radius=10_000))
        engine.start()
        first_batch = engine.fish
        engine.tick()
        engine.restart()
        engine.start()
        assert len(engine.fish) == 18
        assert engine.fish != first_batch
        assert engine.score == 0
        assert engine.frame_count == 0

    def test_same_seed_same_game(self):
        a, b = GameEngine(seed=5), GameEngine(seed=5)
        a.start()
        b.start()
        assert a.fish == b.fish
        for _ in range(100):
            a.tick()
            b.tick()
        assert a.snapshot() == b.snapshot()

    def test_seed_from_config(self):
        a = GameEngine(GameConfig(seed=9))
        b = GameEngine(seed=9)
        a.start()
        b.start()
        assert a.fish == b.fish

    def test_duplicate_fish_ids_are_rejected(self, placed_engine, make_fish):
        engine = placed_engine(make_fish(fish_id=1), make_fish(fish_id=1, x=100.0))
        with pytest.raises(SimulationError):
            engine.start()
        assert engine.phase is GamePhase.IDLE

    def test_invalid_config_is_rejected(self):
        config = GameConfig(playfield=PlayfieldConfig(collision_radius=0))
        with pytest.raises(ConfigurationError):
            GameEngine(config)


class TestTick:
    def test_tick_when_idle_does_nothing(self, engine):
        assert engine.tick() is None
        assert engine.frame_count == 0

    def test_tick_advances_fish_and_frame(self, placed_engine, make_fish):
        engine = placed_engine(far_fish(make_fish, x=100.0, speed=0.5))
        engine.start()
        engine.tick()
        engine.tick()
        assert engine.frame_count == 2
        assert engine.fish[0].x == pytest.approx(101.0)

    def test_no_changes_after_game_over(self, placed_engine, make_fish):
        engine = placed_engine(
            make_fish(fish_id=0, x=300.0, y=100.0, value=12),
            make_fish(fish_id=1, x=100.0, y=400.0, speed=0.5),
        )
        engine.start()
        engine.tick()
        before = engine.snapshot()
        for _ in range(1000):
            assert engine.tick() is None
        after = engine.snapshot()
        assert after == before
        assert after.score == 12
        assert after.frame == 1

    def test_catch_uses_positions_after_movement(self, placed_engine, make_fish):
        # 15.4 away before moving, 14.9 after
        engine = placed_engine(make_fish(x=315.4, y=100.0, direction=-1, speed=0.5))
        engine.start()
        assert engine.tick() is not None
        assert engine.fish[0].x == pytest.approx(314.9)

    def test_only_first_of_simultaneous_catches_scores(self, placed_engine, make_fish):
        engine = placed_engine(
            make_fish(fish_id=0, x=305.0, y=100.0, value=20),
            make_fish(fish_id=1, x=300.0, y=100.0, value=90),
        )
        engine.start()
        engine.tick()
        assert engine.score == 20
        assert engine.snapshot().caught_fish_id == 0


class TestInput:
    def test_input_ignored_when_idle(self, engine):
        assert engine.move_once("left") is False
        assert engine.set_intent("left", True) is False
        engine.start()
        engine.tick()
        assert engine.player_x == 300.0

    def test_input_ignored_when_over(self, placed_engine, make_fish):
        engine = placed_engine(make_fish(x=300.0, y=100.0))
        engine.start()
        engine.tick()
        assert engine.move_once("down") is False
        assert engine.set_intent("down", True) is False

    def test_move_once_applies_on_next_tick(self, placed_engine, make_fish):
        engine = placed_engine(far_fish(make_fish))
        engine.start()
        assert engine.move_once("left") is True
        assert engine.player_x == 300.0
        engine.tick()
        assert engine.player_x == 292.0
        assert engine.hook == HookState(292.0, 100.0)
        engine.tick()
        assert engine.player_x == 292.0

    def test_multiple_pulses_in_one_tick_all_apply(self, placed_engine, make_fish):
        engine = placed_engine(far_fish(make_fish))
        engine.start()
        for _ in range(3):
            engine.move_once("down")
        engine.tick()
        assert engine.hook.y == 124.0

    def test_held_intent_applies_every_tick(self, placed_engine, make_fish):
        engine = placed_engine(far_fish(make_fish))
        engine.start()
        assert engine.set_intent("right", True) is True
        engine.tick()
        engine.tick()
        assert engine.player_x == 310.0
        engine.set_intent("right", False)
        engine.tick()
        assert engine.player_x == 310.0

    def test_held_vertical_stops_at_bottom(self, placed_engine, make_fish):
        engine = placed_engine(far_fish(make_fish, x=590.0))
        engine.start()
        engine.set_intent(" DOWN ", True)
        for _ in range(200):
            engine.tick()
        assert engine.hook.y == 550.0

    def test_held_input_cleared_by_restart(self, placed_engine, make_fish):
        engine = placed_engine(make_fish(x=300.0, y=100.0))
        engine.start()
        engine.set_intent("right", True)
        engine.tick()
        engine.restart()
        engine.start()
        assert engine.phase is GamePhase.RUNNING
        player_x = engine.player_x
        engine.move_once("up")
        engine.tick()
        assert engine.player_x == player_x

    def test_step_sizes_follow_control_source(self, engine):
        assert engine.step_for(ControlSource.DISCRETE) == 8.0
        assert engine.step_for(ControlSource.CONTINUOUS) == 5.0

    def test_configured_steps_are_used(self, make_fish):
        config = GameConfig(controls=ControlConfig(discrete_step=4.0, continuous_step=2.0))
        engine = GameEngine(config, fish_factory=lambda rng: [far_fish(make_fish)])
        engine.start()
        engine.move_once("left")
        engine.tick()
        assert engine.player_x == 296.0
        engine.set_intent("down", True)
        engine.tick()
        assert engine.hook.y == 102.0

    def test_unknown_direction_raises(self, engine):
        engine.start()
        with pytest.raises(CommandError):
            engine.move_once("sideways")
        with pytest.raises(CommandError):
            engine.set_intent("", True)


class TestEvents:
    def test_lifecycle_events(self, placed_engine, make_fish):
        engine = placed_engine(make_fish(fish_id=7, x=300.0, y=100.0, value=64, tier="deep"))
        received = []
        for event_type in (GameStartedEvent, FishCaughtEvent, GameOverEvent, GameResetEvent):
            engine.event_bus.subscribe(event_type, received.append)

        engine.start()
        engine.tick()
        engine.restart()

        assert received == [
            GameStartedEvent(fish_count=1, player_x=300.0),
            FishCaughtEvent(fish_id=7, value=64, tier="deep", frame=1),
            GameOverEvent(final_score=64, frame=1),
            GameResetEvent(player_x=300.0),
        ]

    def test_handlers_can_read_engine_state(self, placed_engine, make_fish):
        engine = placed_engine(make_fish(x=300.0, y=100.0, value=21))
        seen = []
        engine.event_bus.subscribe(GameOverEvent, lambda e: seen.append(engine.snapshot().score))
        engine.start()
        engine.tick()
        assert seen == [21]

    def test_ignored_commands_emit_nothing(self, engine):
        received = []
        engine.event_bus.subscribe(GameResetEvent, received.append)
        engine.restart()
        assert received == []


def test_snapshot_to_dict(placed_engine, make_fish):
    engine = placed_engine(make_fish(fish_id=2, x=120.0, y=210.0, value=15, tier="surface"))
    engine.start()
    data = engine.snapshot().to_dict()
    assert data == {
        "state": "running",
        "score": 0,
        "hook": {"x": 300.0, "y": 100.0},
        "player_x": 300.0,
        "fish": [{"id": 2, "x": 120.0, "y": 210.0, "value": 15, "tier": "surface"}],
        "frame": 0,
        "caught_fish_id": None,
    }


class TestPhaseTracking:
    def test_no_current_phase_outside_tick(self, engine):
        assert engine.get_current_phase() is None
        assert engine.get_phase_description() == "Not in a tick"

    def test_describes_given_phase(self, engine):
        assert engine.get_phase_description(UpdatePhase.KINEMATICS) == "Advancing fish"

    def test_failing_phase_is_reported_and_reset(self, placed_engine, make_fish, caplog):
        class FailingDetector(CollisionDetector):
            def collides(self, hook, fish):
                raise RuntimeError("detector failed")

        engine = placed_engine(far_fish(make_fish), collision_detector=FailingDetector())
        engine.start()
        with pytest.raises(RuntimeError):
            engine.tick()
        assert "checking the hook against fish" in caplog.text
        assert engine.get_current_phase() is None
        assert engine.frame_count == 0
