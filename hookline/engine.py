"""Game engine - the single owner of game state.

The engine holds the whole mutable aggregate (phase, score, hook, player
anchor, fish) and is the only thing that changes it. Every command and tick
takes the same lock; a tick is computed into a scratch TickWork and then
committed in one step, so snapshot() never sees half a tick.

Lifecycle:
    IDLE --start()--> RUNNING --catch on tick()--> OVER --restart()--> IDLE

Commands that do not apply to the current phase are ignored and return
False. Input arriving outside RUNNING is dropped.
"""

import logging
import random
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple, Union

from hookline.collision_system import CircleCollisionDetector, CollisionDetector, check_collisions
from hookline.config.game_config import GameConfig
from hookline.entities import Fish
from hookline.entity_factory import generate_fish
from hookline.events import (
    EventBus,
    FishCaughtEvent,
    GameOverEvent,
    GameResetEvent,
    GameStartedEvent,
)
from hookline.exceptions import SimulationError
from hookline.game_state import GamePhase, GameSnapshot, HookState
from hookline.input_controller import ControlSource, Direction, InputIntent, apply_intent
from hookline.movement import advance_all
from hookline.update_phases import PHASE_DESCRIPTIONS, UpdatePhase
from hookline.util.rng import make_rng

logger = logging.getLogger(__name__)

FishFactory = Callable[[random.Random], Sequence[Fish]]


@dataclass
class TickWork:
    """Scratch state for one tick; committed to the engine only at the end."""

    hook: HookState
    player_x: float
    fish: List[Fish]
    pulses: List[Direction]
    held: InputIntent
    caught: Optional[Fish] = None
    events: List[object] = field(default_factory=list)


class GameEngine:
    """Owns the game aggregate and runs the tick.

    Attributes:
        config: Game configuration
        rng: Random source used for fish generation
        event_bus: Receives lifecycle events after each committed change
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        fish_factory: Optional[FishFactory] = None,
        event_bus: Optional[EventBus] = None,
        collision_detector: Optional[CollisionDetector] = None,
    ) -> None:
        """Initialize an idle engine.

        Args:
            config: Game configuration (defaults to the standard playfield and tiers)
            rng: Random source; created from ``seed`` (or config.seed) when omitted
            seed: Seed for a freshly created RNG
            fish_factory: Replaces the tiered generator, e.g. to place fish in tests
            event_bus: Bus for lifecycle events
            collision_detector: Catch test; defaults to the configured radius
        """
        self.config = config or GameConfig()
        self.config.validate()
        if rng is None:
            rng = make_rng(seed if seed is not None else self.config.seed)
        self.rng = rng
        self.event_bus = event_bus or EventBus()
        self._fish_factory = fish_factory or self._generate_fish
        self._detector = collision_detector or CircleCollisionDetector(
            self.config.playfield.collision_radius
        )
        self._lock = threading.Lock()

        playfield = self.config.playfield
        self._phase = GamePhase.IDLE
        self._score = 0
        self._player_x = playfield.initial_player_x
        self._hook = HookState(self._player_x, playfield.hook_start_y)
        self._fish: Tuple[Fish, ...] = ()
        self._held: Set[Direction] = set()
        self._pulses: List[Direction] = []
        self._frame = 0
        self._caught_fish_id: Optional[int] = None
        self._current_phase: Optional[UpdatePhase] = None

        self._phase_handlers: Dict[UpdatePhase, Callable[[TickWork], None]] = {
            UpdatePhase.INPUT: self._run_input_phase,
            UpdatePhase.KINEMATICS: self._run_kinematics_phase,
            UpdatePhase.COLLISION: self._run_collision_phase,
            UpdatePhase.FRAME_END: self._run_frame_end_phase,
        }

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_running(self) -> bool:
        return self._phase is GamePhase.RUNNING

    @property
    def score(self) -> int:
        return self._score

    @property
    def frame_count(self) -> int:
        return self._frame

    @property
    def fish(self) -> Tuple[Fish, ...]:
        return self._fish

    @property
    def hook(self) -> HookState:
        return self._hook

    @property
    def player_x(self) -> float:
        return self._player_x

    def get_current_phase(self) -> Optional[UpdatePhase]:
        """Get the tick phase being run (None outside tick())."""
        return self._current_phase

    def get_phase_description(self, phase: Optional[UpdatePhase] = None) -> str:
        """Get a human-readable description of a phase."""
        if phase is None:
            phase = self._current_phase
        if phase is None:
            return "Not in a tick"
        return PHASE_DESCRIPTIONS.get(phase, phase.name)

    def step_for(self, source: ControlSource) -> float:
        """Distance one application of input moves for a control source."""
        controls = self.config.controls
        if source is ControlSource.DISCRETE:
            return controls.discrete_step
        return controls.continuous_step

    def snapshot(self) -> GameSnapshot:
        """Return an immutable view of the last committed state."""
        with self._lock:
            return GameSnapshot(
                phase=self._phase,
                score=self._score,
                hook=self._hook,
                player_x=self._player_x,
                fish=tuple(f.view() for f in self._fish),
                frame=self._frame,
                caught_fish_id=self._caught_fish_id,
            )

    # ------------------------------------------------------------------
    # Lifecycle commands
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """Start a new game from IDLE.

        Generates a fresh population, zeroes the score and drops the hook
        to its start depth under the player.

        Returns:
            True if the game started, False if not IDLE

        Raises:
            SimulationError: If the generated fish do not have unique ids
        """
        with self._lock:
            if self._phase is not GamePhase.IDLE:
                logger.debug("start() ignored in phase %s", self._phase.name)
                return False

            fish = tuple(self._fish_factory(self.rng))
            if len({f.fish_id for f in fish}) != len(fish):
                raise SimulationError("Fish factory returned duplicate fish ids")
            self._fish = fish
            self._score = 0
            self._hook = HookState(self._player_x, self.config.playfield.hook_start_y)
            self._frame = 0
            self._caught_fish_id = None
            self._clear_input()
            self._phase = GamePhase.RUNNING
            event = GameStartedEvent(fish_count=len(fish), player_x=self._player_x)

        logger.info("Game started with %d fish (player at x=%.1f)", event.fish_count, event.player_x)
        self.event_bus.emit(event)
        return True

    def restart(self) -> bool:
        """Return to IDLE after a game ended.

        The score resets and the hook goes back to its start depth; the
        player keeps its horizontal position. Fish are not regenerated until
        the next start().

        Returns:
            True if the engine went back to IDLE, False if not OVER
        """
        with self._lock:
            if self._phase is not GamePhase.OVER:
                logger.debug("restart() ignored in phase %s", self._phase.name)
                return False

            self._score = 0
            self._hook = HookState(self._player_x, self.config.playfield.hook_start_y)
            self._caught_fish_id = None
            self._clear_input()
            self._phase = GamePhase.IDLE
            event = GameResetEvent(player_x=self._player_x)

        logger.info("Game reset; waiting for start")
        self.event_bus.emit(event)
        return True

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_intent(self, direction: Union[str, Direction], active: bool) -> bool:
        """Press or release a held (continuous) control.

        While held, the direction is applied every tick with the continuous
        step size.

        Raises:
            CommandError: If ``direction`` is not a known direction

        Returns:
            True if accepted, False if the game is not running
        """
        parsed = Direction.parse(direction)
        with self._lock:
            if self._phase is not GamePhase.RUNNING:
                return False
            if active:
                self._held.add(parsed)
            else:
                self._held.discard(parsed)
        return True

    def move_once(self, direction: Union[str, Direction]) -> bool:
        """Queue one discrete step, applied on the next tick.

        Raises:
            CommandError: If ``direction`` is not a known direction

        Returns:
            True if accepted, False if the game is not running
        """
        parsed = Direction.parse(direction)
        with self._lock:
            if self._phase is not GamePhase.RUNNING:
                return False
            self._pulses.append(parsed)
        return True

    def _clear_input(self) -> None:
        self._held.clear()
        self._pulses.clear()

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self) -> Optional[Fish]:
        """Run one frame of the simulation.

        Only does anything while RUNNING. The fish positions computed on the
        catching tick are committed along with the transition to OVER.

        Returns:
            The fish caught on this tick, or None
        """
        with self._lock:
            if self._phase is not GamePhase.RUNNING:
                return None

            work = TickWork(
                hook=self._hook,
                player_x=self._player_x,
                fish=list(self._fish),
                pulses=list(self._pulses),
                held=InputIntent.from_directions(self._held),
            )
            self._pulses.clear()

            try:
                for phase in UpdatePhase:
                    self._current_phase = phase
                    self._phase_handlers[phase](work)
            except Exception:
                logger.error(
                    "Tick %d failed while %s", self._frame + 1, self.get_phase_description().lower()
                )
                raise
            finally:
                self._current_phase = None

            self._commit(work)

        for event in work.events:
            self.event_bus.emit(event)
        return work.caught

    def _run_input_phase(self, work: TickWork) -> None:
        playfield = self.config.playfield
        pulse_step = self.step_for(ControlSource.DISCRETE)
        for pulse in work.pulses:
            work.hook, work.player_x = apply_intent(
                work.hook,
                work.player_x,
                InputIntent.from_directions((pulse,)),
                pulse_step,
                playfield,
            )
        if not work.held.is_empty:
            work.hook, work.player_x = apply_intent(
                work.hook,
                work.player_x,
                work.held,
                self.step_for(ControlSource.CONTINUOUS),
                playfield,
            )

    def _run_kinematics_phase(self, work: TickWork) -> None:
        playfield = self.config.playfield
        work.fish = advance_all(work.fish, min_x=playfield.fish_min_x, max_x=playfield.fish_max_x)

    def _run_collision_phase(self, work: TickWork) -> None:
        work.caught = check_collisions(work.hook, work.fish, self._detector)

    def _run_frame_end_phase(self, work: TickWork) -> None:
        if work.caught is None:
            return
        frame = self._frame + 1
        work.events.append(
            FishCaughtEvent(
                fish_id=work.caught.fish_id,
                value=work.caught.value,
                tier=work.caught.tier,
                frame=frame,
            )
        )
        work.events.append(GameOverEvent(final_score=self._score + work.caught.value, frame=frame))

    def _commit(self, work: TickWork) -> None:
        self._hook = work.hook
        self._player_x = work.player_x
        self._fish = tuple(work.fish)
        self._frame += 1
        if work.caught is not None:
            self._score += work.caught.value
            self._caught_fish_id = work.caught.fish_id
            self._clear_input()
            self._phase = GamePhase.OVER
            logger.info(
                "Caught fish %d (%s) worth %d on frame %d; final score %d",
                work.caught.fish_id,
                work.caught.tier,
                work.caught.value,
                self._frame,
                self._score,
            )

    def _generate_fish(self, rng: random.Random) -> List[Fish]:
        playfield = self.config.playfield
        return generate_fish(
            rng, self.config.tiers, min_x=playfield.fish_min_x, max_x=playfield.fish_max_x
        )
