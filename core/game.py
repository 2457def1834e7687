"""
core/game.py — Presenter and input glue for Flappy Canvas.

Game sits between pygame and the simulation. It owns nothing the
simulation needs; it translates input into GameSession calls, drives
update() at a fixed rate, plays sounds and draws snapshots.

Input:
    Space / left click — flap. If no run is active this also starts one,
                         except on the game over screen, which only
                         Start or Reset leave.
    Enter / S          — Start (also replays straight from game over)
    R                  — Reset to the start screen
    M                  — Toggle sound

Fixed step:
    Frames arrive at whatever rate the display manages. update(dt)
    accumulates real time and calls session.update() once per
    1 / TICK_RATE seconds, at most MAX_STEPS_PER_FRAME times per frame so
    a long stall cannot trigger a burst of catch-up ticks.

Audio hookup:
    All sound triggers live here, derived from what the session reports:
    a successful flap → "jump", a score change → "score", the tick that
    enters GAME_OVER → "game_over".

game.py does NOT call pygame.display.flip() or manage the window.
That is main.py's responsibility. Game writes to the game_surface
passed into render().
"""

from __future__ import annotations
import logging
import pygame

from core.session import GameSession, GameState
from renderer import scene, ui
from settings import TICK_RATE, MAX_STEPS_PER_FRAME

logger = logging.getLogger(__name__)

_STEP = 1.0 / TICK_RATE

_FLAP_KEYS  = (pygame.K_SPACE,)
_START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_s)
_RESET_KEYS = (pygame.K_r,)
_SOUND_KEYS = (pygame.K_m,)


class Game:
    """Routes input to a GameSession and draws its snapshots.

    Attributes:
        session:      The simulation being presented.
        _audio:       Audio instance injected via set_audio(). None until set.
        _accumulator: Real seconds not yet consumed by fixed ticks.
    """

    def __init__(self, session: GameSession) -> None:
        self.session = session
        self._audio = None
        self._accumulator: float = 0.0

    # ── Audio ─────────────────────────────────────────────────────────────────

    def set_audio(self, audio) -> None:
        """Inject the Audio instance after construction.

        Called by main.py after audio.init(). Keeping audio out of
        __init__ avoids pygame.mixer being initialised before pygame.init().
        """
        self._audio = audio

    def _play(self, name: str) -> None:
        if self._audio:
            self._audio.play(name)

    # ── Buttons ───────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Start button: begin a run unless one is in progress."""
        if self.session.start():
            self._accumulator = 0.0

    def reset(self) -> None:
        """Reset button: back to the start screen."""
        self.session.reset()
        self._accumulator = 0.0

    def flap(self) -> None:
        """Flap input, starting a run first when none is active.

        The game over screen swallows flaps so a panicked tap right after
        dying does not instantly restart.
        """
        if self.session.state is GameState.GAME_OVER:
            return
        if self.session.state is GameState.IDLE:
            self.start()
        if self.session.flap():
            self._play("jump")

    # ── Event handling ────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one pygame event.

        Mouse positions are not used: any left click on the game area is a
        flap. main.py filters clicks that land in letterbox bars.
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.flap()

        elif event.type == pygame.KEYDOWN:
            if event.key in _FLAP_KEYS:
                self.flap()
            elif event.key in _START_KEYS:
                self.start()
            elif event.key in _RESET_KEYS:
                self.reset()
            elif event.key in _SOUND_KEYS and self._audio:
                self._audio.toggle()

    # ── Per-frame update ──────────────────────────────────────────────────────

    def update(self, dt: float) -> int:
        """Consume dt seconds of real time as fixed simulation ticks.

        Args:
            dt: Seconds since the last frame.

        Returns:
            Number of ticks run this frame.
        """
        if self.session.state is not GameState.RUNNING:
            self._accumulator = 0.0
            return 0

        self._accumulator += dt
        steps = 0
        while self._accumulator >= _STEP and steps < MAX_STEPS_PER_FRAME:
            self._accumulator -= _STEP
            steps += 1

            score_before = self.session.scoreboard.score
            state = self.session.update()
            if self.session.scoreboard.score > score_before:
                self._play("score")
            if state is GameState.GAME_OVER:
                self._play("game_over")
                self._accumulator = 0.0
                break

        if steps == MAX_STEPS_PER_FRAME:
            # Drop the backlog rather than replay it next frame
            if self._accumulator > _STEP:
                logger.debug("Dropped %.3fs of simulation backlog", self._accumulator - _STEP)
                self._accumulator = _STEP
        return steps

    # ── Rendering ─────────────────────────────────────────────────────────────

    def render(self, surface: pygame.Surface) -> None:
        """Draw the current snapshot onto the native game surface."""
        snap = self.session.snapshot()
        scene.draw_scene(surface, snap)

        if snap.state is GameState.IDLE:
            ui.draw_start_overlay(surface)
            return

        ui.draw_hud(surface, snap.score, snap.best)
        if snap.state is GameState.GAME_OVER:
            ui.draw_game_over(surface, snap.score, snap.best, snap.new_record)
