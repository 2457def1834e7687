"""
main.py — Entry point and frame loop for Flappy Canvas.

Responsibilities:
    - Configure logging
    - Initialise pygame and create the window
    - Build the simulation (storage → scoreboard → session) and the presenter
    - Own the Viewport (native canvas → window letterboxing)
    - Run the main loop: handle events → update → render → flip
    - Wrap the loop in async for pygbag (WASM / browser export)

Architecture note:
    main.py is intentionally thin. It owns pygame lifecycle and the
    window — nothing else. Simulation lives in core/session.py, input
    glue and drawing dispatch in core/game.py.

pygbag compatibility:
    The game loop is an async function driven by asyncio.run(). pygbag
    replaces asyncio with its own event loop that yields to the browser
    each frame. No other changes needed.

Usage (local):
    python main.py

Usage (WASM export):
    pygbag .
"""

import asyncio
import logging
import pygame
from settings import SCREEN_W, SCREEN_H, FPS, TITLE, SAVE_DIR, LOG_LEVEL
from utils.viewport import Viewport
from core.audio import Audio
from core.game import Game
from core.scoreboard import Scoreboard, open_storage
from core.session import GameSession, WorldConfig

# ── Window configuration ──────────────────────────────────────────────────────
# Desktop window starts slightly larger than native for comfortable play.
# pygbag will override this with the canvas size.
_WINDOW_SCALE = 1.5
_WINDOW_W     = int(SCREEN_W * _WINDOW_SCALE)
_WINDOW_H     = int(SCREEN_H * _WINDOW_SCALE)

logger = logging.getLogger(__name__)


def build_game() -> Game:
    """Wire storage, scoreboard, session and presenter together."""
    scoreboard = Scoreboard(open_storage(SAVE_DIR))
    session = GameSession(scoreboard, WorldConfig.from_settings())
    return Game(session)


async def main() -> None:
    """Async main loop — compatible with both CPython and pygbag WASM.

    Each iteration yields to the event loop via asyncio.sleep(0), which
    pygbag uses to hand control back to the browser.
    """
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    pygame.init()

    # ── Window setup ──────────────────────────────────────────────────────────
    window = pygame.display.set_mode((_WINDOW_W, _WINDOW_H), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)

    # Native resolution surface — all game rendering targets this
    game_surface = pygame.Surface((SCREEN_W, SCREEN_H))
    viewport = Viewport(_WINDOW_W, _WINDOW_H)

    # ── Subsystems ────────────────────────────────────────────────────────────
    clock = pygame.Clock()
    game = build_game()

    audio = Audio()
    audio.init()
    game.set_audio(audio)

    logger.info("%s ready (%dx%d @ %d fps)", TITLE, SCREEN_W, SCREEN_H, FPS)

    # ── Main loop ─────────────────────────────────────────────────────────────
    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0   # seconds since last frame

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.VIDEORESIZE:
                viewport.resize(event.w, event.h)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                # Clicks in the letterbox bars are not game input
                if viewport.contains(*event.pos):
                    game.handle_event(event)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    game.handle_event(event)

        game.update(dt)

        game.render(game_surface)
        viewport.present(window, game_surface)
        pygame.display.flip()

        await asyncio.sleep(0)

    # ── Cleanup ───────────────────────────────────────────────────────────────
    audio.quit()
    pygame.quit()


def run() -> None:
    """Console-script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
