"""
utils/viewport.py — Letterboxing the native canvas into the window.

The game is laid out at SCREEN_W x SCREEN_H. The window (desktop or the
pygbag canvas in a browser tab) can be any size, so each frame the native
surface is scaled uniformly to the largest size that fits and centred,
with black bars filling the rest.

Usage:
    viewport = Viewport(window_w, window_h)
    viewport.present(window, game_surface)

    if viewport.contains(*event.pos):
        # click landed on the game, not a bar
"""

import pygame
from settings import SCREEN_W, SCREEN_H


class Viewport:
    """Where the scaled game surface lands inside the window.

    Attributes:
        scale: Uniform scale factor from native to window pixels.
        rect:  pygame.Rect of the scaled game area in window coordinates.
    """

    def __init__(self, window_w: int, window_h: int) -> None:
        self.scale = 1.0
        self.rect = pygame.Rect(0, 0, SCREEN_W, SCREEN_H)
        self.resize(window_w, window_h)

    def resize(self, window_w: int, window_h: int) -> None:
        """Recompute the fit. Call on every VIDEORESIZE."""
        self.scale = min(window_w / SCREEN_W, window_h / SCREEN_H)
        w = int(SCREEN_W * self.scale)
        h = int(SCREEN_H * self.scale)
        self.rect = pygame.Rect((window_w - w) // 2, (window_h - h) // 2, w, h)

    def present(self, window: pygame.Surface, game_surface: pygame.Surface) -> None:
        """Clear the bars and blit the scaled game surface."""
        window.fill((0, 0, 0))
        if self.rect.size == game_surface.get_size():
            window.blit(game_surface, self.rect.topleft)
        else:
            window.blit(pygame.transform.smoothscale(game_surface, self.rect.size), self.rect.topleft)

    def contains(self, window_x: int, window_y: int) -> bool:
        """Return True if a window coordinate falls on the game area."""
        return self.rect.collidepoint(window_x, window_y)
