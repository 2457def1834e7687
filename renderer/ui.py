"""
renderer/ui.py — HUD and overlay rendering for Flappy Canvas.

Draws everything that sits on top of the world:
    - Score and high-score HUD (top-left, drop shadow)
    - Start overlay (IDLE)
    - Game over box with final score, high score and record banner

All functions are stateless — they take explicit data arguments and draw
to the provided surface. No global state is read except constants from
settings.py.
"""

import pygame
from settings import (
    SCREEN_W, SCREEN_H,
    COLOR,
    FONT_FAMILY, FONT_SIZE_XL, FONT_SIZE_LG, FONT_SIZE_MD, FONT_SIZE_SM,
)
from utils.color import RGBColor


# ── Font cache ────────────────────────────────────────────────────────────────
# SysFont falls back to pygame's default font if none of the names exist.
_fonts: dict[tuple[int, bool], pygame.font.Font] = {}


def _font(size: int, bold: bool = False) -> pygame.font.Font:
    key = (size, bold)
    if key not in _fonts:
        _fonts[key] = pygame.font.SysFont(FONT_FAMILY, size, bold=bold)
    return _fonts[key]


def _shadowed(surface: pygame.Surface, text: str, font: pygame.font.Font,
              color: RGBColor, pos: tuple[int, int]) -> None:
    """Blit text with a 2px drop shadow."""
    shadow = font.render(text, True, COLOR["text_shadow"])
    surface.blit(shadow, (pos[0] + 2, pos[1] + 2))
    surface.blit(font.render(text, True, color), pos)


def _centered(surface: pygame.Surface, text: str, font: pygame.font.Font,
              color: RGBColor, y: int) -> None:
    label = font.render(text, True, color)
    surface.blit(label, (SCREEN_W // 2 - label.get_width() // 2, y))


# ── HUD ───────────────────────────────────────────────────────────────────────

def draw_hud(surface: pygame.Surface, score: int, best: int) -> None:
    """Draw the running score and, once one exists, the high score.

    Args:
        surface: Native-resolution game surface.
        score:   Current session score.
        best:    Persisted best score. Hidden while 0.
    """
    _shadowed(surface, f"Score: {score}", _font(FONT_SIZE_MD, bold=True), COLOR["text"], (12, 12))
    if best > 0:
        _shadowed(surface, f"High: {best}", _font(FONT_SIZE_SM, bold=True),
                  COLOR["high_score"], (12, 36))


# ── Start overlay ─────────────────────────────────────────────────────────────

def draw_start_overlay(surface: pygame.Surface) -> None:
    """Draw the translucent how-to-play banner shown while IDLE."""
    box = pygame.Rect(24, SCREEN_H // 2 - 50, SCREEN_W - 48, 100)
    overlay = pygame.Surface(box.size, pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 166))
    surface.blit(overlay, box.topleft)

    title = _font(FONT_SIZE_MD, bold=True).render("Click or press Space to flap.", True, COLOR["text"])
    hint  = _font(FONT_SIZE_SM).render("Press Enter to start, R to reset.", True, COLOR["text"])
    surface.blit(title, (box.x + 12, box.y + 24))
    surface.blit(hint,  (box.x + 12, box.y + 56))


# ── Game over ─────────────────────────────────────────────────────────────────

def draw_game_over(surface: pygame.Surface, score: int, best: int, new_record: bool) -> None:
    """Draw the game over box over a dimmed frozen frame.

    Args:
        surface:    Native-resolution game surface.
        score:      Final score of the session.
        best:       Best score after finalizing. Hidden while 0.
        new_record: True if this session set the best score.
    """
    overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 216))
    surface.blit(overlay, (0, 0))

    box_h = 180
    box = pygame.Rect(40, SCREEN_H // 2 - box_h // 2, SCREEN_W - 80, box_h)
    pygame.draw.rect(surface, COLOR["box"], box)
    pygame.draw.rect(surface, COLOR["box_border"], box, 3)

    _centered(surface, "GAME OVER", _font(FONT_SIZE_XL, bold=True), COLOR["text"], box.y + 18)
    _centered(surface, f"Final Score: {score}", _font(FONT_SIZE_LG, bold=True),
              COLOR["text"], box.y + 60)

    if best > 0:
        _centered(surface, f"High Score: {best}", _font(FONT_SIZE_MD, bold=True),
                  COLOR["high_score"], box.y + 94)

    if new_record:
        _centered(surface, "NEW HIGH SCORE!", _font(FONT_SIZE_MD, bold=True),
                  COLOR["record"], box.y + 122)

    _centered(surface, "Press R to reset or Enter to play again.", _font(FONT_SIZE_SM),
              COLOR["text_dim"], box.y + box_h - 26)
