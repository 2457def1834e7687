"""
core/audio.py — Sound effects for Flappy Canvas.

Generates every sound programmatically using pure Python math — no numpy,
no audio files. Compatible with both CPython and pygbag WASM.

Wave generation uses struct.pack to build raw PCM bytes that
pygame.mixer.Sound accepts directly via the buffer protocol. Each note
decays exponentially from its start volume to ~10% of it, which is what
keeps the short blips from clicking.

Sound design:
    jump      — 300Hz sine blip, 0.1s               — light and quick
    score     — 400 → 500 → 600Hz sine arpeggio     — rising reward
    game_over — 300 → 250 → 200Hz sawtooth descent  — harsh, final

Usage:
    audio = Audio()
    audio.init()
    audio.play("jump")
"""

from __future__ import annotations
import logging
import math
import struct
import pygame

logger = logging.getLogger(__name__)

# ── Synthesis constants ───────────────────────────────────────────────────────
_SAMPLE_RATE = 22050
_MAX_AMP     = 32767   # int16 max
_DECAY_FLOOR = 0.1     # fraction of start volume reached at the end of a note


def _pack(samples: list[float]) -> bytes:
    """Pack float samples [-1.0, 1.0] into signed 16-bit stereo PCM bytes.

    Mono is duplicated into L+R so the stereo mixer accepts it.
    """
    buf = []
    for s in samples:
        v = int(max(-1.0, min(1.0, s)) * _MAX_AMP)
        buf.append(struct.pack("<hh", v, v))
    return b"".join(buf)


def _envelope(i: int, n: int) -> float:
    """Exponential decay from 1.0 to _DECAY_FLOOR across n samples."""
    return _DECAY_FLOOR ** (i / n)


def _sine(freq: float, duration: float, volume: float) -> list[float]:
    """Generate a decaying sine note.

    Args:
        freq:     Frequency in Hz.
        duration: Duration in seconds.
        volume:   Start amplitude in [0.0, 1.0].

    Returns:
        List of float samples.
    """
    n = int(_SAMPLE_RATE * duration)
    return [
        volume * _envelope(i, n) * math.sin(2 * math.pi * freq * i / _SAMPLE_RATE)
        for i in range(n)
    ]


def _saw(freq: float, duration: float, volume: float) -> list[float]:
    """Generate a decaying sawtooth note. Same arguments as _sine()."""
    n = int(_SAMPLE_RATE * duration)
    period = _SAMPLE_RATE / freq
    return [
        volume * _envelope(i, n) * (2.0 * ((i % period) / period) - 1.0)
        for i in range(n)
    ]


def _stagger(notes: list[list[float]], step: float) -> list[float]:
    """Mix notes that start `step` seconds apart, letting tails overlap."""
    offset = int(_SAMPLE_RATE * step)
    total = offset * (len(notes) - 1) + max(len(n) for n in notes)
    mixed = [0.0] * total
    for k, note in enumerate(notes):
        start = k * offset
        for i, s in enumerate(note):
            mixed[start + i] += s
    return mixed


def _make_sound(samples: list[float]) -> pygame.mixer.Sound:
    return pygame.mixer.Sound(buffer=_pack(samples))


# ── Audio manager ─────────────────────────────────────────────────────────────

class Audio:
    """Owns the synthesized sound bank.

    Attributes:
        enabled:    Player-facing mute toggle.
        _sounds:    Dict mapping sound name → pygame.mixer.Sound.
        _available: True if pygame.mixer initialised successfully.
    """

    def __init__(self) -> None:
        """Create an uninitialised Audio manager. Call init() before use."""
        self.enabled:    bool = True
        self._sounds:    dict[str, pygame.mixer.Sound] = {}
        self._available: bool = False

    @property
    def available(self) -> bool:
        return self._available

    def init(self) -> None:
        """Initialise pygame.mixer and synthesize all sounds.

        Safe to call multiple times. Sound is disabled, not fatal, if the
        mixer cannot start.
        """
        if self._available:
            return
        try:
            pygame.mixer.pre_init(_SAMPLE_RATE, -16, 2, 512)
            pygame.mixer.init()
            self._generate_sounds()
            self._available = True
        except pygame.error as exc:
            logger.warning("Audio not supported, sound disabled: %s", exc)
            self._available = False

    def _generate_sounds(self) -> None:
        self._sounds["jump"] = _make_sound(_sine(300, 0.10, volume=0.10))

        self._sounds["score"] = _make_sound(_stagger(
            [_sine(f, 0.15, volume=0.08) for f in (400, 500, 600)],
            step=0.10,
        ))

        self._sounds["game_over"] = _make_sound(_stagger(
            [_saw(f, 0.20, volume=0.10) for f in (300, 250, 200)],
            step=0.15,
        ))

    def play(self, name: str) -> None:
        """Play a sound by name. Silent no-op if unavailable, muted or unknown.

        Args:
            name: One of: jump, score, game_over.
        """
        if not (self._available and self.enabled):
            return
        sound = self._sounds.get(name)
        if sound:
            sound.play()

    def toggle(self) -> bool:
        """Flip the mute toggle and return the new enabled state."""
        self.enabled = not self.enabled
        logger.info("Sound %s", "on" if self.enabled else "off")
        return self.enabled

    def quit(self) -> None:
        """Shut down pygame.mixer cleanly on game exit."""
        if self._available:
            pygame.mixer.quit()
            self._available = False
