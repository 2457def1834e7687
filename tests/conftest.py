"""
Shared fixtures. pygame runs headless: the dummy SDL drivers must be set
before pygame is first imported.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
import pygame

from core.scoreboard import MemoryScoreStorage, Scoreboard
from core.session import GameSession, WorldConfig


class StubRandom:
    """Returns a fixed value from uniform() and records the bounds asked for."""

    def __init__(self, value: float = 300.0):
        self.value = value
        self.calls = []

    def uniform(self, a, b):
        self.calls.append((a, b))
        return self.value


class FakeAudio:
    """Records play() calls instead of making noise."""

    def __init__(self):
        self.played = []
        self.enabled = True

    def play(self, name):
        self.played.append(name)

    def toggle(self):
        self.enabled = not self.enabled
        return self.enabled


@pytest.fixture
def stub_rng():
    return StubRandom()


@pytest.fixture
def storage():
    return MemoryScoreStorage()


@pytest.fixture
def scoreboard(storage):
    return Scoreboard(storage)


@pytest.fixture
def config():
    return WorldConfig()


@pytest.fixture
def session(scoreboard, config, stub_rng):
    return GameSession(scoreboard, config, rng=stub_rng)


@pytest.fixture
def fake_audio():
    return FakeAudio()


@pytest.fixture(scope="session")
def pygame_display():
    pygame.init()
    yield
    pygame.quit()
