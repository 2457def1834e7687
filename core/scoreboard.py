"""
core/scoreboard.py — Current score, best score and its persistence.

The best score lives in one named storage slot as a decimal integer
string. Storage is a narrow capability so the scoreboard never touches a
platform API directly:

    load() -> int | None     None when the slot has never been written
    save(value) -> bool      False when the write did not stick

Persistence is fallible but never fatal. A missing, corrupt or unreadable
slot loads as best = 0; a failed write leaves the in-memory best correct
for the rest of the process. Neither failure reaches the caller.

Usage:
    board = Scoreboard(FileScoreStorage(SAVE_DIR))
    board.increment()
    if board.finalize():
        # new record, already persisted
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from settings import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class ScoreStorage(Protocol):
    """Durable slot holding the best score."""

    def load(self) -> int | None: ...

    def save(self, value: int) -> bool: ...


class FileScoreStorage:
    """One file per slot under a directory, contents are the score as text.

    Attributes:
        path: Full path of the slot file.
    """

    def __init__(self, directory: Path | str, key: str = HIGH_SCORE_KEY) -> None:
        self.path = Path(directory) / key

    def load(self) -> int | None:
        """Read the slot.

        Returns:
            The stored integer, or None if the slot does not exist.

        Raises:
            ValueError: If the slot holds something other than an integer.
            OSError:    If the file exists but cannot be read.
        """
        if not self.path.exists():
            return None
        return int(self.path.read_text(encoding="utf-8").strip())

    def save(self, value: int) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(value)), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
            return False
        return True


class MemoryScoreStorage:
    """In-process slot. Used when no writable directory exists, and in tests."""

    def __init__(self, value: str | None = None) -> None:
        self.value = value

    def load(self) -> int | None:
        if self.value is None:
            return None
        return int(self.value)

    def save(self, value: int) -> bool:
        self.value = str(int(value))
        return True


def open_storage(directory: Path | str, key: str = HIGH_SCORE_KEY) -> ScoreStorage:
    """Return file storage under `directory`, or memory storage if it is unusable.

    Args:
        directory: Where the slot file should live. Created if missing.
        key:       Slot name.
    """
    try:
        Path(directory).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Save directory %s unavailable, high score will not persist: %s",
                       directory, exc)
        return MemoryScoreStorage()
    return FileScoreStorage(directory, key)


class Scoreboard:
    """Session score plus the persisted best.

    Attributes:
        score:    Points in the current session. Never decreases mid-session.
        best:     Highest finalized score seen. Never decreases.
        _storage: The capability best is read from and written to.
    """

    def __init__(self, storage: ScoreStorage) -> None:
        self._storage = storage
        self.score: int = 0
        self.best:  int = 0
        self.load()

    def load(self) -> None:
        """Pull best from storage. Never raises and never lowers best.

        A failed or unreadable load leaves best where it was, which is 0
        on a fresh scoreboard.
        """
        try:
            stored = self._storage.load()
            if stored is not None:
                stored = int(stored)
        except Exception as exc:
            logger.warning("High score unavailable, keeping best=%d: %s", self.best, exc)
            return

        if stored is not None and stored > 0:
            self.best = max(self.best, stored)

    def increment(self) -> None:
        """Award one point."""
        self.score += 1

    def reset_score(self) -> None:
        """Zero the session score. Best is untouched."""
        self.score = 0

    def finalize(self) -> bool:
        """Close the session, promoting score to best if it beats it.

        This is the only path that writes to storage.

        Returns:
            True if score set a new record, False otherwise.
        """
        if self.score <= self.best:
            return False

        self.best = self.score
        try:
            saved = self._storage.save(self.best)
        except Exception as exc:
            logger.warning("High score write failed: %s", exc)
            saved = False
        if not saved:
            logger.warning("New best %d kept in memory only", self.best)
        return True
