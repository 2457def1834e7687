"""
Tests for the Scoreboard and its storage backends.
"""

import pytest

from core.scoreboard import (
    FileScoreStorage, MemoryScoreStorage, Scoreboard, open_storage,
)


class BrokenStorage:
    """Storage whose every operation fails."""

    def load(self):
        raise OSError("storage unavailable")

    def save(self, value):
        raise OSError("disk full")


class RefusingStorage:
    """Storage that reports write failures without raising."""

    def __init__(self):
        self.attempts = []

    def load(self):
        return 3

    def save(self, value):
        self.attempts.append(value)
        return False


class BlockedStorage:
    """Storage backed by a bridge that raises its own error type."""

    def load(self):
        raise RuntimeError("localStorage blocked")

    def save(self, value):
        raise RuntimeError("localStorage blocked")


class RawStorage:
    """Storage that hands back whatever it holds, unconverted."""

    def __init__(self, value):
        self.value = value

    def load(self):
        return self.value

    def save(self, value):
        self.value = value
        return True


class FlakyStorage:
    """Loads once, then fails every later read."""

    def __init__(self, value):
        self.value = value
        self.reads = 0

    def load(self):
        self.reads += 1
        if self.reads > 1:
            raise OSError("slot went away")
        return self.value

    def save(self, value):
        return True


class TestScoreboard:

    def test_starts_at_zero_with_empty_storage(self, scoreboard):
        """Empty storage gives score 0 and best 0."""
        assert scoreboard.score == 0
        assert scoreboard.best == 0

    def test_loads_best_on_construction(self):
        """The stored best is read when the board is built."""
        board = Scoreboard(MemoryScoreStorage("12"))
        assert board.best == 12

    @pytest.mark.parametrize("stored", ["abc", "", "1.5", "-4"])
    def test_corrupt_slot_loads_as_zero(self, stored):
        """Unparseable or negative slots load as 0."""
        board = Scoreboard(MemoryScoreStorage(stored))
        assert board.best == 0

    def test_unavailable_storage_loads_as_zero(self):
        """An OSError on load degrades to best 0."""
        board = Scoreboard(BrokenStorage())
        assert board.best == 0

    def test_any_load_error_loads_as_zero(self):
        """A non-OS error raised by storage does not escape construction."""
        board = Scoreboard(BlockedStorage())
        assert board.best == 0

    def test_string_value_from_storage_is_coerced(self):
        """A storage returning the decimal string still yields an int best."""
        board = Scoreboard(RawStorage("12"))
        assert board.best == 12
        assert isinstance(board.best, int)

    @pytest.mark.parametrize("stored", [object(), [3], "twelve"])
    def test_unconvertible_value_from_storage_loads_as_zero(self, stored):
        """Values int() cannot take load as 0 rather than raising."""
        assert Scoreboard(RawStorage(stored)).best == 0

    def test_reload_failure_keeps_best(self):
        """A failed second load leaves the best from the first load."""
        board = Scoreboard(FlakyStorage("9"))
        assert board.best == 9
        board.load()
        assert board.best == 9

    def test_reload_never_lowers_best(self):
        """Reloading a smaller stored value keeps the higher in-memory best."""
        storage = RawStorage(2)
        board = Scoreboard(storage)
        for _ in range(6):
            board.increment()
        board.finalize()
        storage.value = 1
        board.load()
        assert board.best == 6

    def test_reload_picks_up_higher_value(self):
        """A higher value written elsewhere is adopted on reload."""
        storage = MemoryScoreStorage("4")
        board = Scoreboard(storage)
        storage.value = "11"
        board.load()
        assert board.best == 11

    def test_increment_and_reset(self, scoreboard):
        """increment adds one; reset_score zeroes the session score."""
        scoreboard.increment()
        scoreboard.increment()
        assert scoreboard.score == 2
        scoreboard.reset_score()
        assert scoreboard.score == 0

    def test_finalize_new_record_persists(self, scoreboard, storage):
        """A new record is written to storage."""
        for _ in range(4):
            scoreboard.increment()
        assert scoreboard.finalize() is True
        assert scoreboard.best == 4
        assert storage.value == "4"

    def test_finalize_without_record_does_not_write(self):
        """Tying the best is not a record and writes nothing."""
        storage = MemoryScoreStorage("10")
        board = Scoreboard(storage)
        for _ in range(10):
            board.increment()
        assert board.finalize() is False
        assert board.best == 10
        assert storage.value == "10"

    def test_round_trip_through_fresh_scoreboard(self, storage):
        """A finalized best is visible to a later scoreboard."""
        board = Scoreboard(storage)
        for _ in range(7):
            board.increment()
        board.finalize()
        assert Scoreboard(storage).best == 7

    def test_write_failure_keeps_best_in_memory(self):
        """An OSError on save still reports the record."""
        board = Scoreboard(BrokenStorage())
        board.increment()
        assert board.finalize() is True
        assert board.best == 1

    def test_any_write_error_keeps_best_in_memory(self):
        """A non-OS error on save is logged, not raised."""
        board = Scoreboard(BlockedStorage())
        for _ in range(3):
            board.increment()
        assert board.finalize() is True
        assert board.best == 3

    def test_refused_write_keeps_best_in_memory(self):
        """save() returning False still counts as a record."""
        storage = RefusingStorage()
        board = Scoreboard(storage)
        for _ in range(5):
            board.increment()
        assert board.finalize() is True
        assert board.best == 5
        assert storage.attempts == [5]

    def test_best_never_decreases(self, scoreboard):
        """A weaker later run leaves best alone."""
        scoreboard.increment()
        scoreboard.increment()
        scoreboard.finalize()
        scoreboard.reset_score()
        scoreboard.increment()
        scoreboard.finalize()
        assert scoreboard.best == 2


class TestFileScoreStorage:

    def test_missing_slot_is_none(self, tmp_path):
        """No file means no stored best."""
        assert FileScoreStorage(tmp_path).load() is None

    def test_save_writes_decimal_string(self, tmp_path):
        """The slot holds the score as plain decimal text."""
        storage = FileScoreStorage(tmp_path, key="slot")
        assert storage.save(42) is True
        assert (tmp_path / "slot").read_text(encoding="utf-8") == "42"

    def test_save_creates_directory(self, tmp_path):
        """Missing parent directories are created on save."""
        storage = FileScoreStorage(tmp_path / "nested" / "dir")
        assert storage.save(3) is True
        assert storage.load() == 3

    def test_corrupt_file_raises_value_error(self, tmp_path):
        """The raw backend reports corruption; the scoreboard absorbs it."""
        (tmp_path / "flappyHighScore").write_text("garbage", encoding="utf-8")
        with pytest.raises(ValueError):
            FileScoreStorage(tmp_path).load()

    def test_scoreboard_survives_corrupt_file(self, tmp_path):
        """A garbage file loads as best 0."""
        (tmp_path / "flappyHighScore").write_text("garbage", encoding="utf-8")
        assert Scoreboard(FileScoreStorage(tmp_path)).best == 0

    def test_unwritable_location_returns_false(self, tmp_path):
        """A path under a regular file cannot be written."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        storage = FileScoreStorage(blocker / "sub")
        assert storage.save(1) is False

    def test_round_trip_across_scoreboards(self, tmp_path):
        """Two scoreboards on the same directory share the best."""
        first = Scoreboard(FileScoreStorage(tmp_path))
        for _ in range(9):
            first.increment()
        assert first.finalize() is True
        assert Scoreboard(FileScoreStorage(tmp_path)).best == 9


class TestOpenStorage:

    def test_returns_file_storage_for_usable_directory(self, tmp_path):
        """A writable directory gets a file-backed slot."""
        storage = open_storage(tmp_path / "save")
        assert isinstance(storage, FileScoreStorage)
        assert (tmp_path / "save").is_dir()

    def test_falls_back_to_memory(self, tmp_path):
        """An unusable directory falls back to an in-memory slot."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        assert isinstance(open_storage(blocker / "sub"), MemoryScoreStorage)
