from typing import Callable, NamedTuple, Optional, Set, Tuple
from enum import Enum, auto
import logging
import time

from ..puzzle.common import Cell, CellPosition, Difficulty, Grid, LockedMask, copy_grid
from ..puzzle.generator import PuzzleGenerator, PuzzleIdentifier
from ..puzzle.puzzle_types import BinaryGridPuzzle, Hint
from ..puzzle.verifier import is_complete, validate
from .levels import calculate_stars

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    PLAYING = auto()
    PAUSED = auto()
    WON = auto()


class CompletionRecord(NamedTuple):
    identifier: Optional[PuzzleIdentifier]
    elapsed_time: float
    success: bool


def _in_bounds(grid: Grid, row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid)


def edit(grid: Grid, locked: LockedMask, row: int, col: int,
         value: Cell) -> Tuple[Grid, Set[CellPosition], bool]:
    """
    Applies one player edit without touching the input grid.

    Locked or out-of-range targets are ignored: the returned grid is an
    unchanged copy.

    Returns:
        (new grid, error set, complete) where complete means no empty
        cell and no errors.
    """
    new_grid = copy_grid(grid)
    if not _in_bounds(grid, row, col):
        logger.debug(f"Ignoring edit outside the grid at ({row},{col}).")
    elif locked[row][col]:
        logger.debug(f"Ignoring edit of locked cell ({row},{col}).")
    else:
        new_grid[row][col] = value
    errors = validate(new_grid)
    return new_grid, errors, is_complete(new_grid) and not errors


class BinaryGridGame:
    """Holds one play-through: grid, locked mask, errors, status and timer."""

    def __init__(self, difficulty: Difficulty, identifier: Optional[PuzzleIdentifier] = None,
                 generator: Optional[PuzzleGenerator] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.difficulty = difficulty
        self.identifier = identifier
        self.generator = generator or PuzzleGenerator()
        self._clock = clock

        self.puzzle: Optional[BinaryGridPuzzle] = None
        self.grid: Grid = []
        self.locked: LockedMask = []
        self.errors: Set[CellPosition] = set()
        self.status = GameStatus.PLAYING
        self.move_count = 0
        self._start_time = 0.0
        self._finish_time: Optional[float] = None
        self._paused_at: Optional[float] = None
        self._paused_total = 0.0

        self._new_puzzle(self.identifier)

    @property
    def grid_size(self) -> int:
        return self.difficulty.grid_size

    def _new_puzzle(self, identifier: Optional[PuzzleIdentifier]) -> None:
        self.puzzle = self.generator.generate_puzzle(self.difficulty, identifier)
        self.grid = self.puzzle.starting_grid()
        self.locked = self.puzzle.locked
        self.errors = set()
        self.status = GameStatus.PLAYING
        self.move_count = 0
        self._start_time = self._clock()
        self._finish_time = None
        self._paused_at = None
        self._paused_total = 0.0

    # ------------------------------------------------------------------
    # Gameplay
    # ------------------------------------------------------------------

    def _can_edit(self, row: int, col: int) -> bool:
        if self.status is not GameStatus.PLAYING:
            logger.debug(f"Edit at ({row},{col}) rejected: game is {self.status.name}.")
            return False
        if not _in_bounds(self.grid, row, col):
            logger.debug(f"Edit at ({row},{col}) rejected: out of bounds.")
            return False
        if self.locked[row][col]:
            logger.debug(f"Edit at ({row},{col}) rejected: cell is locked.")
            return False
        return True

    def set_cell(self, row: int, col: int, value: Cell) -> bool:
        """Places `value`; returns False (and changes nothing) if the edit is not allowed."""
        if not self._can_edit(row, col):
            return False
        self.grid, self.errors, complete = edit(self.grid, self.locked, row, col, value)
        self.move_count += 1
        if complete:
            self._win()
        return True

    def toggle_cell(self, row: int, col: int) -> bool:
        """Cycles a cell empty -> red -> blue -> empty."""
        if not self._can_edit(row, col):
            return False
        return self.set_cell(row, col, self.grid[row][col].next())

    def _win(self) -> None:
        self._finish_time = self._clock()
        self.status = GameStatus.WON
        logger.info(f"Puzzle solved in {self.elapsed_time:.1f}s with {self.move_count} moves "
                    f"({self.stars} stars).")

    def pause(self) -> bool:
        if self.status is not GameStatus.PLAYING:
            return False
        self._paused_at = self._clock()
        self.status = GameStatus.PAUSED
        return True

    def resume(self) -> bool:
        if self.status is not GameStatus.PAUSED:
            return False
        self._paused_total += self._clock() - self._paused_at
        self._paused_at = None
        self.status = GameStatus.PLAYING
        return True

    def restart(self, fresh_seed: bool = False) -> None:
        """Regenerates the puzzle: same identifier replays the same puzzle."""
        if fresh_seed:
            self.identifier = None
        logger.info(f"Restarting {self.difficulty.name} game (identifier {self.identifier!r}).")
        self._new_puzzle(self.identifier)

    def clear_user_input(self) -> bool:
        """Empties every unlocked cell; returns False unless the game is being played."""
        if self.status is not GameStatus.PLAYING:
            logger.debug(f"Clear rejected: game is {self.status.name}.")
            return False
        for r in range(self.grid_size):
            for c in range(self.grid_size):
                if not self.locked[r][c]:
                    self.grid[r][c] = Cell.EMPTY
        self.errors = validate(self.grid)
        return True

    def get_hint(self) -> Optional[Hint]:
        if self.status is not GameStatus.PLAYING:
            return None
        return self.puzzle.get_hint(self.grid)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        """Seconds played, excluding pauses; frozen once won."""
        end = self._finish_time
        if end is None:
            end = self._paused_at if self._paused_at is not None else self._clock()
        return max(0.0, end - self._start_time - self._paused_total)

    @property
    def progress(self) -> float:
        total = self.grid_size * self.grid_size
        filled = sum(1 for row in self.grid for cell in row if cell is not Cell.EMPTY)
        return filled / total

    @property
    def remaining_cells(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is Cell.EMPTY)

    @property
    def is_won(self) -> bool:
        return self.status is GameStatus.WON

    @property
    def stars(self) -> int:
        if not self.is_won:
            return 0
        return calculate_stars(self.elapsed_time, self.grid_size)

    def completion_record(self) -> CompletionRecord:
        return CompletionRecord(self.identifier, self.elapsed_time, self.is_won)
