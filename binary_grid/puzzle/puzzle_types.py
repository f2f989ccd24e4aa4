from typing import List, Optional, Tuple, Union
import logging
import random

from .common import Cell, CellPosition, Difficulty, Grid, LockedMask, copy_grid
from .verifier import Rule, find_rule_violations, is_complete, validate

logger = logging.getLogger(__name__)

Hint = Tuple[CellPosition, Cell, str]


class BinaryGridPuzzle:
    """A carved binary grid puzzle together with its private solution."""

    def __init__(self, difficulty: Difficulty, grid: Grid, locked: LockedMask,
                 solution: Grid, seed: int,
                 identifier: Optional[Union[int, str]] = None):
        self.difficulty = difficulty
        self.size = len(solution)
        self.grid = grid
        self.locked = locked
        self.seed = seed
        self.identifier = identifier
        self._solution = solution

        # Basic validation
        if len(grid) != self.size or len(locked) != self.size:
            raise ValueError(f"Grid/mask/solution size mismatch: {len(grid)} vs {len(locked)} vs {self.size}")
        for r in range(self.size):
            for c in range(self.size):
                if locked[r][c] and grid[r][c] is Cell.EMPTY:
                    raise ValueError(f"Locked cell ({r},{c}) is empty")

    @property
    def is_free_play(self) -> bool:
        return self.identifier is None

    @property
    def hidden_count(self) -> int:
        return sum(1 for row in self.locked for is_locked in row if not is_locked)

    def starting_grid(self) -> Grid:
        """Fresh copy of the carved grid for a new play-through."""
        return copy_grid(self.grid)

    def solution_grid(self) -> Grid:
        """Copy of the stored solution (for solvers and hints only)."""
        return copy_grid(self._solution)

    def check_solution(self, user_grid: Grid) -> bool:
        """True when the grid is complete and breaks no rule.

        Carved puzzles may have several completions, so any valid one counts,
        not just the stored solution.
        """
        if len(user_grid) != self.size:
            logger.debug(f"Solution check failed: grid has {len(user_grid)} rows, expected {self.size}.")
            return False
        for r in range(self.size):
            for c in range(self.size):
                if self.locked[r][c] and user_grid[r][c] is not self.grid[r][c]:
                    logger.debug(f"Solution check failed: locked cell ({r},{c}) was changed.")
                    return False
        result = is_complete(user_grid) and not validate(user_grid)
        logger.debug(f"Solution check result: {result}")
        return result

    def get_hint(self, user_grid: Grid) -> Optional[Hint]:
        """
        Suggests one cell to change.

        Prefers fixing a filled player cell that disagrees with the stored
        solution; otherwise reveals a random empty cell.

        Returns:
            (position, value to place, explanation) or None if nothing is left.
        """
        if self.check_solution(user_grid):
            logger.info("Hint requested, but the grid is already solved.")
            return None

        violations = find_rule_violations(user_grid)
        wrong: List[CellPosition] = []
        empty: List[CellPosition] = []
        for r in range(self.size):
            for c in range(self.size):
                if self.locked[r][c]:
                    continue
                value = user_grid[r][c]
                if value is Cell.EMPTY:
                    empty.append(CellPosition(r, c))
                elif value is not self._solution[r][c]:
                    wrong.append(CellPosition(r, c))

        # Cells that already break a rule make the most useful hints
        for rule in Rule:
            for pos in wrong:
                if pos in violations[rule]:
                    reason = f"This cell breaks the {_RULE_NAMES[rule]} rule."
                    return pos, self._solution[pos.row][pos.col], reason
        if wrong:
            pos = wrong[0]
            return pos, self._solution[pos.row][pos.col], "This cell does not fit the rest of the grid."
        if empty:
            pos = random.choice(empty)
            return pos, self._solution[pos.row][pos.col], "Try this cell next."

        # Complete but invalid only through locked cells: should not happen
        logger.warning("No hint available for an unsolved grid.")
        return None

    def __repr__(self) -> str:
        return (f"BinaryGridPuzzle(difficulty={self.difficulty.name}, size={self.size}, "
                f"identifier={self.identifier!r}, hidden={self.hidden_count})")


_RULE_NAMES = {
    Rule.RUN_LENGTH: "no-three-in-a-row",
    Rule.BALANCE: "equal-colors",
    Rule.UNIQUENESS: "unique-lines",
}
