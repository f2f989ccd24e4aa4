from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import itertools
import logging

from constraint import Problem, FunctionConstraint

from ..puzzle.common import Cell, CellPosition, Grid, LINE_VALUES
from ..puzzle.puzzle_types import BinaryGridPuzzle
from ..puzzle.verifier import validate

logger = logging.getLogger(__name__)

# --- Abstract Base Class ---

class AbstractPuzzleSolver(ABC):
    """Abstract base class for binary grid auto-solvers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the display name of the solver."""
        pass

    @abstractmethod
    def solve(self, puzzle: BinaryGridPuzzle) -> Optional[Grid]:
        """
        Attempts to complete the given puzzle.

        Args:
            puzzle: The carved BinaryGridPuzzle.

        Returns:
            A complete grid that agrees with every locked cell and breaks no
            rule, or None if no completion was found.
        """
        pass

# --- Concrete Solver Implementations ---

class InternalSolver(AbstractPuzzleSolver):
    """Returns the stored solution - perfect play."""

    @property
    def name(self) -> str:
        return "Internal (Perfect)"

    def solve(self, puzzle: BinaryGridPuzzle) -> Optional[Grid]:
        logger.info(f"InternalSolver solving {puzzle!r}")
        return puzzle.solution_grid()


def _line_variables(size: int) -> List[List[CellPosition]]:
    rows = [[CellPosition(r, c) for c in range(size)] for r in range(size)]
    cols = [[CellPosition(r, c) for r in range(size)] for c in range(size)]
    return rows + cols


def _build_problem(puzzle: BinaryGridPuzzle) -> Problem:
    """
    Encodes the puzzle as a CSP (python-constraint).

    Variables are cell positions; locked cells get a single-value domain.
    """
    size = puzzle.size
    half = size // 2
    problem = Problem()
    for r in range(size):
        for c in range(size):
            domain = [puzzle.grid[r][c]] if puzzle.locked[r][c] else list(LINE_VALUES)
            problem.addVariable(CellPosition(r, c), domain)

    rows_and_cols = _line_variables(size)
    for line in rows_and_cols:
        # Equal colors
        problem.addConstraint(
            FunctionConstraint(lambda *cells, half=half: sum(1 for v in cells if v is Cell.RED) == half),
            line,
        )
        # No three in a row
        for i in range(size - 2):
            problem.addConstraint(lambda a, b, c: not (a is b is c), line[i:i + 3])

    # Unique rows, unique columns
    for group in (rows_and_cols[:size], rows_and_cols[size:]):
        for line1, line2 in itertools.combinations(group, 2):
            problem.addConstraint(
                lambda *cells, n=size: tuple(cells[:n]) != tuple(cells[n:]),
                line1 + line2,
            )
    return problem


def _to_grid(assignment: Dict[CellPosition, Cell], size: int) -> Grid:
    return [[assignment[CellPosition(r, c)] for c in range(size)] for r in range(size)]


class ConstraintSolver(AbstractPuzzleSolver):
    """Finds a completion from the locked cells alone using a CSP solver."""

    @property
    def name(self) -> str:
        return "Constraint Solver"

    def solve(self, puzzle: BinaryGridPuzzle) -> Optional[Grid]:
        logger.info(f"ConstraintSolver solving {puzzle!r}")
        try:
            assignment = _build_problem(puzzle).getSolution()
        except Exception as e:
            logger.error(f"Error during CSP solving: {e}", exc_info=True)
            return None
        if not assignment:
            logger.warning("ConstraintSolver found no completion.")
            return None
        grid = _to_grid(assignment, puzzle.size)
        if validate(grid):
            logger.error("ConstraintSolver produced a grid that breaks the rules.")
            return None
        return grid


def count_solutions(puzzle: BinaryGridPuzzle, limit: int = 2) -> int:
    """
    Counts completions of the puzzle, stopping at `limit`.

    Diagnostic only: generation never requires a unique completion.
    """
    if limit <= 0:
        raise ValueError("limit must be positive")
    count = 0
    for _ in _build_problem(puzzle).getSolutionIter():
        count += 1
        if count >= limit:
            break
    logger.debug(f"{puzzle!r} has {'at least ' if count >= limit else ''}{count} completion(s).")
    return count


def get_solver_instances() -> Dict[str, AbstractPuzzleSolver]:
    solvers = [InternalSolver(), ConstraintSolver()]
    return {solver.name: solver for solver in solvers}
