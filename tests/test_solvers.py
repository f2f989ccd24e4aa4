# tests/test_solvers.py
import pytest

from binary_grid.ai.solvers import (
    ConstraintSolver, InternalSolver, count_solutions, get_solver_instances,
)
from binary_grid.puzzle.common import Cell, Difficulty
from binary_grid.puzzle.generator import PuzzleGenerator
from binary_grid.puzzle.puzzle_types import BinaryGridPuzzle
from binary_grid.puzzle.verifier import is_complete, validate


@pytest.fixture
def tiny_puzzle():
    return PuzzleGenerator().generate_puzzle(Difficulty.TINY, 1)


def _agrees_with_locked(puzzle, grid):
    return all(
        grid[r][c] is puzzle.grid[r][c]
        for r in range(puzzle.size) for c in range(puzzle.size) if puzzle.locked[r][c]
    )


def test_internal_solver_returns_stored_solution(tiny_puzzle):
    grid = InternalSolver().solve(tiny_puzzle)
    assert grid == tiny_puzzle.solution_grid()
    assert tiny_puzzle.check_solution(grid)


@pytest.mark.parametrize("identifier", [1, 2, 3])
def test_constraint_solver_finds_a_valid_completion(identifier):
    puzzle = PuzzleGenerator().generate_puzzle(Difficulty.TINY, identifier)
    grid = ConstraintSolver().solve(puzzle)
    assert grid is not None
    assert is_complete(grid)
    assert validate(grid) == set()
    assert _agrees_with_locked(puzzle, grid)
    assert puzzle.check_solution(grid)


def test_constraint_solver_handles_six_by_six():
    puzzle = PuzzleGenerator().generate_puzzle(Difficulty.SMALL, 4)
    grid = ConstraintSolver().solve(puzzle)
    assert grid is not None
    assert puzzle.check_solution(grid)


def test_fully_revealed_puzzle_has_exactly_one_completion(valid_4x4):
    locked = [[True] * 4 for _ in range(4)]
    puzzle = BinaryGridPuzzle(Difficulty.TINY, [list(r) for r in valid_4x4], locked, valid_4x4, seed=0)
    assert count_solutions(puzzle, limit=5) == 1


def test_count_solutions_stops_at_limit(empty_4x4, valid_4x4):
    unlocked = [[False] * 4 for _ in range(4)]
    puzzle = BinaryGridPuzzle(Difficulty.TINY, empty_4x4, unlocked, valid_4x4, seed=0)
    # An empty 4x4 board has many completions
    assert count_solutions(puzzle, limit=3) == 3
    with pytest.raises(ValueError):
        count_solutions(puzzle, limit=0)


def test_generated_puzzle_has_at_least_one_completion(tiny_puzzle):
    assert count_solutions(tiny_puzzle, limit=1) == 1


def test_solver_registry():
    solvers = get_solver_instances()
    assert set(solvers) == {"Internal (Perfect)", "Constraint Solver"}


def test_puzzle_rejects_empty_locked_cell(valid_4x4, empty_4x4):
    locked = [[True] * 4 for _ in range(4)]
    with pytest.raises(ValueError):
        BinaryGridPuzzle(Difficulty.TINY, empty_4x4, locked, valid_4x4, seed=0)


def test_check_solution_rejects_changed_locked_cell(tiny_puzzle):
    grid = tiny_puzzle.solution_grid()
    for r in range(4):
        for c in range(4):
            if tiny_puzzle.locked[r][c]:
                grid[r][c] = Cell.BLUE if grid[r][c] is Cell.RED else Cell.RED
                assert not tiny_puzzle.check_solution(grid)
                return
