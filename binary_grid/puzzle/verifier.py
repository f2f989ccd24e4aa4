from typing import Dict, List, Set, Tuple
from enum import Enum, auto
import itertools
import logging

from .common import Cell, CellPosition, Grid, LINE_VALUES, column

logger = logging.getLogger(__name__)


class Rule(Enum):
    RUN_LENGTH = auto()
    BALANCE = auto()
    UNIQUENESS = auto()


def _check_square(grid: Grid) -> int:
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError(f"Grid must be square; got {size} rows with lengths {[len(r) for r in grid]}")
    return size


def _lines(grid: Grid) -> List[Tuple[List[Cell], List[CellPosition]]]:
    """All rows then all columns, each paired with its cell positions."""
    size = len(grid)
    lines = []
    for r in range(size):
        lines.append((grid[r], [CellPosition(r, c) for c in range(size)]))
    for c in range(size):
        lines.append((column(grid, c), [CellPosition(r, c) for r in range(size)]))
    return lines


def _run_length_violations(grid: Grid) -> Set[CellPosition]:
    errors: Set[CellPosition] = set()
    for cells, positions in _lines(grid):
        for i in range(len(cells) - 2):
            value = cells[i]
            if value is not Cell.EMPTY and cells[i + 1] is value and cells[i + 2] is value:
                errors.update(positions[i:i + 3])
    return errors


def _balance_violations(grid: Grid) -> Set[CellPosition]:
    errors: Set[CellPosition] = set()
    max_count = len(grid) // 2
    for cells, positions in _lines(grid):
        for value in LINE_VALUES:
            if cells.count(value) > max_count:
                errors.update(pos for cell, pos in zip(cells, positions) if cell is value)
    return errors


def _duplicate_line_violations(lines: List[Tuple[List[Cell], List[CellPosition]]]) -> Set[CellPosition]:
    errors: Set[CellPosition] = set()
    complete = [(cells, positions) for cells, positions in lines if Cell.EMPTY not in cells]
    for (cells1, positions1), (cells2, positions2) in itertools.combinations(complete, 2):
        if cells1 == cells2:
            errors.update(positions1)
            errors.update(positions2)
    return errors


def _uniqueness_violations(grid: Grid) -> Set[CellPosition]:
    size = len(grid)
    lines = _lines(grid)
    # Rows are only compared with rows, columns with columns.
    return _duplicate_line_violations(lines[:size]) | _duplicate_line_violations(lines[size:])


def find_rule_violations(grid: Grid) -> Dict[Rule, Set[CellPosition]]:
    """
    Computes the offending cells of each rule separately.

    Args:
        grid: square grid, possibly partially filled. Not mutated.

    Returns:
        Dict mapping every Rule to the set of positions it flags (possibly empty).
        A cell may appear under several rules.
    """
    _check_square(grid)
    return {
        Rule.RUN_LENGTH: _run_length_violations(grid),
        Rule.BALANCE: _balance_violations(grid),
        Rule.UNIQUENESS: _uniqueness_violations(grid),
    }


def validate(grid: Grid) -> Set[CellPosition]:
    """Returns every cell currently violating any rule (union of all rules)."""
    errors: Set[CellPosition] = set()
    for rule, positions in find_rule_violations(grid).items():
        if positions:
            logger.debug(f"{rule.name} flags {len(positions)} cell(s)")
        errors |= positions
    return errors


def is_complete(grid: Grid) -> bool:
    return all(cell is not Cell.EMPTY for row in grid for cell in row)


def is_valid_placement(grid: Grid, row: int, col: int) -> bool:
    """
    Generation-time feasibility check for the cell just placed at (row, col).

    Only looks at the row-major prefix filled so far: run-length backwards,
    balance over the filled part of the row and column, and uniqueness
    against earlier lines once the current row/column is complete.
    """
    cell = grid[row][col]
    if cell is Cell.EMPTY:
        return True
    size = len(grid)
    max_count = size // 2

    # Rule 1: no three in a row looking back along the row and the column
    if col >= 2 and grid[row][col - 1] is cell and grid[row][col - 2] is cell:
        return False
    if row >= 2 and grid[row - 1][col] is cell and grid[row - 2][col] is cell:
        return False

    # Rule 2: counts over the filled prefix
    row_prefix = grid[row][:col + 1]
    if any(row_prefix.count(value) > max_count for value in LINE_VALUES):
        return False
    col_prefix = [grid[r][col] for r in range(row + 1)]
    if any(col_prefix.count(value) > max_count for value in LINE_VALUES):
        return False

    # Rule 3: duplicate rows, only once the row is complete
    if col == size - 1 and Cell.EMPTY not in grid[row]:
        for r in range(row):
            if Cell.EMPTY not in grid[r] and grid[r] == grid[row]:
                return False

    # Rule 3: duplicate columns, only once the column is complete
    if row == size - 1:
        current = column(grid, col)
        if Cell.EMPTY not in current:
            for c in range(col):
                other = column(grid, c)
                if Cell.EMPTY not in other and other == current:
                    return False

    return True
