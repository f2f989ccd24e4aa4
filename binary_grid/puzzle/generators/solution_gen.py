from typing import List
import logging

from ..common import Cell, Grid, GenerationFailure, LINE_VALUES, empty_grid
from ..random_stream import SeededRandomStream
from ..verifier import is_valid_placement

logger = logging.getLogger(__name__)


def synthesize_solution(size: int, rng: SeededRandomStream) -> Grid:
    """
    Fills a size x size grid with a complete, rule-valid assignment.

    Backtracking over cells in row-major order with an explicit stack of
    choice points: each entry holds the values not yet tried at that
    position, in the order drawn from `rng`.

    Raises:
        GenerationFailure: if the first cell's alternatives are exhausted.
    """
    if size < 2:
        raise GenerationFailure(f"Grid size must be at least 2, got {size}")
    logger.debug(f"Synthesizing {size}x{size} solution with {rng}")

    grid = empty_grid(size)
    total_cells = size * size
    pending: List[List[Cell]] = []  # untried values per position
    position = 0
    placements = 0
    backtracks = 0

    while position < total_cells:
        if len(pending) == position:
            values = list(LINE_VALUES)
            rng.shuffle(values)
            pending.append(values)

        row, col = divmod(position, size)
        candidates = pending[position]
        placed = False
        while candidates:
            grid[row][col] = candidates.pop(0)
            placements += 1
            if is_valid_placement(grid, row, col):
                placed = True
                break

        if placed:
            position += 1
            continue

        # Both values failed here: clear and resume the previous choice point
        grid[row][col] = Cell.EMPTY
        pending.pop()
        position -= 1
        backtracks += 1
        if position < 0:
            logger.error(f"Exhausted all assignments for a {size}x{size} grid after {placements} placements.")
            raise GenerationFailure(f"No valid {size}x{size} assignment exists")

    logger.debug(f"Solution found: {placements} placements, {backtracks} backtracks.")
    return grid
