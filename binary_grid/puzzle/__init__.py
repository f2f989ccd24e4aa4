# Make 'puzzle' a package
# Selectively expose key classes for easier top-level imports
from .common import Cell, CellPosition, Difficulty, GenerationFailure, BINARY_GRID_RULES, format_grid
from .random_stream import SeededRandomStream
from .verifier import Rule, validate, find_rule_violations, is_valid_placement, is_complete
from .puzzle_types import BinaryGridPuzzle
from .generator import PuzzleGenerator, generate
