"""Binary grid (Takuzu) puzzle engine: generation, carving, validation and play sessions."""
from .puzzle import (Cell, CellPosition, Difficulty, GenerationFailure, BinaryGridPuzzle,
                     PuzzleGenerator, SeededRandomStream, Rule, generate, validate)
from .core import BinaryGridGame, GameStatus, CompletionRecord, edit

__version__ = "1.0.0"
