from .game_state import BinaryGridGame, GameStatus, CompletionRecord, edit
from .levels import BinaryGridLevel, build_level_catalogue, levels_for, calculate_stars
