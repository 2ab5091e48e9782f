"""
Engine configuration for TicTacToe.
Search constants, point tables and game defaults.
"""

from dataclasses import dataclass

from .game_state import Difficulty, WhoFirst


@dataclass(frozen=True)
class PointsData:
    """
    Point values used to score or weight a legal move.
    """
    pos_basic: int = 0            # Points for a basic (edge) move
    pos_corner: int = 0           # Points for a move in a corner
    pos_center: int = 0           # Points for a move in the center

    bonus_line_up: int = 0        # Bonus per own mark lined up with the move
    bonus_fork: int = 0           # Bonus for creating a fork
    bonus_prevent_fork: int = 0   # Bonus for taking the opponent's fork cell
    bonus_win: int = 0            # Bonus for a winning move
    bonus_prevent_loss: int = 0   # Bonus for blocking the opponent's win

    mul_mini_max: int = 0         # Multiplier for the search verdict


# Used for the score of every move, whatever the difficulty
DEFAULT_SCORING = PointsData(
    pos_basic=10,
    pos_corner=20,
    pos_center=50,
    bonus_line_up=25,
    bonus_fork=1000,
    bonus_prevent_fork=5000,
    bonus_win=100000,
    bonus_prevent_loss=10000,
    mul_mini_max=10,
)

SCORING_MEDIUM = PointsData(
    pos_basic=10,
    pos_corner=20,
    pos_center=50,
    bonus_line_up=25,
    bonus_fork=100,
    bonus_prevent_fork=50,
    bonus_win=500,
    bonus_prevent_loss=400,
    mul_mini_max=1,
)

SCORING_HARD = PointsData(
    pos_basic=10,
    pos_corner=20,
    pos_center=50,
    bonus_line_up=25,
    bonus_fork=1000,
    bonus_prevent_fork=50,
    bonus_win=100000,
    bonus_prevent_loss=10000,
    mul_mini_max=10,
)


class EngineConfig:
    """
    Configuration class for the engine.
    Subclass it (or pass another class with the same names) to tune the AI.
    """

    # ==================== SEARCH SETTINGS ====================
    # 9 plies covers the whole board, so the search is exact
    SEARCH_MAX_DEPTH = 9

    MINIMAX_WIN = 1000
    MINIMAX_DRAW = 0
    MINIMAX_MAX = 10000   # Starting bound before any child is evaluated

    # Score of a line held by one mark only, indexed by how many cells it has
    LINE_SCORES = (0, 1, 10, 100)

    # ==================== SCORING SETTINGS ====================
    DEFAULT_SCORING = DEFAULT_SCORING

    # Weights matter only for Medium and Hard
    WEIGHT_TABLES = {
        Difficulty.EASY: SCORING_HARD,
        Difficulty.MEDIUM: SCORING_MEDIUM,
        Difficulty.HARD: SCORING_HARD,
        Difficulty.IMPOSSIBLE: PointsData(),
    }

    # ==================== GAME SETTINGS ====================
    DEFAULT_DIFFICULTY = Difficulty.EASY
    DEFAULT_WHO_FIRST = WhoFirst.RANDOM

    # Consult the search on every difficulty so the analysis overlay has verdicts
    DEBUG_MODE = False
