"""
TicTacToe Engine
================
Rules, AI and round control for 3x3 TicTacToe.

Difficulties: Easy -> Medium -> Hard -> Impossible
"""

from .board import Mark, create_board
from .config import EngineConfig, PointsData
from .game_state import Difficulty, GameState, GameStatus, PlayerType, Settings, WhoFirst
from .win_checker import WinChecker
from .evaluator import evaluate
from .minimax import MiniMaxResult, resolve_mini_max
from .legal_moves import LegalMove, MoveProps, resolve_all_legal_moves
from .move_policy import pick_move
from .ai_player import AIPlayer
from .round_controller import MoveOutcome, RoundController
from .game import TicTacToeGame

__version__ = "1.0.0"
