"""
AI player for TicTacToe.
Scores every legal move and picks one according to the difficulty.
"""

import logging
from typing import Optional

import numpy as np

from .board import Mark
from .config import EngineConfig
from .game_state import Difficulty
from .legal_moves import LegalMove, resolve_all_legal_moves
from .move_policy import pick_move

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays TicTacToe at a chosen difficulty.

    - Easy picks any empty cell.
    - Medium and Hard pick at random, weighted by how good each move looks.
    - Impossible plays the move the full search rates best; at worst a draw.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        rng: Optional[np.random.Generator] = None,
        config=EngineConfig
    ):
        """
        Initialize the AI player.

        Args:
            difficulty: How well to play.
            rng: Source of randomness (a fresh unseeded one by default).
            config: Engine configuration.
        """
        self.difficulty = difficulty
        self.rng = rng if rng is not None else np.random.default_rng()
        self.config = config
        # None: only Impossible consults the search
        self.use_search: Optional[bool] = None

    def get_move(self, board, mark: Mark) -> Optional[LegalMove]:
        """
        Choose a move for `mark`.

        Args:
            board: Current board (not modified).
            mark: Mark the AI plays this round.

        Returns:
            The picked LegalMove, or None if the board is full.
        """
        legal_moves = resolve_all_legal_moves(
            board, mark, self.difficulty, use_search=self.use_search, config=self.config
        )

        if not legal_moves:
            return None

        move = pick_move(legal_moves, self.difficulty, self.rng)
        logger.debug(
            f"AI ({self.difficulty.value}) picked ({move.x}, {move.y}) "
            f"score={move.score} weight={move.weight} minimax={move.mini_max}"
        )
        return move
