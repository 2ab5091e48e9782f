"""
Game controller for TicTacToe.

This ties together:
- Game state (settings, round board, statistics)
- Round control (executing moves, round and game preparation)
- The AI (scoring legal moves, picking one)

It is the entry point for a UI: request_move() for a human click,
play_ai_move() for the AI's turn, analyse() for a debug overlay.
"""

import logging
from typing import List, Optional

import numpy as np

from .ai_player import AIPlayer
from .board import BOARD_SIZE
from .config import EngineConfig
from .game_state import GameState, PlayerType, Settings
from .legal_moves import LegalMove, create_legal_move, resolve_all_legal_moves
from .round_controller import MoveOutcome, RoundController

logger = logging.getLogger(__name__)


class TicTacToeGame:
    """
    One game of TicTacToe: a series of rounds with shared statistics.

    Game flow:
    1. new_game() resets statistics and starts round 1
    2. Players alternate: request_move() for humans, play_ai_move() for the AI
    3. When a round ends (win or tie), next_round() starts another one

    Not reentrant: one call at a time per game.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        config=EngineConfig,
        seed: Optional[int] = None
    ):
        """
        Initialize the game.

        Args:
            settings: Difficulty and first-player rule.
            config: Engine configuration.
            seed: Seed for every random choice, for repeatable games.
        """
        if settings is None:
            settings = Settings(
                difficulty=config.DEFAULT_DIFFICULTY,
                who_first=config.DEFAULT_WHO_FIRST,
                debug_mode=config.DEBUG_MODE,
            )

        self.config = config
        self.rng = np.random.default_rng(seed)
        self.state = GameState(settings=settings)
        self.controller = RoundController(self.rng)
        self.ai = AIPlayer(settings.difficulty, self.rng, config)

        self.new_game()

    def new_game(self):
        """Reset statistics and start the first round."""
        self.ai.difficulty = self.state.settings.difficulty
        self.ai.use_search = True if self.state.settings.debug_mode else None
        self.controller.prepare_new_game(self.state)

    def next_round(self):
        """Start another round, keeping statistics."""
        self.controller.prepare_next_round(self.state)

    @property
    def current_player(self) -> PlayerType:
        return self.state.board.current_player

    def request_move(self, x: int, y: int) -> MoveOutcome:
        """
        Play cell (x, y) for the current player.

        Args:
            x: Column (0-2).
            y: Row (0-2).

        Returns:
            MoveOutcome. An occupied cell halts the round instead.
        """
        mark = self.controller.current_mark(self.state)
        move = create_legal_move(mark, x, y)
        return self.controller.execute_move(self.state, move)

    def play_ai_move(self) -> MoveOutcome:
        """
        Let the AI pick and play a move for the current player.

        Returns:
            MoveOutcome of the executed move. A full board is scored as a tie.
        """
        if self.state.is_round_over:
            return self.controller.outcome(self.state, accepted=False, error="Round is over")

        mark = self.controller.current_mark(self.state)
        move = self.ai.get_move(self.state.board.cells, mark)

        if move is None:
            # No legal moves left, so it is a tie
            self.controller.record_tie(self.state)
            return self.controller.outcome(self.state)

        return self.controller.execute_move(self.state, move)

    def analyse(self, perspective: Optional[PlayerType] = None) -> List[LegalMove]:
        """
        Scored legal moves for a player, with search verdicts.

        Read-only: the game state is not changed.

        Args:
            perspective: Whose moves to score (default: the current player).
        """
        if perspective is None:
            perspective = self.state.board.current_player

        mark = self.controller.mark_for(self.state, perspective)
        return resolve_all_legal_moves(
            self.state.board.cells,
            mark,
            self.state.settings.difficulty,
            use_search=True,
            config=self.config,
        )

    def analysis_grid(self, perspective: Optional[PlayerType] = None) -> List[List[Optional[LegalMove]]]:
        """
        analyse() laid out as grid[x][y]; occupied cells are None.
        """
        grid: List[List[Optional[LegalMove]]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for move in self.analyse(perspective):
            grid[move.x][move.y] = move
        return grid
