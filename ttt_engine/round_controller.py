"""
Round controller for TicTacToe.
Executes moves, detects the end of a round and keeps the statistics.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, assert_never

import numpy as np

from .board import Mark
from .game_state import (
    GameState,
    GameStatus,
    PlayerType,
    RoundBoard,
    Statistics,
    Strike,
    WhoFirst,
)
from .legal_moves import LegalMove
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass
class MoveOutcome:
    """Result of executing a move."""
    accepted: bool
    status: GameStatus
    winner: Optional[PlayerType] = None
    strike: Optional[Strike] = None
    statistics: Optional[Statistics] = None
    error: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS


class RoundController:
    """
    Applies moves to the game state.

    Round flow:
    1. prepare_next_round() clears the board and picks who opens
    2. execute_move() places a mark, then checks win, then draw
    3. If neither, the turn passes to the other player
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    def prepare_new_game(self, state: GameState):
        """Reset statistics and prepare the first round."""
        state.statistics = Statistics()
        self.prepare_next_round(state)

    def prepare_next_round(self, state: GameState):
        """Reset the board and choose who opens."""
        state.board = RoundBoard()

        who_first = state.settings.who_first
        if who_first == WhoFirst.RANDOM:
            first = PlayerType.AI if self.rng.random() >= 0.5 else PlayerType.HUMAN
        elif who_first == WhoFirst.HUMAN:
            first = PlayerType.HUMAN
        elif who_first == WhoFirst.AI:
            first = PlayerType.AI
        elif who_first == WhoFirst.HUMAN_VS_HUMAN:
            first = PlayerType.HUMAN1
        else:
            assert_never(who_first)

        state.board.first_player = first
        state.board.current_player = first
        state.statistics.round += 1
        logger.info(f"Round {state.statistics.round}: {first.description} goes first")

    def mark_for(self, state: GameState, player: PlayerType) -> Mark:
        """First player of the round plays crosses, the second naughts."""
        return Mark.X if player == state.board.first_player else Mark.O

    def current_mark(self, state: GameState) -> Mark:
        return self.mark_for(state, state.board.current_player)

    def execute_move(self, state: GameState, move: LegalMove) -> MoveOutcome:
        """
        Place the mark, check for a win or a tie, pass the turn.

        Used for both AI and human moves.

        Args:
            state: Game state to update.
            move: Move to execute. Its cell must be empty and its mark the
                current player's.

        Returns:
            MoveOutcome. An illegal move halts the round and is not applied.
        """
        result = self.validator.validate_mark_placement(
            state, move.mark, move.x, move.y, self.current_mark(state)
        )
        if not result.is_valid:
            if state.board.status == GameStatus.IN_PROGRESS:
                state.board.status = GameStatus.STOP
            logger.error(f"Tried to execute illegal move ({move.x}, {move.y}): {result.error_message}")
            return self.outcome(state, accepted=False, error=result.error_message)

        logger.debug(f"Execute move: {move.mark.name} at ({move.x}, {move.y})")
        state.board.cells[move.x][move.y] = move.mark

        win = self.win_checker.check_win_state(state.board.cells)
        if win.won:
            state.board.strike = Strike(present=True, start=win.start, end=win.end)
            self._react_on_win(state)
            return self.outcome(state)

        if self.win_checker.check_draw_state(state.board.cells):
            self.record_tie(state)
            return self.outcome(state)

        state.board.current_player = self.next_player(state)
        state.statistics.move_count += 1
        return self.outcome(state)

    def next_player(self, state: GameState) -> PlayerType:
        """Swap the two humans in human vs human, otherwise human and AI."""
        return self._opponent_of(state.board.current_player)

    def record_tie(self, state: GameState):
        """End the round as a tie."""
        stats = state.statistics
        state.board.status = GameStatus.TIE
        stats.ties += 1
        stats.ties_in_row += 1
        for player in stats.win_streaks:
            stats.win_streaks[player] = 0
        logger.info(f"Round {stats.round}: tie")

    def _react_on_win(self, state: GameState):
        stats = state.statistics
        winner = state.board.current_player

        state.board.status = GameStatus.PLAYER_WON
        stats.ties_in_row = 0
        stats.scores[winner] += 1
        stats.win_streaks[winner] += 1
        stats.win_streaks[self._opponent_of(winner)] = 0
        logger.info(f"Round {stats.round}: {winner.description} wins")

    def _opponent_of(self, player: PlayerType) -> PlayerType:
        if player == PlayerType.HUMAN:
            return PlayerType.AI
        elif player == PlayerType.AI:
            return PlayerType.HUMAN
        elif player == PlayerType.HUMAN1:
            return PlayerType.HUMAN2
        elif player == PlayerType.HUMAN2:
            return PlayerType.HUMAN1
        else:
            assert_never(player)

    def outcome(self, state: GameState, accepted: bool = True, error: Optional[str] = None) -> MoveOutcome:
        return MoveOutcome(
            accepted=accepted,
            status=state.board.status,
            winner=state.winner,
            strike=replace(state.board.strike),
            statistics=state.statistics,
            error=error,
        )
