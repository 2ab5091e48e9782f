"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import BOARD_SIZE, WINNING_LINES, Cell, Line, Mark, lines_through


@dataclass
class WinResult:
    """Result of a win scan over the whole board."""
    won: bool
    winner: Optional[Mark] = None
    start: Optional[Cell] = None    # Endpoints of the winning line
    end: Optional[Cell] = None


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same kind in a line
    (column, row or diagonal).
    """

    # Same lines as WINNING_LINES, ordered for strike reporting:
    # lines from the top-left corner, then through the center,
    # then from the bottom-right corner. First and last cells are the endpoints.
    STRIKE_LINES: Tuple[Line, ...] = (
        ((0, 0), (1, 0), (2, 0)),
        ((0, 0), (0, 1), (0, 2)),
        ((0, 0), (1, 1), (2, 2)),
        ((1, 0), (1, 1), (1, 2)),
        ((0, 1), (1, 1), (2, 1)),
        ((2, 0), (1, 1), (0, 2)),
        ((2, 2), (1, 2), (0, 2)),
        ((2, 2), (2, 1), (2, 0)),
    )

    def is_winning_move(self, board, mark: Mark, x: int, y: int) -> bool:
        """
        Check if placing `mark` at (x, y) would complete a line.

        Only the two other cells of each line through (x, y) are read,
        so the board is not touched.
        """
        for line in lines_through(x, y):
            others = [cell for cell in line if cell != (x, y)]
            if all(board[cx][cy] == mark for cx, cy in others):
                return True
        return False

    def check_win_state(self, board) -> WinResult:
        """
        Check the board for a completed line.

        Args:
            board: The board to check.

        Returns:
            WinResult with the winner and the line endpoints, if any.
        """
        for line in self.STRIKE_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return WinResult(won=True, winner=winner, start=line[0], end=line[2])

        return WinResult(won=False)

    def check_draw_state(self, board) -> bool:
        """
        Check if no empty cell remains.
        Call only after check_win_state found no winner.
        """
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                if board[x][y] == Mark.EMPTY:
                    return False
        return True

    def has_line(self, board, mark: Mark) -> bool:
        """Check if `mark` owns any complete line."""
        for line in WINNING_LINES:
            if all(board[x][y] == mark for x, y in line):
                return True
        return False

    def _check_line(self, board, line: Line) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The winning Mark if all 3 cells hold it, None otherwise.
        """
        first = board[line[0][0]][line[0][1]]
        if first not in (Mark.X, Mark.O):
            return None

        for x, y in line[1:]:
            if board[x][y] != first:
                return None

        return first
