"""
Static evaluation of a TicTacToe position.

Each of the 8 lines is scored on its own and the results are summed:
- a line holding only mark_a gives +1, +10 or +100 for 1, 2 or 3 marks
- a line holding only mark_b gives the same values negated
- an empty line, or one holding both marks, gives 0
"""

from typing import Sequence

from .board import WINNING_LINES, Line, Mark
from .config import EngineConfig


def evaluate(
    mark_a: Mark,
    mark_b: Mark,
    board,
    line_scores: Sequence[int] = EngineConfig.LINE_SCORES
) -> int:
    """
    Score the board from mark_a's point of view.

    Args:
        mark_a: Mark whose lines count positively.
        mark_b: Mark whose lines count negatively.
        board: Board to evaluate (not modified).
        line_scores: Score of a single-owner line by cell count.

    Returns:
        Sum of the line scores. evaluate(a, b) == -evaluate(b, a).
    """
    score = 0
    for line in WINNING_LINES:
        score += evaluate_line(mark_a, mark_b, board, line, line_scores)
    return score


def evaluate_line(
    mark_a: Mark,
    mark_b: Mark,
    board,
    line: Line,
    line_scores: Sequence[int] = EngineConfig.LINE_SCORES
) -> int:
    count_a = 0
    count_b = 0
    for x, y in line:
        cell = board[x][y]
        if cell == mark_a:
            count_a += 1
        elif cell == mark_b:
            count_b += 1

    if count_a and count_b:
        return 0  # Nullified
    if count_a:
        return line_scores[count_a]
    if count_b:
        return -line_scores[count_b]
    return 0
