"""
Game-tree search for TicTacToe.
Minimax over every future move, maximizing for the mover at the root.

Positions are explored as immutable tuples, so the caller's board is never
touched, and results for repeated positions are memoised.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from .board import Mark, empty_cells, freeze
from .config import EngineConfig
from .evaluator import evaluate
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

_win_checker = WinChecker()


@dataclass(frozen=True)
class MiniMaxResult:
    """
    Outcome of a search.

    depth is the ply at which the score was found; (x, y) is the first move
    to play, or (-1, -1) when the root itself was scored.
    """
    score: int
    depth: int
    x: int = -1
    y: int = -1


def resolve_mini_max(board, mover: Mark, max_depth: int, config=EngineConfig) -> MiniMaxResult:
    """
    Find the best move for `mover`.

    Args:
        board: Current board (not modified).
        mover: Mark to move; the search maximizes for it.
        max_depth: Plies to look ahead. Deeper than the empty cells is harmless.
        config: Source of the search constants.

    Returns:
        MiniMaxResult of the best root move. Among equal scores the fastest
        win (or slowest loss) is kept.
    """
    position = freeze(board)

    root_score = _terminal_score(position, mover, config)
    if root_score is None and max_depth <= 0:
        root_score = evaluate(mover, mover.opposite(), position, config.LINE_SCORES)
    if root_score is not None:
        return MiniMaxResult(score=root_score, depth=0)

    best = MiniMaxResult(score=-config.MINIMAX_MAX, depth=0)
    for x, y in empty_cells(position):
        result = _score_root_move(position, mover, x, y, max_depth, config)
        if _is_better(result.score, result.depth, best.score, best.depth, maximizing=True):
            best = result

    logger.debug(f"Search for {mover.name} (depth {max_depth}): {best}")
    return best


def score_move(board, mover: Mark, x: int, y: int, max_depth: int, config=EngineConfig) -> MiniMaxResult:
    """
    Search verdict for `mover` playing (x, y).

    This is the same value resolve_mini_max compares for that root move.
    At least one ply is always searched, so a verdict exists even for
    max_depth 0.
    """
    position = freeze(board)
    if position[x][y] != Mark.EMPTY:
        raise ValueError(f"Cell ({x}, {y}) is already occupied by {position[x][y].name}")

    return _score_root_move(position, mover, x, y, max(max_depth, 1), config)


def _score_root_move(position, mover: Mark, x: int, y: int, max_depth: int, config) -> MiniMaxResult:
    child = _place(position, x, y, mover)
    score, depth = _search(child, mover, mover.opposite(), 1, max_depth, config)
    return MiniMaxResult(score=score, depth=depth, x=x, y=y)


@lru_cache(maxsize=None)
def _search(position, ai: Mark, to_move: Mark, depth: int, max_depth: int, config) -> Tuple[int, int]:
    """
    Minimax value of `position` with `to_move` about to play.

    Returns:
        (score, depth at which it was found), score from ai's point of view.
    """
    terminal = _terminal_score(position, ai, config)
    if terminal is not None:
        return terminal, depth

    if depth >= max_depth:
        return evaluate(ai, ai.opposite(), position, config.LINE_SCORES), depth

    maximizing = to_move == ai
    best_score = -config.MINIMAX_MAX if maximizing else config.MINIMAX_MAX
    best_depth = depth

    for x, y in empty_cells(position):
        child = _place(position, x, y, to_move)
        score, found_at = _search(child, ai, to_move.opposite(), depth + 1, max_depth, config)
        if _is_better(score, found_at, best_score, best_depth, maximizing):
            best_score = score
            best_depth = found_at

    return best_score, best_depth


def _terminal_score(position, ai: Mark, config) -> Optional[int]:
    """Score of a finished game, or None if it goes on."""
    if _win_checker.has_line(position, ai):
        return config.MINIMAX_WIN
    if _win_checker.has_line(position, ai.opposite()):
        return -config.MINIMAX_WIN
    if _win_checker.check_draw_state(position):
        return config.MINIMAX_DRAW
    return None


def _is_better(score: int, depth: int, best_score: int, best_depth: int, maximizing: bool) -> bool:
    """
    Compare a child result with the best so far.

    Equal scores: the side choosing wants a good outcome soon and a bad one
    late. Equal score and depth keeps the earlier result.
    """
    if score != best_score:
        return score > best_score if maximizing else score < best_score

    outlook = score if maximizing else -score
    if outlook < 0:
        return depth > best_depth
    return depth < best_depth


def _place(position, x: int, y: int, mark: Mark):
    column = position[x][:y] + (mark,) + position[x][y + 1:]
    return position[:x] + (column,) + position[x + 1:]
