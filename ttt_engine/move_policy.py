"""
Move selection for the AI.
Picks one of the scored legal moves depending on difficulty.
"""

import logging
from typing import List, Sequence, assert_never

import numpy as np

from .game_state import Difficulty
from .legal_moves import LegalMove

logger = logging.getLogger(__name__)


def pick_move(legal_moves: Sequence[LegalMove], difficulty: Difficulty, rng: np.random.Generator) -> LegalMove:
    """
    Pick a move from the legal moves.

    Args:
        legal_moves: Candidates from a board that is not finished.
        difficulty: Which policy to use.
        rng: Source of randomness.

    Returns:
        The picked move.
    """
    if not legal_moves:
        raise ValueError("No legal moves to pick from")

    # No point in thinking if there is only one move
    if len(legal_moves) == 1:
        return legal_moves[0]

    if difficulty == Difficulty.EASY:
        return pick_random(legal_moves, rng)
    elif difficulty == Difficulty.MEDIUM or difficulty == Difficulty.HARD:
        # Same policy, different weight tables
        return pick_weighted(legal_moves, rng)
    elif difficulty == Difficulty.IMPOSSIBLE:
        return pick_highest_score(legal_moves, rng)
    else:
        assert_never(difficulty)


def pick_random(legal_moves: Sequence[LegalMove], rng: np.random.Generator) -> LegalMove:
    index = int(rng.integers(len(legal_moves)))
    return legal_moves[index]


def pick_weighted(legal_moves: Sequence[LegalMove], rng: np.random.Generator) -> LegalMove:
    """
    Pick randomly, using each move's weight as its chance.

    One uniform draw over the total weight; the first move whose
    cumulative weight is strictly greater than the draw is picked,
    so a move with weight 0 is never picked while the total is positive.
    """
    cumulative = np.cumsum([move.weight for move in legal_moves])
    total = cumulative[-1]

    if total <= 0:
        logger.warning("All legal moves have zero weight, picking uniformly")
        return pick_random(legal_moves, rng)

    draw = rng.random() * total
    index = int(np.searchsorted(cumulative, draw, side="right"))
    return legal_moves[index]


def pick_highest_score(legal_moves: Sequence[LegalMove], rng: np.random.Generator) -> LegalMove:
    """
    Pick the move with the highest score.
    If several moves share it, one of them is picked at random.
    """
    best_moves: List[LegalMove] = []
    best_score = None

    for move in legal_moves:
        if best_score is None or move.score > best_score:
            best_score = move.score
            best_moves = [move]
        elif move.score == best_score:
            best_moves.append(move)

    logger.debug(f"Found {len(best_moves)} best move(s) with score {best_score}")

    if len(best_moves) == 1:
        return best_moves[0]
    return pick_random(best_moves, rng)
