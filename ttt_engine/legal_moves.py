"""
Legal move resolver for TicTacToe.

Every empty cell is a legal move. Each one is described from both sides
(what it does for the mover, what it would do for the opponent) and given
a score and a weight:
- score uses the default point table and is the same on any difficulty
- weight uses the difficulty's table and drives weighted-random picks
On Impossible both are the search verdict instead.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .board import Mark, empty_cells, is_center, is_corner, lines_through
from .config import EngineConfig, PointsData
from .game_state import Difficulty
from .minimax import score_move
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

_win_checker = WinChecker()


@dataclass
class MoveProps:
    """Features of a move for one side."""
    win: bool = False     # Completes a line
    line_up: int = 0      # Own marks lined up with this cell on uncontested lines
    fork: bool = False    # Creates two threats at once


@dataclass
class LegalMove:
    """
    A scored candidate move.
    """
    mark: Mark                  # Who is moving: crosses or naughts
    x: int
    y: int
    score: int = 0              # Higher is better. Same on any difficulty
    weight: int = 0             # Relative chance of being picked on Medium/Hard
    mini_max: int = 0           # Search verdict, 0 unless the search was consulted
    mini_max_depth: int = 0     # Ply at which the verdict was found
    props: MoveProps = field(default_factory=MoveProps)       # For the mover
    opp_props: MoveProps = field(default_factory=MoveProps)   # For the opponent


def create_legal_move(mark: Mark, x: int, y: int) -> LegalMove:
    """Unscored move, e.g. for a human click."""
    return LegalMove(mark=mark, x=x, y=y)


def resolve_all_legal_moves(
    board,
    mover: Mark,
    difficulty: Difficulty,
    use_search: Optional[bool] = None,
    config=EngineConfig
) -> List[LegalMove]:
    """
    Find all legal moves and score them.

    Args:
        board: Current board (not modified).
        mover: Mark that is about to play.
        difficulty: Selects the weight table.
        use_search: Attach search verdicts. Defaults to on for Impossible
            (or when config.DEBUG_MODE is set).
        config: Engine configuration.

    Returns:
        One LegalMove per empty cell. Empty if the board is full (a tie).
    """
    if use_search is None:
        use_search = difficulty == Difficulty.IMPOSSIBLE or config.DEBUG_MODE

    legal_moves = []
    for x, y in empty_cells(board):
        mini_max = 0
        depth = 0
        if use_search:
            verdict = score_move(board, mover, x, y, config.SEARCH_MAX_DEPTH, config)
            mini_max, depth = verdict.score, verdict.depth
        legal_moves.append(
            resolve_legal_move(board, mover, x, y, difficulty, mini_max, config, depth)
        )

    logger.debug(f"{len(legal_moves)} legal move(s) for {mover.description}")
    return legal_moves


def resolve_legal_move(
    board,
    mover: Mark,
    x: int,
    y: int,
    difficulty: Difficulty,
    mini_max: int = 0,
    config=EngineConfig,
    mini_max_depth: int = 0
) -> LegalMove:
    """
    Create a legal move for (x, y) and fill in its features and points.

    Args:
        mini_max: Search verdict for this move, if one was computed.
        mini_max_depth: Ply at which that verdict was found.
    """
    move = create_legal_move(mover, x, y)
    move.props = resolve_move_props(board, mover, x, y)
    move.opp_props = resolve_move_props(board, mover.opposite(), x, y)
    move.mini_max = mini_max
    move.mini_max_depth = mini_max_depth

    if difficulty == Difficulty.IMPOSSIBLE:
        move.score = move.weight = calc_search_points(mini_max, mini_max_depth, config)
    else:
        move.score = calc_move_points(move, config.DEFAULT_SCORING)
        move.weight = calc_move_points(move, config.WEIGHT_TABLES[difficulty])
    return move


def resolve_move_props(board, mark: Mark, x: int, y: int) -> MoveProps:
    """Features of `mark` playing (x, y)."""
    props = MoveProps()
    props.win = _win_checker.is_winning_move(board, mark, x, y)
    props.line_up = calc_line_up(board, mark, x, y)
    # Two or more lineups that do not win already are two threats
    props.fork = props.line_up >= 2 and not props.win
    return props


def calc_line_up(board, mark: Mark, x: int, y: int) -> int:
    """
    Count `mark`s lined up with (x, y).

    Example, playing X (. is empty):
        . . X
        . . .
        X . X
    The top-left corner (0, 0) gets 3, the cells next to it get 1.
    A line only counts if its other cells are empty or `mark`.
    """
    count = 0
    for line in lines_through(x, y):
        others = [board[cx][cy] for cx, cy in line if (cx, cy) != (x, y)]
        if all(cell in (mark, Mark.EMPTY) for cell in others):
            count += others.count(mark)
    return count


def calc_move_points(move: LegalMove, points: PointsData) -> int:
    """
    Points for a move under the given table.

    Position, lineups, own and prevented forks, the search verdict and
    own and prevented wins all add up. Never below 0.
    """
    total = calc_position_points(move, points)
    total += move.props.line_up * points.bonus_line_up
    if move.props.fork:
        total += points.bonus_fork
    if move.opp_props.fork:
        total += points.bonus_prevent_fork
    total += move.mini_max * points.mul_mini_max
    if move.props.win:
        total += points.bonus_win
    if move.opp_props.win:
        total += points.bonus_prevent_loss
    return max(total, 0)


def calc_position_points(move: LegalMove, points: PointsData) -> int:
    if is_center(move.x, move.y):
        return points.pos_center
    if is_corner(move.x, move.y):
        return points.pos_corner
    return points.pos_basic


def calc_search_points(mini_max: int, depth: int, config=EngineConfig) -> int:
    """
    Points for a move from its search verdict alone.

    Wins score above draws, draws above losses. Within the same verdict a
    shallower win or draw and a deeper loss score higher. Never below 0.
    """
    if mini_max < 0:
        bonus = depth
    else:
        bonus = max(config.SEARCH_MAX_DEPTH - depth, 0)
    return max(mini_max + config.MINIMAX_WIN + bonus, 0)
