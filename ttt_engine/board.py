"""
Board model for TicTacToe.
The 3x3 grid of marks and the table of winning lines.

The board is indexed board[x][y], where x is the column and y the row.
"""

from enum import Enum
from typing import List, Tuple


class Mark(Enum):
    """State of a single cell."""
    UNKNOWN = "?"   # Never on a well-formed board
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        raise ValueError(f"{self.name} has no opposite mark")

    @property
    def description(self) -> str:
        return _MARK_DESCRIPTIONS[self]


_MARK_DESCRIPTIONS = {
    Mark.UNKNOWN: "Unknown",
    Mark.EMPTY: "Empty",
    Mark.X: "Cross",
    Mark.O: "Naught",
}

Board = List[List[Mark]]
Cell = Tuple[int, int]
Line = Tuple[Cell, Cell, Cell]

BOARD_SIZE = 3

# All possible winning lines, as (x, y) cells
WINNING_LINES: Tuple[Line, ...] = (
    # Same column
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Same row
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)

CENTER: Cell = (1, 1)
CORNERS: Tuple[Cell, ...] = ((0, 0), (0, 2), (2, 0), (2, 2))


def create_board() -> Board:
    """Create an all-empty board."""
    return [[Mark.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


def copy_board(board: Board) -> Board:
    return [list(column) for column in board]


def board_from_rows(rows: List[str]) -> Board:
    """
    Build a board from three row strings, top row first.

    'X', 'O' and '.' (or space) are accepted, e.g. ["XO.", ".X.", "..O"].
    """
    board = create_board()
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in (".", " "):
                continue
            board[x][y] = Mark(char.upper())
    return board


def freeze(board: Board) -> Tuple[Tuple[Mark, ...], ...]:
    """Immutable (hashable) copy of the board."""
    return tuple(tuple(column) for column in board)


def empty_cells(board) -> List[Cell]:
    """
    Get all empty cells on the board.

    Returns:
        List of (x, y) tuples, scanning x first then y.
    """
    empty = []
    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            if board[x][y] == Mark.EMPTY:
                empty.append((x, y))
    return empty


def lines_through(x: int, y: int) -> List[Line]:
    """Winning lines that pass through cell (x, y)."""
    return [line for line in WINNING_LINES if (x, y) in line]


def is_corner(x: int, y: int) -> bool:
    return (x, y) in CORNERS


def is_center(x: int, y: int) -> bool:
    return (x, y) == CENTER


def board_to_text(board) -> str:
    """Render the board as three text rows (for logs)."""
    rows = []
    for y in range(BOARD_SIZE):
        rows.append("|".join(board[x][y].value for x in range(BOARD_SIZE)))
    return "\n-+-+-\n".join(rows)
