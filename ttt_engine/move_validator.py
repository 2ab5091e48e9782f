"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional
from dataclasses import dataclass

from .board import BOARD_SIZE, Mark
from .game_state import GameState, GameStatus


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The round must be in progress
    2. The cell must be on the board
    3. The cell must be empty
    4. The mark must be X or O
    5. The mark must be the one whose turn it is
    """

    def validate_move(
        self,
        game_state: GameState,
        mark: Mark,
        x: int,
        y: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            mark: Mark being placed.
            x: Column of the cell (0-2).
            y: Row of the cell (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.board.status != GameStatus.IN_PROGRESS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Round is not in progress ({game_state.board.status.value})"
            )

        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({x}, {y}). Must be 0-2."
            )

        if mark not in (Mark.X, Mark.O):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cannot place {mark.name} on the board"
            )

        cell = game_state.board.cells[x][y]
        if cell != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({x}, {y}) is already occupied by {cell.name}"
            )

        return ValidationResult(is_valid=True)

    def validate_mark_placement(
        self,
        game_state: GameState,
        mark: Mark,
        x: int,
        y: int,
        expected_mark: Mark
    ) -> ValidationResult:
        """
        Validate a move and that it is played with the right mark.

        Args:
            game_state: Current game state.
            mark: Mark being placed.
            x: Column of the cell (0-2).
            y: Row of the cell (0-2).
            expected_mark: Mark of the player whose turn it is.

        Returns:
            ValidationResult.
        """
        basic_validation = self.validate_move(game_state, mark, x, y)
        if not basic_validation.is_valid:
            return basic_validation

        if mark != expected_mark:
            return ValidationResult(
                is_valid=False,
                error_message=f"Wrong mark! Expected {expected_mark.name}, got {mark.name}"
            )

        return ValidationResult(is_valid=True)
