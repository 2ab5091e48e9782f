"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, the win line and the statistics.
"""

from enum import Enum
from typing import Dict, Optional
from dataclasses import dataclass, field

from .board import Board, Cell, create_board


class Difficulty(Enum):
    """How well the AI plays."""
    EASY = "easy"                # Completely random moves
    MEDIUM = "medium"            # Sometimes tries to make 3 in a row
    HARD = "hard"                # Occasionally makes mistakes
    IMPOSSIBLE = "impossible"    # Perfect play; at best a tie

    @property
    def description(self) -> str:
        return _DIFFICULTY_DESCRIPTIONS[self]


_DIFFICULTY_DESCRIPTIONS = {
    Difficulty.EASY: "Easy - Random moves",
    Difficulty.MEDIUM: "Medium - Sometimes strategic",
    Difficulty.HARD: "Hard - Occasional mistakes",
    Difficulty.IMPOSSIBLE: "Impossible - Perfect play",
}


class WhoFirst(Enum):
    """Who opens each round."""
    RANDOM = "random"                    # AI or human
    HUMAN = "human"
    AI = "ai"
    HUMAN_VS_HUMAN = "human_vs_human"    # Two human players, Human 1 opens

    @property
    def description(self) -> str:
        return _WHO_FIRST_DESCRIPTIONS[self]


_WHO_FIRST_DESCRIPTIONS = {
    WhoFirst.RANDOM: "Random",
    WhoFirst.HUMAN: "Human",
    WhoFirst.AI: "AI",
    WhoFirst.HUMAN_VS_HUMAN: "Human vs human",
}


class GameStatus(Enum):
    """State of the current round."""
    STOP = "stop"                # Halted after an illegal move
    IN_PROGRESS = "in_progress"
    PLAYER_WON = "player_won"    # The winner is the current player
    TIE = "tie"


class PlayerType(Enum):
    """The seats at the table."""
    HUMAN = "human"
    AI = "ai"
    HUMAN1 = "human1"   # Human vs human mode
    HUMAN2 = "human2"

    @property
    def description(self) -> str:
        return _PLAYER_DESCRIPTIONS[self]


_PLAYER_DESCRIPTIONS = {
    PlayerType.HUMAN: "Human",
    PlayerType.AI: "AI",
    PlayerType.HUMAN1: "Human 1",
    PlayerType.HUMAN2: "Human 2",
}


@dataclass
class Strike:
    """
    The winning line, for display.
    If present, a line is drawn from cell `start` to cell `end`.
    """
    present: bool = False
    start: Cell = (0, 0)
    end: Cell = (0, 0)


@dataclass
class Settings:
    """Chosen before the game starts."""
    difficulty: Difficulty = Difficulty.EASY
    who_first: WhoFirst = WhoFirst.RANDOM
    debug_mode: bool = False


@dataclass
class RoundBoard:
    """
    State of one round. Recreated at the start of every round.
    """
    status: GameStatus = GameStatus.IN_PROGRESS
    cells: Board = field(default_factory=create_board)
    first_player: PlayerType = PlayerType.HUMAN
    current_player: PlayerType = PlayerType.HUMAN
    strike: Strike = field(default_factory=Strike)


def _per_player() -> Dict[PlayerType, int]:
    return {player: 0 for player in PlayerType}


@dataclass
class Statistics:
    """
    Running statistics. Kept across rounds, reset for a new game.
    """
    round: int = 0
    move_count: int = 0
    ties: int = 0
    ties_in_row: int = 0
    scores: Dict[PlayerType, int] = field(default_factory=_per_player)
    win_streaks: Dict[PlayerType, int] = field(default_factory=_per_player)


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - Settings (difficulty, who opens)
    - The current round (board, turn, status, win line)
    - Statistics across rounds
    """
    settings: Settings = field(default_factory=Settings)
    board: RoundBoard = field(default_factory=RoundBoard)
    statistics: Statistics = field(default_factory=Statistics)

    @property
    def is_round_over(self) -> bool:
        return self.board.status != GameStatus.IN_PROGRESS

    @property
    def winner(self) -> Optional[PlayerType]:
        """The player who won this round, if any."""
        if self.board.status == GameStatus.PLAYER_WON:
            return self.board.current_player
        return None
