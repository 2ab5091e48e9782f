"""
Self-play runner for the TicTacToe engine.

The AI seat plays at --difficulty; the other seat is driven by a second
AI at --opponent. Statistics are logged at the end.

Run:
    python main.py --difficulty impossible --opponent medium --rounds 20
"""

import argparse
import logging
import sys

from ttt_engine import AIPlayer, Difficulty, PlayerType, Settings, TicTacToeGame, WhoFirst
from ttt_engine.board import board_to_text

logger = logging.getLogger("ttt_engine.main")


def play_rounds(game: TicTacToeGame, opponent: AIPlayer, rounds: int):
    """Play `rounds` rounds, the AI seat against `opponent`."""
    for number in range(rounds):
        if number > 0:
            game.next_round()

        while not game.state.is_round_over:
            if game.current_player == PlayerType.AI:
                outcome = game.play_ai_move()
            else:
                mark = game.controller.current_mark(game.state)
                move = opponent.get_move(game.state.board.cells, mark)
                outcome = game.request_move(move.x, move.y)

            if not outcome.accepted:
                logger.error(f"Move rejected: {outcome.error}")
                return

        logger.debug("\n" + board_to_text(game.state.board.cells))


def main(argv=None) -> int:
    """Main entry point."""
    difficulties = [difficulty.value for difficulty in Difficulty]

    parser = argparse.ArgumentParser(description="TicTacToe engine self-play")
    parser.add_argument(
        "--difficulty",
        choices=difficulties,
        default=Difficulty.IMPOSSIBLE.value,
        help="Difficulty of the AI seat"
    )
    parser.add_argument(
        "--opponent",
        choices=difficulties,
        default=Difficulty.EASY.value,
        help="Difficulty of the other seat"
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=10,
        help="Number of rounds to play"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for repeatable games"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every move and board"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s"
    )

    settings = Settings(difficulty=Difficulty(args.difficulty), who_first=WhoFirst.RANDOM)
    game = TicTacToeGame(settings, seed=args.seed)
    opponent = AIPlayer(Difficulty(args.opponent), game.rng)

    play_rounds(game, opponent, args.rounds)

    stats = game.state.statistics
    logger.info("=" * 40)
    logger.info(f"First player: {settings.who_first.description}")
    logger.info(f"AI ({settings.difficulty.description}): {stats.scores[PlayerType.AI]} wins")
    logger.info(f"Opponent ({opponent.difficulty.description}): {stats.scores[PlayerType.HUMAN]} wins")
    logger.info(f"Ties: {stats.ties}")
    logger.info("=" * 40)
    return 0


if __name__ == "__main__":
    sys.exit(main())
