import unittest

import numpy as np

from ttt_engine import AIPlayer, Difficulty, GameStatus, PlayerType, Settings, TicTacToeGame, WhoFirst
from ttt_engine.board import Mark, board_from_rows, copy_board

import main


class TestTicTacToeGame(unittest.TestCase):
    def test_defaults(self):
        game = TicTacToeGame(seed=0)
        self.assertEqual(game.state.settings.difficulty, Difficulty.EASY)
        self.assertEqual(game.state.settings.who_first, WhoFirst.RANDOM)
        self.assertEqual(game.state.statistics.round, 1)
        self.assertIn(game.current_player, (PlayerType.HUMAN, PlayerType.AI))

    def test_request_move_uses_current_mark(self):
        game = TicTacToeGame(Settings(who_first=WhoFirst.HUMAN), seed=0)
        game.request_move(1, 1)
        self.assertEqual(game.state.board.cells[1][1], Mark.X)
        self.assertEqual(game.current_player, PlayerType.AI)

    def test_ai_move(self):
        game = TicTacToeGame(Settings(who_first=WhoFirst.AI), seed=0)
        outcome = game.play_ai_move()
        self.assertTrue(outcome.accepted)
        self.assertEqual(sum(cell == Mark.X for column in game.state.board.cells for cell in column), 1)
        self.assertEqual(game.current_player, PlayerType.HUMAN)

    def test_impossible_ai_takes_the_win(self):
        game = TicTacToeGame(Settings(difficulty=Difficulty.IMPOSSIBLE, who_first=WhoFirst.AI), seed=3)
        for cells in [(0, 0), (0, 1), (1, 0), (1, 1)]:
            game.request_move(*cells)

        outcome = game.play_ai_move()

        self.assertEqual(outcome.winner, PlayerType.AI)
        self.assertEqual(game.state.board.cells[2][0], Mark.X)

    def test_ai_move_after_round_is_over(self):
        game = TicTacToeGame(Settings(who_first=WhoFirst.HUMAN), seed=0)
        game.request_move(1, 1)
        game.request_move(1, 1)
        self.assertEqual(game.state.board.status, GameStatus.STOP)

        outcome = game.play_ai_move()

        self.assertFalse(outcome.accepted)
        self.assertEqual(outcome.status, GameStatus.STOP)

    def test_impossible_never_loses(self):
        game = TicTacToeGame(Settings(difficulty=Difficulty.IMPOSSIBLE), seed=11)
        opponent = AIPlayer(Difficulty.EASY, game.rng)

        main.play_rounds(game, opponent, 8)

        stats = game.state.statistics
        self.assertEqual(stats.round, 8)
        self.assertEqual(stats.scores[PlayerType.HUMAN], 0)
        self.assertEqual(stats.scores[PlayerType.AI] + stats.ties, 8)

    def test_new_game_applies_settings(self):
        game = TicTacToeGame(Settings(difficulty=Difficulty.EASY), seed=0)
        game.state.settings.difficulty = Difficulty.HARD
        game.state.settings.debug_mode = True
        game.new_game()

        self.assertEqual(game.ai.difficulty, Difficulty.HARD)
        self.assertTrue(game.ai.use_search)
        self.assertEqual(game.state.statistics.round, 1)


class TestAIPlayer(unittest.TestCase):
    def test_impossible_takes_an_immediate_win(self):
        # (1, 2) and (2, 1) also win, but only two moves later
        board = board_from_rows(["XX.", ".O.", "X.O"])
        ai = AIPlayer(Difficulty.IMPOSSIBLE, np.random.default_rng(9))

        picks = {(move.x, move.y) for move in (ai.get_move(board, Mark.X) for _ in range(100))}

        self.assertTrue(picks)
        self.assertTrue(picks <= {(0, 1), (2, 0)})

    def test_impossible_delays_a_forced_loss(self):
        board = board_from_rows(["OO.", "X.O", "X.."])
        ai = AIPlayer(Difficulty.IMPOSSIBLE, np.random.default_rng(9))
        for _ in range(20):
            move = ai.get_move(board, Mark.X)
            self.assertEqual((move.x, move.y), (2, 0))


class TestAnalyse(unittest.TestCase):
    def setUp(self):
        self.game = TicTacToeGame(Settings(difficulty=Difficulty.MEDIUM, who_first=WhoFirst.HUMAN), seed=5)
        for cells in [(0, 0), (1, 1), (1, 0)]:
            self.game.request_move(*cells)

    def test_is_read_only(self):
        before = copy_board(self.game.state.board.cells)
        player = self.game.current_player
        move_count = self.game.state.statistics.move_count

        self.game.analyse()
        self.game.analysis_grid(PlayerType.HUMAN)

        self.assertEqual(self.game.state.board.cells, before)
        self.assertEqual(self.game.current_player, player)
        self.assertEqual(self.game.state.statistics.move_count, move_count)
        self.assertEqual(self.game.state.board.status, GameStatus.IN_PROGRESS)

    def test_current_player_must_block(self):
        moves = {(m.x, m.y): m for m in self.game.analyse()}
        self.assertEqual(len(moves), 6)
        self.assertTrue(all(move.mark == Mark.O for move in moves.values()))
        self.assertTrue(moves[(2, 0)].opp_props.win)
        self.assertGreater(moves[(2, 0)].mini_max, -1000)
        self.assertEqual(moves[(2, 2)].mini_max, -1000)

    def test_other_perspective(self):
        grid = self.game.analysis_grid(PlayerType.HUMAN)
        self.assertIsNone(grid[0][0])
        self.assertIsNone(grid[1][0])
        self.assertEqual(grid[2][0].mark, Mark.X)
        self.assertTrue(grid[2][0].props.win)
        self.assertEqual(grid[2][0].mini_max, 1000)


class TestMain(unittest.TestCase):
    def test_self_play(self):
        with self.assertLogs("ttt_engine.main", level="INFO") as logs:
            self.assertEqual(main.main(["--rounds", "2", "--seed", "4", "--opponent", "medium"]), 0)

        summary = "\n".join(logs.output)
        self.assertIn("First player: Random", summary)
        self.assertIn("AI (Impossible - Perfect play)", summary)
        self.assertIn("Opponent (Medium - Sometimes strategic)", summary)

    def test_descriptions(self):
        self.assertEqual(Difficulty.HARD.description, "Hard - Occasional mistakes")
        self.assertEqual(WhoFirst.HUMAN_VS_HUMAN.description, "Human vs human")
        self.assertEqual(PlayerType.HUMAN2.description, "Human 2")


if __name__ == "__main__":
    unittest.main()
