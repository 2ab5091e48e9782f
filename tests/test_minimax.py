import unittest

from ttt_engine.board import Mark, board_from_rows, copy_board, create_board
from ttt_engine.minimax import MiniMaxResult, resolve_mini_max, score_move


class TestResolveMiniMax(unittest.TestCase):
    def test_depth_zero_scores_the_root(self):
        result = resolve_mini_max(create_board(), Mark.X, 0)
        self.assertEqual(result, MiniMaxResult(score=0, depth=0, x=-1, y=-1))

    def test_depth_one_prefers_center(self):
        result = resolve_mini_max(create_board(), Mark.X, 1)
        self.assertEqual(result, MiniMaxResult(score=4, depth=1, x=1, y=1))

    def test_takes_immediate_win(self):
        board = board_from_rows(["...", "XX.", "..."])
        result = resolve_mini_max(board, Mark.X, 15)
        self.assertEqual(result, MiniMaxResult(score=1000, depth=1, x=2, y=1))

    def test_blocks_immediate_loss(self):
        board = board_from_rows(["OO.", ".X.", "..."])
        result = resolve_mini_max(board, Mark.X, 9)
        self.assertEqual((result.x, result.y), (2, 0))
        self.assertGreater(result.score, -1000)

    def test_prefers_the_faster_win(self):
        # (0, 1) is scanned first and wins two moves later; (2, 0) wins now
        board = board_from_rows(["XX.", ".O.", "..O"])
        self.assertEqual(score_move(board, Mark.X, 0, 1, 9).depth, 3)

        result = resolve_mini_max(board, Mark.X, 9)

        self.assertEqual(result, MiniMaxResult(score=1000, depth=1, x=2, y=0))

    def test_prefers_the_slower_loss(self):
        # Every move loses. (1, 1) is scanned first and loses at once,
        # blocking at (2, 0) only loses to the fork that follows
        board = board_from_rows(["OO.", "X.O", "X.."])
        self.assertEqual(score_move(board, Mark.X, 1, 1, 9), MiniMaxResult(score=-1000, depth=2, x=1, y=1))

        result = resolve_mini_max(board, Mark.X, 9)

        self.assertEqual(result, MiniMaxResult(score=-1000, depth=4, x=2, y=0))

    def test_already_won(self):
        board = board_from_rows(["XXX", "OO.", "..."])
        self.assertEqual(resolve_mini_max(board, Mark.X, 9), MiniMaxResult(score=1000, depth=0))
        self.assertEqual(resolve_mini_max(board, Mark.O, 9), MiniMaxResult(score=-1000, depth=0))

    def test_already_drawn(self):
        board = board_from_rows(["XOX", "XOO", "OXX"])
        self.assertEqual(resolve_mini_max(board, Mark.X, 9), MiniMaxResult(score=0, depth=0))

    def test_perfect_play_from_empty_board_is_a_draw(self):
        result = resolve_mini_max(create_board(), Mark.X, 9)
        self.assertEqual(result.score, 0)
        self.assertIn((result.x, result.y), [(x, y) for x in range(3) for y in range(3)])

    def test_board_is_not_modified(self):
        board = board_from_rows(["X..", ".O.", "..."])
        before = copy_board(board)
        resolve_mini_max(board, Mark.X, 9)
        score_move(board, Mark.X, 2, 2, 9)
        self.assertEqual(board, before)


class TestScoreMove(unittest.TestCase):
    def test_winning_move(self):
        board = board_from_rows(["...", "XX.", "..."])
        result = score_move(board, Mark.X, 2, 1, 9)
        self.assertEqual((result.score, result.depth, result.x, result.y), (1000, 1, 2, 1))

    def test_losing_move(self):
        board = board_from_rows(["OO.", ".X.", "..."])
        self.assertEqual(score_move(board, Mark.X, 0, 2, 9).score, -1000)

    def test_matches_resolve_mini_max_for_best_move(self):
        board = board_from_rows(["O..", ".X.", "..."])
        best = resolve_mini_max(board, Mark.X, 9)
        self.assertEqual(score_move(board, Mark.X, best.x, best.y, 9), best)

    def test_occupied_cell_raises(self):
        board = board_from_rows(["X..", "...", "..."])
        with self.assertRaises(ValueError):
            score_move(board, Mark.O, 0, 0, 9)

    def test_searches_at_least_one_ply(self):
        result = score_move(create_board(), Mark.X, 1, 1, 0)
        self.assertEqual((result.score, result.depth), (4, 1))


if __name__ == "__main__":
    unittest.main()
