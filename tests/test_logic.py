import itertools
import logging

import pytest

from games.tic_tac_toe.geometry import BoardGeometry
from games.tic_tac_toe.logic import (TicTacToeLogic, MoveResult, WINNING_LINES, EMPTY,
                                     IN_PROGRESS, WON, DRAWN)
from games.tic_tac_toe.results import ResultLog, ResultWriteError

# Ходы без тройки в ряд: X O X / X O O / O X X
DRAW_MOVES = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]
X_WINS_TOP_ROW = [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)]


@pytest.fixture
def result_log(tmp_path):
    return ResultLog(str(tmp_path / "game_results.txt"))


@pytest.fixture
def logic(result_log):
    return TicTacToeLogic(result_log=result_log)


def play(logic, moves):
    return [logic.apply_move(row, col) for row, col in moves]


class TestInitialState:
    def test_board_is_empty(self, logic):
        assert logic.board == [[EMPTY] * 3 for _ in range(3)]

    def test_x_moves_first(self, logic):
        assert logic.turn == 'X'
        assert logic.last_player is None

    def test_in_progress(self, logic):
        assert logic.state == IN_PROGRESS
        assert not logic.game_over
        assert logic.result_text == ''
        assert logic.winning_line is None


class TestApplyMove:
    def test_turns_alternate(self, logic):
        seen = []
        for row, col in DRAW_MOVES[:8]:
            seen.append(logic.turn)
            assert logic.apply_move(row, col) is MoveResult.PLACED
            assert logic.last_player == seen[-1]

        assert seen == ['X', 'O'] * 4

    def test_occupied_cell_is_noop(self, logic):
        logic.apply_move(1, 1)
        before = [row[:] for row in logic.board]

        for _ in range(3):
            assert logic.apply_move(1, 1) is MoveResult.OCCUPIED

        assert logic.board == before
        assert logic.turn == 'O'
        assert logic.last_player == 'X'

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (-1, -1), (5, 7)])
    def test_out_of_range_is_rejected(self, logic, row, col):
        logic.apply_move(0, 0)
        before = [r[:] for r in logic.board]

        assert logic.apply_move(row, col) is MoveResult.OUT_OF_RANGE
        assert logic.board == before
        assert logic.turn == 'O'

    def test_no_move_after_game_over(self, logic):
        play(logic, X_WINS_TOP_ROW)
        before = [r[:] for r in logic.board]

        assert logic.apply_move(2, 2) is MoveResult.GAME_OVER
        assert logic.board == before

    def test_pixel_to_cell_feeds_apply_move(self, logic):
        row, col = logic.pixel_to_cell(0, 0)

        assert logic.apply_move(row, col) is MoveResult.OUT_OF_RANGE


class TestCheckWinner:
    @pytest.mark.parametrize("cells", WINNING_LINES)
    def test_each_line_is_detected(self, cells):
        logic = TicTacToeLogic()
        for row, col in cells:
            logic.board[row][col] = 'O'

        line = logic.check_winner()

        assert line is not None
        assert line.mark == 'O'
        assert line.cells == cells
        assert (line.start, line.end) == BoardGeometry().line_for(cells)

    def test_no_winner_on_empty_board(self, logic):
        assert logic.check_winner() is None

    def test_mixed_line_is_not_a_win(self, logic):
        logic.board[0] = ['X', 'O', 'X']
        assert logic.check_winner() is None

    def test_first_line_in_scan_order_wins(self):
        logic = TicTacToeLogic()
        # Полная строка 2 и полный столбец 0 одновременно
        logic.board = [['X', EMPTY, EMPTY],
                       ['X', EMPTY, EMPTY],
                       ['X', 'X', 'X']]

        line = logic.check_winner()

        assert line.cells == ((2, 0), (2, 1), (2, 2))

    def test_first_result_is_kept(self, result_log):
        logic = TicTacToeLogic(result_log=result_log)
        logic.board = [['X', 'X', 'X'],
                       ['O', 'O', 'O'],
                       [EMPTY, EMPTY, EMPTY]]

        assert logic.update() is True
        assert logic.update() is False

        assert logic.winning_line.cells == ((0, 0), (0, 1), (0, 2))
        assert logic.result_text == "Player X wins!"
        assert result_log.read_results() == ["Player X wins!"]


class TestCheckDraw:
    def test_full_board_is_draw(self, logic):
        play(logic, DRAW_MOVES)

        assert logic.check_winner() is None
        assert logic.check_draw()

    def test_partial_board_is_not_draw(self, logic):
        play(logic, DRAW_MOVES[:8])

        assert not logic.check_draw()

    def test_draw_iff_full_and_no_winner(self):
        for marks in itertools.product('XO', repeat=9):
            logic = TicTacToeLogic()
            logic.board = [list(marks[i:i + 3]) for i in (0, 3, 6)]
            assert logic.check_draw() == (logic.check_winner() is None)

            row, col = divmod(sum(m == 'X' for m in marks) % 9, 3)
            logic.board[row][col] = EMPTY
            assert not logic.check_draw()

    def test_update_prefers_win_over_draw(self, logic):
        logic.board = [['X', 'X', 'X'],
                       ['O', 'O', 'X'],
                       ['X', 'O', 'O']]

        logic.update()

        assert logic.state == WON


class TestScenarios:
    def test_x_wins_top_row(self, logic, result_log):
        results = play(logic, X_WINS_TOP_ROW)

        assert results == [MoveResult.PLACED] * 5
        assert logic.state == WON
        assert logic.winner == 'X'
        assert logic.result_text == "Player X wins!"
        assert logic.winning_line.cells == ((0, 0), (0, 1), (0, 2))
        assert (logic.winning_line.start, logic.winning_line.end) == ((20, 160), (620, 160))

        # Повторные кадры не пишут результат еще раз
        logic.update()
        logic.update()
        assert result_log.read_results() == ["Player X wins!"]

    def test_draw(self, logic, result_log):
        play(logic, DRAW_MOVES)

        assert logic.state == DRAWN
        assert logic.winner == 'Draw'
        assert logic.result_text == "The game is a draw!"
        assert logic.winning_line is None
        assert result_log.read_results() == ["The game is a draw!"]

    def test_win_on_last_cell_is_not_a_draw(self, logic):
        # X закрывает побочную диагональ девятым ходом
        moves = [(0, 0), (0, 1), (0, 2), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2), (1, 1)]
        play(logic, moves)

        assert logic.state == WON
        assert logic.winner == 'X'
        assert logic.result_text == "Player X wins!"
        assert not logic.check_draw()

    def test_results_accumulate_across_rounds(self, logic, result_log):
        play(logic, X_WINS_TOP_ROW)
        logic.reset()
        play(logic, DRAW_MOVES)

        assert result_log.read_results() == ["Player X wins!", "The game is a draw!"]


class TestReset:
    @pytest.mark.parametrize("moves", [[], [(1, 1)], X_WINS_TOP_ROW, DRAW_MOVES])
    def test_restores_initial_state(self, logic, moves):
        play(logic, moves)

        logic.reset()

        assert logic.board == [[EMPTY] * 3 for _ in range(3)]
        assert logic.turn == 'X'
        assert not logic.game_over
        assert logic.state == IN_PROGRESS
        assert logic.result_text == ''
        assert logic.winner is None
        assert logic.winning_line is None

    def test_logs_reset(self, logic, caplog):
        caplog.set_level(logging.INFO)

        logic.reset()

        assert "Resetting game..." in caplog.messages
        assert "Game reset complete." in caplog.messages

    def test_injected_logger(self):
        records = []

        class ListHandler(logging.Handler):
            def emit(self, record):
                records.append(record.getMessage())

        logger = logging.getLogger("test.injected")
        logger.setLevel(logging.INFO)
        logger.addHandler(ListHandler())
        logger.propagate = False

        TicTacToeLogic(logger=logger)

        assert records == ["Resetting game...", "Game reset complete."]


class TestResultWriteFailure:
    def test_failure_notifies_and_keeps_result(self, mocker):
        result_log = mocker.Mock()
        result_log.append.side_effect = ResultWriteError("Error writing to file: disk full")
        notify = mocker.Mock()
        logic = TicTacToeLogic(result_log=result_log, notify=notify)

        play(logic, X_WINS_TOP_ROW)

        notify.assert_called_once_with("Error writing to file: disk full")
        assert logic.state == WON
        assert logic.result_text == "Player X wins!"

    def test_play_continues_after_failure(self, mocker):
        result_log = mocker.Mock()
        result_log.append.side_effect = ResultWriteError("nope")
        logic = TicTacToeLogic(result_log=result_log)

        play(logic, X_WINS_TOP_ROW)
        logic.reset()

        assert logic.apply_move(1, 1) is MoveResult.PLACED
        assert result_log.append.call_count == 1

    def test_failure_is_logged(self, mocker, caplog):
        result_log = mocker.Mock()
        result_log.append.side_effect = ResultWriteError("Error writing to file: denied")
        logic = TicTacToeLogic(result_log=result_log)

        play(logic, X_WINS_TOP_ROW)

        assert any(r.levelno == logging.ERROR and "denied" in r.getMessage() for r in caplog.records)
