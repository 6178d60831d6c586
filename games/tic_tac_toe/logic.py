import logging
from collections import namedtuple
from enum import Enum

from games.tic_tac_toe.geometry import BoardGeometry
from games.tic_tac_toe.results import ResultWriteError

EMPTY = ''

IN_PROGRESS = 'in_progress'
WON = 'won'
DRAWN = 'drawn'

# Порядок проверки: строки, столбцы, затем две диагонали
WINNING_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)

WinningLine = namedtuple("WinningLine", ["mark", "cells", "start", "end"])


class MoveResult(Enum):
    PLACED = "placed"
    OCCUPIED = "occupied"
    OUT_OF_RANGE = "out_of_range"
    GAME_OVER = "game_over"


class TicTacToeLogic:
    def __init__(self, geometry=None, result_log=None, notify=None, logger=None):
        self.geometry = geometry or BoardGeometry()
        self.result_log = result_log
        self.notify = notify  # notify(message) - сообщить игроку об ошибке записи
        self.log = logger or logging.getLogger(__name__)
        self.reset()

    def reset(self):
        self.log.info("Resetting game...")
        self.board = [[EMPTY for _ in range(3)] for _ in range(3)]
        self.turn = 'X'  # X всегда ходит первым
        self.last_player = None
        self.winner = None  # 'X', 'O', 'Draw' или None
        self.game_over = False
        self.winning_line = None
        self.result_text = ''
        self.log.info("Game reset complete.")

    @property
    def state(self):
        if not self.game_over:
            return IN_PROGRESS
        return DRAWN if self.winner == 'Draw' else WON

    def pixel_to_cell(self, x, y):
        return self.geometry.pixel_to_cell(x, y)

    def apply_move(self, row, col):
        if not (0 <= row < 3 and 0 <= col < 3):
            return MoveResult.OUT_OF_RANGE

        if self.game_over:
            return MoveResult.GAME_OVER

        if self.board[row][col] != EMPTY:
            return MoveResult.OCCUPIED

        self.board[row][col] = self.turn
        self.last_player = self.turn
        self.turn = 'O' if self.turn == 'X' else 'X'

        self.update()
        return MoveResult.PLACED

    def check_winner(self):
        b = self.board
        for cells in WINNING_LINES:
            (r1, c1), (r2, c2), (r3, c3) = cells
            if b[r1][c1] != EMPTY and b[r1][c1] == b[r2][c2] == b[r3][c3]:
                start, end = self.geometry.line_for(cells)
                return WinningLine(b[r1][c1], cells, start, end)
        return None

    def check_draw(self):
        """Ничья: все клетки заняты и ни одной тройки в ряд"""
        for row in self.board:
            if EMPTY in row:
                return False
        return self.check_winner() is None

    def update(self):
        """Переход в конечное состояние. Срабатывает один раз за раунд"""
        if self.game_over:
            return False

        line = self.check_winner()
        if line is not None:
            self.game_over = True
            self.winning_line = line
            self.winner = self.last_player or line.mark
            self.result_text = f"Player {self.winner} wins!"
        elif self.check_draw():
            self.game_over = True
            self.winner = 'Draw'
            self.result_text = "The game is a draw!"
        else:
            return False

        self.log.info("Round finished: %s", self.result_text)
        self._write_result()
        return True

    def _write_result(self):
        if self.result_log is None:
            return
        try:
            self.result_log.append(self.result_text)
        except ResultWriteError as e:
            self.log.error("%s", e)
            if self.notify:
                self.notify(str(e))
