import logging

from games.tic_tac_toe.geometry import (BoardGeometry, RESET_BUTTON_RECT, QUIT_BUTTON_RECT,
                                        STATUS_TEXT_POS, STATUS_FONT_SIZE)
from games.tic_tac_toe.logic import TicTacToeLogic, MoveResult

GRID_COLOR = "black"
X_COLOR = "red"
O_COLOR = "blue"
WIN_LINE_COLOR = "yellow"
STATUS_COLOR = "black"

WIN_LINE_WIDTH = 5


class TicTacToeController:
    def __init__(self, geometry=None, logic=None, on_quit=None, logger=None,
                 reset_rect=RESET_BUTTON_RECT, quit_rect=QUIT_BUTTON_RECT):
        self.geometry = geometry or BoardGeometry()
        self.log = logger or logging.getLogger(__name__)
        self.logic = logic or TicTacToeLogic(self.geometry, logger=self.log)
        self.on_quit = on_quit
        self.reset_rect = reset_rect
        self.quit_rect = quit_rect

        self.should_close = False
        self._was_down = False

    def poll(self, input_source):
        x, y = input_source.get_mouse_coordinates()
        self.step(input_source.is_left_mouse_button_down(), x, y)

    def step(self, mouse_down, x, y):
        # Реагируем только на момент нажатия, а не на удержание кнопки
        pressed = mouse_down and not self._was_down
        self._was_down = mouse_down

        if pressed:
            if self.reset_rect.contains(x, y):
                self.press_reset()
            elif self.quit_rect.contains(x, y):
                self.press_quit()
            else:
                self.handle_click(x, y)

        self.logic.update()

    def handle_click(self, x, y):
        row, col = self.logic.pixel_to_cell(x, y)
        result = self.logic.apply_move(row, col)
        if result is MoveResult.OUT_OF_RANGE:
            self.log.warning("Invalid board position (%d, %d) for click at (%d, %d)", row, col, x, y)
        return result

    def press_reset(self):
        self.log.info("Reset button pressed.")
        self.logic.reset()

    def press_quit(self):
        self.log.info("Quit button pressed.")
        self.should_close = True
        if self.on_quit:
            self.on_quit()

    def status_text(self):
        if self.logic.game_over:
            return self.logic.result_text
        return f"Player {self.logic.turn}'s turn"

    def draw(self, surface):
        for start, end in self.geometry.grid_lines():
            surface.draw_line(start, end, GRID_COLOR)

        for row in range(3):
            for col in range(3):
                mark = self.logic.board[row][col]
                if mark:
                    color = X_COLOR if mark == 'X' else O_COLOR
                    surface.draw_text(self.geometry.mark_position(row, col), mark, color,
                                      self.geometry.font_size)

        if self.logic.game_over and self.logic.winning_line is not None:
            line = self.logic.winning_line
            surface.draw_line(line.start, line.end, WIN_LINE_COLOR, WIN_LINE_WIDTH)

        surface.draw_text(STATUS_TEXT_POS, self.status_text(), STATUS_COLOR, STATUS_FONT_SIZE)
