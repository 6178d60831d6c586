# Размеры и координаты взяты из исходного окна 620x660
BOARD_X = 20
BOARD_Y = 60
BOARD_SIZE = 600
FONT_SIZE = 100

BUTTON_WIDTH = 100
BUTTON_HEIGHT = 30

STATUS_TEXT_POS = (240, 10)
STATUS_FONT_SIZE = 30

WINDOW_X = 100
WINDOW_Y = 50
WINDOW_WIDTH = 620
WINDOW_HEIGHT = 660


class Rect:
    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def contains(self, x, y):
        # Границы включительно, как в исходной проверке кнопок
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    def as_tuple(self):
        return self.x, self.y, self.width, self.height

    def __repr__(self):
        return f"Rect({self.x}, {self.y}, {self.width}, {self.height})"


RESET_BUTTON_RECT = Rect(10, 10, BUTTON_WIDTH, BUTTON_HEIGHT)
QUIT_BUTTON_RECT = Rect(120, 10, BUTTON_WIDTH, BUTTON_HEIGHT)


class BoardGeometry:
    """Перевод между клетками доски и пикселями окна"""

    def __init__(self, x=BOARD_X, y=BOARD_Y, size=BOARD_SIZE, font_size=FONT_SIZE):
        self.x = x
        self.y = y
        self.size = size
        self.font_size = font_size

    @property
    def cell_size(self):
        return self.size // 3

    def pixel_to_cell(self, x, y):
        # Без ограничения: клик мимо доски дает индекс вне [0, 3)
        row = (y - self.y) // self.cell_size
        col = (x - self.x) // self.cell_size
        return row, col

    def grid_lines(self):
        lines = []
        for i in range(1, 3):
            offset = i * self.cell_size
            lines.append(((self.x + offset, self.y), (self.x + offset, self.y + self.size)))
            lines.append(((self.x, self.y + offset), (self.x + self.size, self.y + offset)))
        return lines

    def mark_position(self, row, col):
        # Верхний левый угол текста метки
        return (self.x * 3 // 2 + col * self.cell_size + self.font_size // 2,
                self.y + row * self.cell_size + self.font_size // 2)

    def row_line(self, row):
        mid_y = self.y + row * self.cell_size + self.cell_size // 2
        return (self.x, mid_y), (self.x + self.size, mid_y)

    def column_line(self, col):
        mid_x = self.x + col * self.cell_size + self.cell_size // 2
        return (mid_x, self.y), (mid_x, self.y + self.size)

    def diagonal_line(self):
        return (self.x, self.y), (self.x + self.size, self.y + self.size)

    def anti_diagonal_line(self):
        return (self.x + self.size, self.y), (self.x, self.y + self.size)

    def line_for(self, cells):
        """Концы отрезка для победной тройки клеток"""
        rows = {r for r, _ in cells}
        cols = {c for _, c in cells}
        if len(rows) == 1:
            return self.row_line(cells[0][0])
        if len(cols) == 1:
            return self.column_line(cells[0][1])
        if cells[0] == (0, 0):
            return self.diagonal_line()
        return self.anti_diagonal_line()
