class DrawingSurface:
    """То, на чем игра умеет рисовать. Координаты в пикселях окна"""

    def draw_line(self, start, end, color, width=1):
        raise NotImplementedError

    def draw_text(self, position, text, color, size):
        # position - верхний левый угол текста
        raise NotImplementedError


class InputSource:
    """Состояние мыши, которое опрашивается каждый кадр"""

    def is_left_mouse_button_down(self):
        raise NotImplementedError

    def get_mouse_coordinates(self):
        raise NotImplementedError
