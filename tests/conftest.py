import os

# До создания QApplication
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from core.surface import DrawingSurface, InputSource
from core.settings import SettingsManager


class RecordingSurface(DrawingSurface):
    def __init__(self):
        self.lines = []
        self.texts = []

    def draw_line(self, start, end, color, width=1):
        self.lines.append((start, end, color, width))

    def draw_text(self, position, text, color, size):
        self.texts.append((position, text, color, size))


class FakeMouse(InputSource):
    def __init__(self, down=False, pos=(0, 0)):
        self.down = down
        self.pos = pos

    def is_left_mouse_button_down(self):
        return self.down

    def get_mouse_coordinates(self):
        return self.pos


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def mouse():
    return FakeMouse()


@pytest.fixture
def settings(tmp_path):
    SettingsManager._instance = None
    manager = SettingsManager(str(tmp_path / "settings.json"))
    yield manager
    SettingsManager._instance = None


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
