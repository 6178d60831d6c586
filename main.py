import logging
import sys

from PyQt6.QtWidgets import QApplication

from core.settings import SettingsManager
from games.tic_tac_toe.ui import TicTacToeGame

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level):
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")


def main():
    settings = SettingsManager()
    setup_logging(str(settings.get("log_level")).upper())

    app = QApplication(sys.argv)
    game = TicTacToeGame(settings)
    game.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
