import logging
import os

log = logging.getLogger(__name__)

RESULTS_FILE = "game_results.txt"


class ResultWriteError(Exception):
    pass


class ResultLog:
    def __init__(self, path=RESULTS_FILE):
        self.path = path

    def append(self, text):
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(text + "\n")
        except OSError as e:
            raise ResultWriteError(f"Error writing to file: {e}") from e
        log.debug("Записан результат в %s: %s", self.path, text)

    def read_results(self):
        if not os.path.exists(self.path):
            return []
        try:
            # Битые байты не должны мешать запуску игры
            with open(self.path, "r", encoding="utf-8", errors="replace") as f:
                return [line.rstrip("\n") for line in f if line.strip()]
        except OSError as e:
            log.warning("Could not read results from %s: %s", self.path, e)
            return []
