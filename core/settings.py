import json
import logging
import os
import sys

log = logging.getLogger(__name__)

APP_NAME = "tictactoe"

SETTINGS_FILE = "settings.json"

DEFAULT_SETTINGS = {
    "results_file": "game_results.txt",
    "frame_interval_ms": 16,  # ~60 FPS
    "window_opacity": 1.0,
    "log_level": "INFO",
    "overlay_mode": False,
}


class SettingsManager:
    _instance = None

    def __new__(cls, file_path=None):
        if cls._instance is None:
            cls._instance = super(SettingsManager, cls).__new__(cls)
            cls._instance.data = DEFAULT_SETTINGS.copy()
            cls._instance.file_path = file_path or cls._instance._get_settings_path()
            cls._instance.load()
        return cls._instance

    def _get_settings_path(self):
        """Определяет системную папку для хранения настроек"""
        try:
            if sys.platform == "win32":
                base_path = os.getenv('APPDATA')
            elif sys.platform == "darwin":
                base_path = os.path.expanduser("~/Library/Application Support")
            else:
                base_path = os.path.expanduser("~/.config")

            app_dir = os.path.join(base_path, APP_NAME)
            os.makedirs(app_dir, exist_ok=True)
            return os.path.join(app_dir, SETTINGS_FILE)

        except (OSError, TypeError) as e:
            # Нет прав или APPDATA не задана - храним рядом с программой
            log.warning("Could not resolve settings directory: %s", e)
            return SETTINGS_FILE

    def load(self):
        if not os.path.exists(self.file_path):
            return
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
            # Ключи по умолчанию остаются, если их нет в файле
            for k, v in loaded.items():
                self.data[k] = v
        except (OSError, ValueError) as e:
            log.warning("Could not read settings from %s, using defaults: %s", self.file_path, e)

    def save(self):
        try:
            with open(self.file_path, "w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
        except OSError as e:
            log.error("Could not save settings to %s: %s", self.file_path, e)

    def get(self, key):
        return self.data.get(key, DEFAULT_SETTINGS.get(key))

    def set(self, key, value):
        self.data[key] = value
        self.save()
