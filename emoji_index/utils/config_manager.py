# config_manager.py - JSON config manager

import json
import os

from emoji_index.utils.logger_utils import Log

DEFAULTS = {
    "default_language": "english",
    "trigger_char": ":",
    "show_keywords": True,
    "max_suggestions": 10,
    "data_dir": "data",
}

_TRUE = ("true", "t", "yes", "y", "1", "on")


def _coerce(default, val):
    """Convert `val` to the type of `default` (strings from the CLI mostly)."""
    if isinstance(default, bool):
        if isinstance(val, str):
            return val.strip().lower() in _TRUE
        return bool(val)
    return type(default)(val)


class Config:
    def __init__(self, path="config.json", autosave=True):
        self.path = path
        self.autosave = autosave
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            if self.autosave:
                self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            Log.warning(f"[Config] ignoring unreadable {self.path}: {e}")
            return
        if not isinstance(loaded, dict):
            Log.warning(f"[Config] ignoring {self.path}: not an object")
            return
        for k, v in loaded.items():
            if k in DEFAULTS:
                try:
                    self.data[k] = _coerce(DEFAULTS[k], v)
                except (TypeError, ValueError):
                    Log.warning(f"[Config] bad value for {k}: {v!r}, keeping default")

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2, ensure_ascii=False)

    def get(self, key):
        return self.data[key]

    def show(self):
        for k, v in self.data.items():
            print(f"{k:17} = {v}")

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        self.data[key] = _coerce(DEFAULTS[key], val)
        if self.autosave:
            self.save()
