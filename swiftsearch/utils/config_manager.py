# config_manager.py - JSON config manager

import json
import os

DEFAULTS = {
    "limit": 8,  # suggestions per query
    "words_file": None,  # one word per line, None = built-in dictionary
    "log_path": None,
    "log_level": "INFO",
    "metrics_path": None,
}


class Config:
    """
    Settings for the search box. path=None keeps everything in memory,
    otherwise the file is read on start and rewritten on every set().
    """

    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        if self.path:
            self._load()

    def _load(self):
        if os.path.exists(self.path):
            with open(self.path, "r", encoding="utf8") as f:
                try:
                    loaded = json.load(f)
                except json.JSONDecodeError as e:
                    raise ValueError(f"{self.path} is not valid JSON: {e}") from e
            if not isinstance(loaded, dict):
                raise ValueError(f"{self.path} must hold a JSON object")
            for k, v in loaded.items():
                self.set(k, v, persist=False)
        else:
            self.save()

    def save(self):
        if not self.path:
            return
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def items(self):
        return self.data.items()

    def set(self, key, val, persist=True):
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        self.data[key] = self._coerce(key, val)
        if persist:
            self.save()

    @staticmethod
    def _coerce(key, val):
        current = DEFAULTS[key]
        if val is None or (isinstance(val, str) and val.lower() in ("none", "null")):
            if current is not None:
                raise ValueError(f"{key} cannot be empty")
            return None
        if current is None:
            return str(val)
        try:
            out = type(current)(val)
        except (TypeError, ValueError) as e:
            raise ValueError(f"bad value for {key}: {val!r}") from e
        if key == "limit" and out < 1:
            raise ValueError("limit must be at least 1")
        if key == "log_level" and out.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"unknown log level: {val}")
        return out
