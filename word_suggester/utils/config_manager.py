# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_suggestions": 10,  # K for both prefix and correction results
    "max_distance": 2,  # correction threshold
    "max_word_length": 99,
    "max_words": 1000,  # upper bound for the interactive "how many words" prompt
    "log_level": "WARNING",
}

# smallest accepted value for the numeric options
MINIMUMS = {
    "max_suggestions": 1,
    "max_distance": 0,
    "max_word_length": 1,
    "max_words": 1,
}


class Config:
    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        if path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        for k, v in loaded.items():
            if k in self.data:
                try:
                    self.set(k, v, save=False)
                except (TypeError, ValueError):
                    logger.warning("bad value for %r: %r", k, v)
            else:
                logger.warning("unknown config option %r", k)

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def set(self, key, val, save=True):
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        val = type(DEFAULTS[key])(val)
        if key in MINIMUMS and val < MINIMUMS[key]:
            raise ValueError(f"{key} must be at least {MINIMUMS[key]}, got {val}")
        self.data[key] = val
        if save:
            self.save()

    def __getitem__(self, key):
        return self.data[key]
