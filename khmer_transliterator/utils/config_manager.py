# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

ENV_CONFIG = "KHMER_TRANSLITERATOR_CONFIG"

DEFAULTS = {
    "max_suggestions": 3,
    "fuzzy_max_distance": 1,
    "dataset_path": "",
    "log_level": "WARNING",
    "preview_limit": 5,
}


class ConfigError(KeyError):
    """Unknown option or a value that does not fit the option's type."""

    def __str__(self):
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class Config:
    """
    Defaults overlaid with an optional JSON file.
    Without a path the config lives in memory only.
    """

    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        if self.path:
            self._load()

    @classmethod
    def from_env(cls, path=None):
        """Use `path`, else $KHMER_TRANSLITERATOR_CONFIG, else defaults."""
        return cls(path or os.environ.get(ENV_CONFIG) or None)

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        for k, v in loaded.items():
            if k not in self.data:
                logger.warning("ignoring unknown config option %r", k)
                continue
            try:
                self.data[k] = self._coerce(k, v)
            except ConfigError as e:
                logger.warning("%s", e)

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def as_dict(self):
        return dict(self.data)

    def set(self, key, val, persist=True):
        if key not in self.data:
            raise ConfigError(f"no such option: {key}")
        self.data[key] = self._coerce(key, val)
        if persist:
            self.save()

    def _coerce(self, key, val):
        kind = type(DEFAULTS[key])
        try:
            return kind(val)
        except (TypeError, ValueError):
            raise ConfigError(f"bad value for {key}: {val!r}") from None
