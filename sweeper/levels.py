# sweeper/levels.py

import os
from dataclasses import dataclass
from enum import Enum

import yaml

from .errors import ConfigurationError
from .grid import validate_dimensions

DEFAULT_LEVELS_PATH = os.path.join(os.path.dirname(__file__), "levels.yaml")


class Level(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    BEAST = "beast"

    @classmethod
    def parse(cls, value) -> "Level":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(level.value for level in cls)
            raise ConfigurationError(f"Unknown level {value!r}; expected one of: {names}") from None


@dataclass(frozen=True)
class LevelConfig:
    size: int
    mines: int


def load_levels(path: str = DEFAULT_LEVELS_PATH) -> dict:
    """
    Load the difficulty table from YAML.

    Returns a {Level: LevelConfig} mapping. Every level must be present and
    every entry must describe a board with at least one safe cell.
    """
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ConfigurationError(f"{path}: expected a mapping of level names")

    levels = {}
    for name, entry in raw.items():
        level = Level.parse(name)
        if not isinstance(entry, dict) or "size" not in entry or "mines" not in entry:
            raise ConfigurationError(f"{path}: level {name!r} needs 'size' and 'mines'")
        config = LevelConfig(size=entry["size"], mines=entry["mines"])
        validate_dimensions(config.size, config.mines)
        levels[level] = config

    missing = [level.value for level in Level if level not in levels]
    if missing:
        raise ConfigurationError(f"{path}: missing levels {', '.join(missing)}")
    return levels
