"""
Configuration for field behavior.

Settings can come from a JSON file, a dict or the environment:

    {"strict_move": true}

TERMFIELDS_STRICT_MOVE=1 enables strict moves from the environment.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_STRICT_MOVE = "TERMFIELDS_STRICT_MOVE"
_TRUTHY = {"1", "true", "yes", "on"}


def parse_flag(value) -> bool:
    """
    Interpret a setting as a boolean.

    Strings count as true only when they read 1/true/yes/on, matching the
    environment variables. Anything other than a bool or str is rejected.

    Raises:
        ValueError: If value is neither a bool nor a str
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    raise ValueError(f"Expected a boolean, got {value!r}")


@dataclass
class FieldConfig:
    """Settings shared by every field of a FieldManager."""
    # Raise from Field.move() instead of ignoring driver errors
    strict_move: bool = False

    def to_dict(self) -> dict:
        return {"strict_move": self.strict_move}

    @classmethod
    def from_dict(cls, data: dict) -> "FieldConfig":
        return cls(strict_move=parse_flag(data.get("strict_move", False)))

    @classmethod
    def load(cls, path: Path) -> "FieldConfig":
        """Load settings from a JSON file, falling back to defaults."""
        path = Path(path)
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load %s: %s", path, e)
            return cls()

        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", path)
            return cls()

        try:
            return cls.from_dict(data)
        except ValueError as e:
            logger.warning("Ignoring %s: %s", path, e)
            return cls()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FieldConfig":
        if environ is None:
            environ = os.environ
        value = environ.get(ENV_STRICT_MOVE, "")
        return cls(strict_move=parse_flag(value))

    def save(self, path: Path):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
