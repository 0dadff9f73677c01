"""Configuration loading for the roster engine (JSON or YAML)."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass
class RosterConfig:
    """Labor limits and run settings for roster generation."""

    max_consecutive_days: int = 6
    min_days_off: int = 8
    rolling_window_days: int = 28
    fairness_window_days: int = 7
    max_log_entries: int = 1000
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("max_consecutive_days", "rolling_window_days", "fairness_window_days"):
            if int(getattr(self, name)) < 1:
                raise ValueError(f"{name} must be >= 1, got {getattr(self, name)}")
        if self.min_days_off < 0 or self.min_days_off > self.rolling_window_days:
            raise ValueError(
                f"min_days_off must be between 0 and rolling_window_days ({self.rolling_window_days}), "
                f"got {self.min_days_off}"
            )
        if self.max_log_entries < 0:
            raise ValueError(f"max_log_entries cannot be negative, got {self.max_log_entries}")

    @property
    def max_worked_in_window(self) -> int:
        return self.rolling_window_days - self.min_days_off

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RosterConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)


def load_config(path: str | Path | None = None) -> RosterConfig:
    """
    Load a RosterConfig from a YAML or JSON file.

    Args:
        path: Path to a ``.yaml``/``.yml`` or ``.json`` file. ``None`` returns defaults.

    Returns:
        RosterConfig with file values applied over the defaults

    Raises:
        ValueError: If the file type is unsupported or contains invalid settings
    """
    if path is None:
        return RosterConfig()

    path = Path(path)
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
    elif suffix == ".json":
        data = json.loads(text) if text.strip() else {}
    else:
        raise ValueError(f"Unsupported config file type: {path.suffix}")

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

    # Allow settings nested under a top-level "roster" section
    if set(data) == {"roster"} and isinstance(data["roster"], dict):
        data = data["roster"]

    return RosterConfig.from_dict(data)
