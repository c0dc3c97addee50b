"""Application-wide settings."""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields

ENV_PREFIX = "CHESSLITE_"

THEMES = ("Classic", "Blue", "Green")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Animation
    animate_moves: bool = True
    piece_speed: float = 1.0  # squares per second
    snap_distance: float = 0.1  # squares
    frame_interval_ms: int = 16

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.board_theme not in THEMES:
            raise ValueError(f"Unknown board theme: {self.board_theme!r}")
        if not math.isfinite(self.piece_speed) or self.piece_speed <= 0:
            raise ValueError(
                f"piece_speed must be positive and finite: {self.piece_speed!r}"
            )
        if not math.isfinite(self.snap_distance) or self.snap_distance < 0:
            raise ValueError(
                f"snap_distance must be finite and not negative: {self.snap_distance!r}"
            )
        if self.frame_interval_ms < 1:
            raise ValueError(
                f"frame_interval_ms must be at least 1: {self.frame_interval_ms!r}"
            )
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Build settings from ``CHESSLITE_*`` variables, e.g.
        ``CHESSLITE_PIECE_SPEED=2.5``. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            values[f.name] = _convert(f.name, f.default, raw)
        return cls(**values)  # type: ignore[arg-type]


def _convert(name: str, default: object, raw: str) -> object:
    try:
        if isinstance(default, bool):
            lowered = raw.strip().lower()
            if lowered in ("1", "true", "yes", "on"):
                return True
            if lowered in ("0", "false", "no", "off"):
                return False
            raise ValueError(raw)
        if isinstance(default, int):
            return int(raw)
        if isinstance(default, float):
            value = float(raw)
            if not math.isfinite(value):
                raise ValueError(raw)
            return value
    except ValueError:
        raise ValueError(f"Invalid value for {ENV_PREFIX}{name.upper()}: {raw!r}") from None
    return raw
