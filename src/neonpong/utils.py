"""Shared constants and utility helpers for Neon Pong."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Tuple
import json

DEFAULT_WIDTH = 960
DEFAULT_HEIGHT = 600
MIN_WIDTH = 320
MIN_HEIGHT = 200
FPS = 60

PADDLE_WIDTH_RATIO = 0.02
PADDLE_HEIGHT_RATIO = 0.2
BALL_RADIUS_RATIO = 0.0125
PADDLE_MARGIN = 10
WINNING_SCORE = 5

INITIAL_BALL_SPEED = 7.0
INITIAL_BALL_VELOCITY = (5.0, 5.0)
BALL_SPEED_RATIO = 0.009
SERVE_FACTOR = 0.7
SPEED_INCREMENT = 0.2
TRACKING_GAIN = 0.1

PARTICLE_BURST = 15
PARTICLE_FADE = 0.05
SHAKE_FRAMES = 12  # ~0.2s at 60 FPS
SHAKE_MAGNITUDE = 6

Color = Tuple[int, int, int]
Point = Tuple[float, float]

BG_COLOR = (5, 8, 18)
TEXT_COLOR = (255, 255, 255)
SHADOW_COLOR = (15, 24, 45)
NEUTRAL_COLOR = (120, 140, 170)
PLAYER_COLOR = (30, 242, 255)
AI_COLOR = (255, 48, 210)
BALL_COLOR = (255, 233, 68)
BUTTON_COLOR = (22, 39, 70)

DATA_DIR = Path(".neonpong")
SETTINGS_FILE = DATA_DIR / "settings.json"


def ensure_data_dirs() -> None:
    """Create the data directory for the settings file."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp a value into a closed interval."""
    return max(minimum, min(maximum, value))


def load_json(path: Path, default: Any) -> Any:
    """Load JSON data, returning default when missing or malformed."""
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (json.JSONDecodeError, OSError):
        return default


def save_json(path: Path, payload: Any) -> None:
    """Save JSON data with deterministic formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
