"""Settings persistence and runtime configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Callable

from . import utils
from .utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, MIN_HEIGHT, MIN_WIDTH, clamp, ensure_data_dirs, load_json, save_json


@dataclass(slots=True)
class DisplaySettings:
    """Display-related options."""

    fullscreen: bool = False
    screen_shake: bool = True
    glow: bool = True
    show_net: bool = True


@dataclass(slots=True)
class GameSettings:
    """Persistent settings for the game."""

    master_volume: float = 0.8
    sfx_volume: float = 0.8
    window_width: int = DEFAULT_WIDTH
    window_height: int = DEFAULT_HEIGHT
    display: DisplaySettings = field(default_factory=DisplaySettings)


def _read(payload: dict[str, Any], key: str, kind: Callable[[Any], Any], default: Any) -> Any:
    """Convert one stored value, keeping the default when it is missing or mistyped."""
    if key not in payload:
        return default
    try:
        return kind(payload[key])
    except (TypeError, ValueError, OverflowError):
        return default


class SettingsManager:
    """Load, save, and mutate game settings."""

    def __init__(self) -> None:
        ensure_data_dirs()
        self.settings = self.load()

    def load(self) -> GameSettings:
        """Load game settings from disk with safe defaults."""
        raw = load_json(utils.SETTINGS_FILE, {})
        if not isinstance(raw, dict):
            raw = {}
        settings = GameSettings()

        settings.master_volume = clamp(_read(raw, "master_volume", float, settings.master_volume), 0.0, 1.0)
        settings.sfx_volume = clamp(_read(raw, "sfx_volume", float, settings.sfx_volume), 0.0, 1.0)
        settings.window_width = max(MIN_WIDTH, _read(raw, "window_width", int, settings.window_width))
        settings.window_height = max(MIN_HEIGHT, _read(raw, "window_height", int, settings.window_height))

        display = raw.get("display")
        if not isinstance(display, dict):
            display = {}
        for name in ("fullscreen", "screen_shake", "glow", "show_net"):
            setattr(settings.display, name, _read(display, name, bool, getattr(settings.display, name)))
        return settings

    def save(self) -> None:
        """Persist settings to disk."""
        save_json(utils.SETTINGS_FILE, asdict(self.settings))

    def remember_window(self, width: int, height: int) -> None:
        """Track the last windowed size; written on the next save()."""
        self.settings.window_width = max(MIN_WIDTH, int(width))
        self.settings.window_height = max(MIN_HEIGHT, int(height))

    def adjust_volume(self, field_name: str, delta: float) -> None:
        """Adjust a volume setting and save."""
        value = float(getattr(self.settings, field_name))
        setattr(self.settings, field_name, clamp(value + delta, 0.0, 1.0))
        self.save()

    def toggle_screen_shake(self) -> bool:
        """Flip the screen shake option and save."""
        self.settings.display.screen_shake = not self.settings.display.screen_shake
        self.save()
        return self.settings.display.screen_shake
