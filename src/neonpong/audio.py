"""Audio loading, tone synthesis and playback wrappers."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol
import logging

import numpy as np
import pygame
import pygame.sndarray

logger = logging.getLogger(__name__)

TONES = {
    "hit": 261.63,  # C4
    "score": 783.99,  # G5
}
NOTE_SECONDS = 0.25  # eighth note at 120 bpm


class SoundPlayer(Protocol):
    """Fire-and-forget audio cues the game loop triggers."""

    def play_hit(self) -> None: ...

    def play_score(self) -> None: ...


def synth_tone(frequency: float, seconds: float, sample_rate: int, channels: int) -> np.ndarray:
    """Render a short enveloped sine wave as int16 samples."""
    count = max(1, int(sample_rate * seconds))
    t = np.arange(count) / sample_rate
    envelope = np.minimum(1.0, t / 0.005) * np.exp(-4.0 * t / seconds)
    wave = (np.sin(2 * np.pi * frequency * t) * envelope * 0.5 * 32767).astype(np.int16)
    if channels > 1:
        wave = np.ascontiguousarray(np.repeat(wave[:, None], channels, axis=1))
    return wave


class AudioManager:
    """Plays hit/score cues with graceful fallback when no mixer is available."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.sound_enabled = False
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            self.sound_enabled = True
        except pygame.error as exc:
            logger.warning("Audio disabled: %s", exc)
            self.sound_enabled = False

    def load_assets(self) -> None:
        """Load sound overrides from the assets folder, synthesizing the rest."""
        if not self.sound_enabled:
            return
        sample_rate, _, channels = pygame.mixer.get_init()
        for key, frequency in TONES.items():
            path = self.root / "assets" / "sounds" / f"{key}.wav"
            if path.exists():
                try:
                    self.sounds[key] = pygame.mixer.Sound(str(path))
                    logger.debug("Loaded %s", path)
                    continue
                except pygame.error:
                    logger.debug("Could not load %s, synthesizing", path)
            try:
                samples = synth_tone(frequency, NOTE_SECONDS, sample_rate, channels)
                self.sounds[key] = pygame.sndarray.make_sound(samples)
            except pygame.error as exc:
                logger.warning("Could not synthesize %s tone: %s", key, exc)

    def set_volumes(self, master: float, sfx: float) -> None:
        """Apply current volume settings."""
        if not self.sound_enabled:
            return
        for sound in self.sounds.values():
            sound.set_volume(master * sfx)

    def play(self, key: str) -> None:
        """Play a named sound effect."""
        if not self.sound_enabled:
            return
        sound = self.sounds.get(key)
        if sound:
            sound.play()

    def play_hit(self) -> None:
        self.play("hit")

    def play_score(self) -> None:
        self.play("score")
