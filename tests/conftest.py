"""Pytest configuration for headless pygame tests."""

from __future__ import annotations

import os
import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from neonpong.state import Phase, SimulationState  # noqa: E402


@pytest.fixture
def state() -> SimulationState:
    """An 800x600 state already in play with a still ball at center."""
    sim = SimulationState.create(800, 600, rng=random.Random(7))
    sim.phase = Phase.PLAYING
    sim.ball.velocity_x = 0.0
    sim.ball.velocity_y = 0.0
    return sim


@pytest.fixture
def data_dir(monkeypatch, tmp_path):
    """Redirect settings persistence into a temp directory."""
    from neonpong import utils

    monkeypatch.setattr(utils, "DATA_DIR", tmp_path)
    monkeypatch.setattr(utils, "SETTINGS_FILE", tmp_path / "settings.json")
    return tmp_path
