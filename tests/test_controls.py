from __future__ import annotations

from neonpong.controls import NEW_GAME_LABEL, START_LABEL, ControlPanel, win_counter_text
from neonpong.state import SessionWins


def test_initial_layout_shows_only_start() -> None:
    panel = ControlPanel()
    assert panel.start.visible
    assert panel.start.label == START_LABEL
    assert not panel.reset.visible


def test_visibility_follows_game_flow() -> None:
    panel = ControlPanel()
    panel.on_start()
    assert not panel.start.visible and not panel.reset.visible

    panel.on_game_over()
    assert panel.start.visible and panel.reset.visible
    assert panel.start.label == NEW_GAME_LABEL

    panel.on_reset()
    assert panel.start.visible
    assert panel.start.label == START_LABEL
    assert not panel.reset.visible


def test_clicks_only_reach_visible_buttons() -> None:
    panel = ControlPanel()
    panel.on_game_over()
    panel.layout(800, 600)
    assert panel.action_at(panel.start.rect.center) == "start"
    assert panel.action_at(panel.reset.rect.center) == "reset"

    panel.on_start()
    assert panel.action_at(panel.start.rect.center) is None
    assert panel.action_at((0, 0)) is None


def test_win_counter_text() -> None:
    assert win_counter_text(SessionWins(player=3, ai=1)) == "Player: 3 - Computer: 1"
