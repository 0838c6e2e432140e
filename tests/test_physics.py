from __future__ import annotations

import math

import pytest

from neonpong.ai import TrackingAI
from neonpong.entities import Ball, Paddle
from neonpong.physics import EventKind, bounce_off_paddle, deflection, step
from neonpong.state import Phase, Side, SimulationState


def _kinds(events) -> list[EventKind]:
    return [event.kind for event in events]


@pytest.mark.parametrize("phase", [Phase.READY, Phase.GAME_OVER])
def test_step_is_noop_outside_play(state: SimulationState, phase: Phase) -> None:
    state.phase = phase
    state.ball.velocity_x = 5
    state.ball.velocity_y = 5
    state.ai.y = 0
    before = (state.ball.x, state.ball.y, state.player.y, state.ai.y)

    assert step(state, TrackingAI()) == []
    assert (state.ball.x, state.ball.y, state.player.y, state.ai.y) == before


def test_player_paddle_hit_deflects_by_contact_offset(state: SimulationState) -> None:
    ball = state.ball
    ball.x, ball.y = 30, 330
    ball.velocity_x, ball.velocity_y = -4, 0
    ball.speed = 7.8

    events = step(state, TrackingAI())

    assert ball.speed == pytest.approx(8.0)
    assert ball.velocity_x == pytest.approx(8.0)
    assert ball.velocity_y == pytest.approx(8 * math.sin(math.pi / 8))
    assert ball.velocity_y == pytest.approx(3.06, abs=0.01)
    hits = [event for event in events if event.kind is EventKind.HIT]
    assert len(hits) == 1
    assert hits[0].position == (26, 330)
    assert hits[0].color == state.player.color


def test_ai_paddle_hit_sends_ball_back_left(state: SimulationState) -> None:
    ball = state.ball
    ball.x, ball.y = 770, 300
    ball.velocity_x, ball.velocity_y = 4, 0
    ball.speed = 5.0

    step(state, TrackingAI())

    assert ball.speed == pytest.approx(5.2)
    assert ball.velocity_x == pytest.approx(-5.2)
    assert ball.velocity_y == pytest.approx(0.0, abs=1e-9)


def test_speed_grows_by_fixed_increment_per_hit() -> None:
    paddle = Paddle(x=10, y=240, width=16, height=120, color=(0, 0, 0))
    ball = Ball(x=20, y=300, radius=7.5, speed=6, velocity_x=-6, velocity_y=0)
    speeds = []
    for _ in range(5):
        bounce_off_paddle(ball, paddle)
        speeds.append(ball.speed)
    assert speeds == pytest.approx([6.2, 6.4, 6.6, 6.8, 7.0])


def test_deflection_is_odd_symmetric() -> None:
    paddle = Paddle(x=10, y=240, width=16, height=120, color=(0, 0, 0))
    top = Ball(x=20, y=paddle.top, radius=7.5, speed=6, velocity_x=-6, velocity_y=0)
    bottom = Ball(x=20, y=paddle.bottom, radius=7.5, speed=6, velocity_x=-6, velocity_y=0)
    center = Ball(x=20, y=paddle.center_y, radius=7.5, speed=6, velocity_x=-6, velocity_y=0)

    assert deflection(top, paddle) == pytest.approx(-1.0)
    assert deflection(bottom, paddle) == pytest.approx(1.0)

    for ball in (top, bottom, center):
        bounce_off_paddle(ball, paddle)
    assert top.velocity_y == pytest.approx(-bottom.velocity_y)
    assert bottom.velocity_y == pytest.approx(6.2 * math.sin(math.pi / 4))
    assert center.velocity_y == pytest.approx(0.0, abs=1e-9)


def test_zero_height_paddle_does_not_divide_by_zero() -> None:
    paddle = Paddle(x=10, y=300, width=16, height=0, color=(0, 0, 0))
    ball = Ball(x=20, y=310, radius=7.5, speed=6, velocity_x=-6, velocity_y=1)
    assert deflection(ball, paddle) == 0.0
    bounce_off_paddle(ball, paddle)
    assert ball.velocity_y == 0.0


def test_wall_bounce_inverts_vertical_velocity(state: SimulationState) -> None:
    state.ball.y = 5
    state.ball.velocity_y = -4

    events = step(state, TrackingAI())

    assert state.ball.velocity_y == 4
    assert _kinds(events) == [EventKind.HIT]
    assert events[0].position is None


def test_ball_past_left_edge_scores_for_ai(state: SimulationState) -> None:
    ball = state.ball
    ball.x, ball.y = 5, 300
    ball.velocity_x = -4

    events = step(state, TrackingAI())

    assert state.ai.score == 1
    assert state.player.score == 0
    assert _kinds(events) == [EventKind.SCORE, EventKind.SHAKE]
    assert events[0].side is Side.AI
    assert (ball.x, ball.y) == (400, 300)
    assert ball.speed == pytest.approx(7.2)
    assert abs(ball.velocity_x) == pytest.approx(0.7 * 7.2)
    assert abs(ball.velocity_y) == pytest.approx(0.7 * 7.2)


def test_ball_past_right_edge_scores_for_player(state: SimulationState) -> None:
    state.ball.x = 795
    state.ball.velocity_x = 4

    events = step(state, TrackingAI())

    assert state.player.score == 1
    assert state.ai.score == 0
    assert events[0].side is Side.PLAYER
    assert state.phase is Phase.PLAYING


def test_win_fires_when_score_first_reaches_five(state: SimulationState) -> None:
    state.player.score = 3
    state.ai.score = 3
    state.ball.x = 795
    state.ball.velocity_x = 4
    step(state, TrackingAI())
    assert state.player.score == 4
    assert state.phase is Phase.PLAYING

    state.ball.x = 795
    state.ball.velocity_x = 4
    state.ball.velocity_y = 0
    events = step(state, TrackingAI())

    assert state.player.score == 5
    assert state.phase is Phase.GAME_OVER
    assert state.winner is Side.PLAYER
    assert (state.wins.player, state.wins.ai) == (1, 0)
    assert events[-1].kind is EventKind.GAME_OVER
    assert events[-1].side is Side.PLAYER

    assert step(state, TrackingAI()) == []
    assert (state.wins.player, state.wins.ai) == (1, 0)


def test_ai_win_credits_computer(state: SimulationState) -> None:
    state.ai.score = 4
    state.ball.x = 5
    state.ball.velocity_x = -4

    step(state, TrackingAI())

    assert state.phase is Phase.GAME_OVER
    assert state.winner is Side.AI
    assert (state.wins.player, state.wins.ai) == (0, 1)
