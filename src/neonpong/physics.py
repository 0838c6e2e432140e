"""Per-tick ball physics, scoring and win detection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import math

from .ai import TrackingAI
from .entities import Ball, Paddle, collides, reset_ball
from .state import Phase, Side, SimulationState, check_winner
from .utils import SPEED_INCREMENT, Color, Point


class EventKind(Enum):
    """Feedback signals raised by a physics step."""

    HIT = auto()
    SCORE = auto()
    SHAKE = auto()
    GAME_OVER = auto()


@dataclass(slots=True, frozen=True)
class SimEvent:
    """Something the host should react to (sound, sparks, shake, UI)."""

    kind: EventKind
    position: Point | None = None
    color: Color | None = None
    side: Side | None = None


def deflection(ball: Ball, paddle: Paddle) -> float:
    """Map the contact offset from paddle center onto [-1, 1]."""
    half_height = paddle.height / 2
    if half_height <= 0:
        return 0.0
    return (ball.y - paddle.center_y) / half_height


def bounce_off_paddle(ball: Ball, paddle: Paddle) -> None:
    """Reflect the ball, speed it up, and aim it by where it struck the paddle."""
    ball.velocity_x = -ball.velocity_x
    ball.speed += SPEED_INCREMENT
    ball.velocity_x = (1 if ball.velocity_x > 0 else -1) * ball.speed
    angle = (math.pi / 4) * deflection(ball, paddle)
    ball.velocity_y = ball.speed * math.sin(angle)


def step(state: SimulationState, ai: TrackingAI) -> list[SimEvent]:
    """Advance one tick; does nothing unless the phase is PLAYING."""
    if state.phase is not Phase.PLAYING:
        return []

    events: list[SimEvent] = []
    ball = state.ball

    ball.x += ball.velocity_x
    ball.y += ball.velocity_y

    ai.update(state.ai, ball)

    if ball.bottom > state.height or ball.top < 0:
        ball.velocity_y = -ball.velocity_y
        events.append(SimEvent(EventKind.HIT))

    scorer: Side | None = None
    if ball.left < 0:
        scorer = Side.AI
    elif ball.right > state.width:
        scorer = Side.PLAYER
    if scorer is not None:
        state.paddle_for(scorer).score += 1
        events.append(SimEvent(EventKind.SCORE, side=scorer))
        events.append(SimEvent(EventKind.SHAKE))
        reset_ball(ball, state.width, state.height, state.rng)

    paddle = state.player if ball.x < state.width / 2 else state.ai
    if collides(ball, paddle):
        events.append(SimEvent(EventKind.HIT, position=(ball.x, ball.y), color=paddle.color))
        bounce_off_paddle(ball, paddle)

    winner = check_winner(state)
    if winner is not None:
        events.append(SimEvent(EventKind.GAME_OVER, side=winner))
    return events
