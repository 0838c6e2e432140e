"""Paddle and ball entities plus the box overlap test."""

from __future__ import annotations

from dataclasses import dataclass
import random

from .utils import (
    AI_COLOR,
    BALL_COLOR,
    BALL_RADIUS_RATIO,
    BALL_SPEED_RATIO,
    INITIAL_BALL_SPEED,
    INITIAL_BALL_VELOCITY,
    PADDLE_HEIGHT_RATIO,
    PADDLE_MARGIN,
    PADDLE_WIDTH_RATIO,
    PLAYER_COLOR,
    SERVE_FACTOR,
    Color,
)


@dataclass(slots=True)
class Paddle:
    """Rectangular paddle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float
    color: Color
    score: int = 0

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def follow_pointer(self, pointer_y: float) -> None:
        """Center the paddle on a pointer coordinate, without clamping."""
        self.y = pointer_y - self.height / 2


@dataclass(slots=True)
class Ball:
    """Circular ball anchored at its center."""

    x: float
    y: float
    radius: float
    speed: float
    velocity_x: float
    velocity_y: float
    color: Color = BALL_COLOR

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    @property
    def left(self) -> float:
        return self.x - self.radius

    @property
    def right(self) -> float:
        return self.x + self.radius


def collides(ball: Ball, paddle: Paddle) -> bool:
    """Return whether the ball's bounding box overlaps the paddle."""
    return (
        ball.right > paddle.left
        and ball.bottom > paddle.top
        and ball.left < paddle.right
        and ball.top < paddle.bottom
    )


def create_entities(width: float, height: float) -> tuple[Paddle, Paddle, Ball]:
    """Build player paddle, AI paddle and ball sized for a surface."""
    paddle_width = width * PADDLE_WIDTH_RATIO
    paddle_height = height * PADDLE_HEIGHT_RATIO
    paddle_y = height / 2 - paddle_height / 2

    player = Paddle(PADDLE_MARGIN, paddle_y, paddle_width, paddle_height, PLAYER_COLOR)
    ai = Paddle(width - paddle_width - PADDLE_MARGIN, paddle_y, paddle_width, paddle_height, AI_COLOR)
    ball = Ball(
        x=width / 2,
        y=height / 2,
        radius=height * BALL_RADIUS_RATIO,
        speed=INITIAL_BALL_SPEED,
        velocity_x=INITIAL_BALL_VELOCITY[0],
        velocity_y=INITIAL_BALL_VELOCITY[1],
    )
    return player, ai, ball


def reset_ball(ball: Ball, width: float, height: float, rng: random.Random | None = None) -> None:
    """Serve the ball from the center at the base speed in a random diagonal."""
    rng = rng or random
    ball.x = width / 2
    ball.y = height / 2
    ball.speed = width * BALL_SPEED_RATIO
    ball.velocity_x = (1 if rng.random() > 0.5 else -1) * ball.speed * SERVE_FACTOR
    ball.velocity_y = (1 if rng.random() > 0.5 else -1) * ball.speed * SERVE_FACTOR
