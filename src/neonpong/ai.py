"""Computer opponent that chases the ball vertically."""

from __future__ import annotations

from .entities import Ball, Paddle
from .utils import TRACKING_GAIN


class TrackingAI:
    """Proportional tracker: moves a fixed fraction of the gap each tick.

    Lag grows with distance.
    """

    def __init__(self, gain: float = TRACKING_GAIN) -> None:
        self.gain = gain

    def update(self, paddle: Paddle, ball: Ball) -> None:
        """Move the paddle toward the ball's vertical position."""
        paddle.y += (ball.y - paddle.center_y) * self.gain
