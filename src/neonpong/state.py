"""Simulation state and the ready / playing / game-over state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
import logging
import random

from .entities import Ball, Paddle, create_entities, reset_ball
from .utils import WINNING_SCORE

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Top-level game mode; only PLAYING runs physics."""

    READY = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class Side(str, Enum):
    """The two competitors, valued by their display names."""

    PLAYER = "Player"
    AI = "Computer"


@dataclass(slots=True)
class SessionWins:
    """Games won by each side since launch or the last reset."""

    player: int = 0
    ai: int = 0

    def record(self, side: Side) -> None:
        if side is Side.PLAYER:
            self.player += 1
        else:
            self.ai += 1


@dataclass(slots=True)
class SimulationState:
    """Everything the physics step reads and mutates, owned by the loop driver."""

    width: float
    height: float
    player: Paddle
    ai: Paddle
    ball: Ball
    phase: Phase = Phase.READY
    wins: SessionWins = field(default_factory=SessionWins)
    winner: Side | None = None
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def create(cls, width: float, height: float, rng: random.Random | None = None) -> "SimulationState":
        """Build a fresh READY state for a surface size."""
        _validate_size(width, height)
        player, ai, ball = create_entities(width, height)
        state = cls(width=width, height=height, player=player, ai=ai, ball=ball)
        if rng is not None:
            state.rng = rng
        return state

    def paddle_for(self, side: Side) -> Paddle:
        return self.player if side is Side.PLAYER else self.ai


def _validate_size(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"surface size must be positive, got {width}x{height}")


def new_game(state: SimulationState) -> None:
    """Zero both scores and serve a fresh ball."""
    state.player.score = 0
    state.ai.score = 0
    state.winner = None
    reset_ball(state.ball, state.width, state.height, state.rng)


def start_game(state: SimulationState) -> bool:
    """Begin a game from READY or GAME_OVER; ignored while already playing."""
    if state.phase is Phase.PLAYING:
        return False
    new_game(state)
    state.phase = Phase.PLAYING
    logger.info("Game started")
    return True


def reset_session(state: SimulationState) -> bool:
    """Clear session wins and return to READY; ignored while a game is running."""
    if state.phase is Phase.PLAYING:
        return False
    state.wins = SessionWins()
    new_game(state)
    state.phase = Phase.READY
    logger.info("Session reset")
    return True


def check_winner(state: SimulationState) -> Side | None:
    """End the game when a side reaches the winning score and credit the win."""
    if state.phase is not Phase.PLAYING:
        return None
    if state.player.score >= WINNING_SCORE:
        winner = Side.PLAYER
    elif state.ai.score >= WINNING_SCORE:
        winner = Side.AI
    else:
        return None

    state.phase = Phase.GAME_OVER
    state.winner = winner
    state.wins.record(winner)
    logger.info(
        "%s wins %d-%d (session %d-%d)",
        winner.value,
        state.player.score,
        state.ai.score,
        state.wins.player,
        state.wins.ai,
    )
    return winner


def resize_surface(state: SimulationState, width: float, height: float) -> None:
    """Rebuild entities at a new surface size, keeping scores and phase."""
    _validate_size(width, height)
    player_score, ai_score = state.player.score, state.ai.score
    state.width = width
    state.height = height
    state.player, state.ai, state.ball = create_entities(width, height)
    state.player.score = player_score
    state.ai.score = ai_score
    logger.debug("Surface resized to %sx%s", width, height)
