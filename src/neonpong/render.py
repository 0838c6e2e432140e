"""Frame rendering for the playfield, HUD and overlays."""

from __future__ import annotations

from typing import Iterable, Protocol
import pygame

from .controls import ControlPanel, win_counter_text
from .particles import Particle
from .settings import DisplaySettings
from .state import Phase, SimulationState
from .utils import BG_COLOR, NEUTRAL_COLOR, SHADOW_COLOR, TEXT_COLOR, Color


class Renderer(Protocol):
    """Draws one frame from simulation state; never mutates it."""

    def render(
        self,
        state: SimulationState,
        particles: Iterable[Particle],
        controls: ControlPanel,
        shake_offset: tuple[int, int] = (0, 0),
    ) -> None: ...


def overlay_message(state: SimulationState) -> tuple[str, float] | None:
    """Return the centered banner text and its size ratio for the phase."""
    if state.phase is Phase.READY:
        return "Click Start Game", 0.04
    if state.phase is Phase.GAME_OVER and state.winner is not None:
        return f"{state.winner.value} Wins!", 0.05
    return None


class PygameRenderer:
    """Neon look: glowing paddles and ball over a dashed center net."""

    def __init__(self, screen: pygame.Surface, display: DisplaySettings) -> None:
        self.screen = screen
        self.display = display
        self._fonts: dict[int, pygame.font.Font] = {}

    def font(self, size: int) -> pygame.font.Font:
        size = max(8, size)
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont("consolas", size, bold=True)
        return self._fonts[size]

    def render(
        self,
        state: SimulationState,
        particles: Iterable[Particle],
        controls: ControlPanel,
        shake_offset: tuple[int, int] = (0, 0),
    ) -> None:
        width, height = self.screen.get_size()
        frame = pygame.Surface((width, height), pygame.SRCALPHA)
        frame.fill(BG_COLOR)

        if self.display.show_net:
            self._draw_net(frame, width, height)
        self._draw_text(frame, str(state.player.score), (width / 4, height / 5), state.player.color, 0.05)
        self._draw_text(frame, str(state.ai.score), (3 * width / 4, height / 5), state.ai.color, 0.05)

        for paddle in (state.player, state.ai):
            rect = pygame.Rect(int(paddle.x), int(paddle.y), max(1, int(paddle.width)), max(1, int(paddle.height)))
            if self.display.glow:
                self._draw_glow_rect(frame, paddle.color, rect, 3, 8, 120)
            pygame.draw.rect(frame, paddle.color, rect)

        ball = state.ball
        center = (int(ball.x), int(ball.y))
        if self.display.glow:
            self._draw_glow_circle(frame, ball.color, center, ball.radius)
        pygame.draw.circle(frame, ball.color, center, max(1, int(ball.radius)))

        self._draw_particles(frame, particles)

        message = overlay_message(state)
        if message is not None:
            text, ratio = message
            self._draw_text(frame, text, (width / 2, height / 2), TEXT_COLOR, ratio)

        controls.render(frame, self.font(int(height * 0.03)))
        counter = self.font(int(height * 0.03)).render(win_counter_text(state.wins), True, NEUTRAL_COLOR)
        frame.blit(counter, counter.get_rect(midbottom=(width // 2, height - 12)))

        self.screen.fill((0, 0, 0))
        self.screen.blit(frame, shake_offset)
        pygame.display.flip()

    @staticmethod
    def _draw_net(surface: pygame.Surface, width: int, height: int) -> None:
        for y in range(0, height + 1, 15):
            pygame.draw.rect(surface, NEUTRAL_COLOR, pygame.Rect(width // 2 - 1, y, 2, 10))

    def _draw_text(
        self,
        surface: pygame.Surface,
        text: str,
        center: tuple[float, float],
        color: Color,
        size_ratio: float,
    ) -> None:
        font = self.font(int(surface.get_height() * size_ratio))
        shadow = font.render(text, True, SHADOW_COLOR)
        label = font.render(text, True, color)
        rect = label.get_rect(center=(int(center[0]), int(center[1])))
        surface.blit(shadow, rect.move(3, 3))
        surface.blit(label, rect)

    @staticmethod
    def _draw_particles(surface: pygame.Surface, particles: Iterable[Particle]) -> None:
        for particle in particles:
            size = max(1, int(particle.radius))
            spark = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
            alpha = max(0, min(255, int(255 * particle.alpha)))
            pygame.draw.circle(spark, (*particle.color, alpha), (size, size), size)
            surface.blit(spark, (int(particle.position[0]) - size, int(particle.position[1]) - size))

    @staticmethod
    def _draw_glow_rect(
        surface: pygame.Surface,
        color: Color,
        rect: pygame.Rect,
        layers: int,
        spread: int,
        alpha: int,
    ) -> None:
        for i in range(layers, 0, -1):
            inflate = i * spread
            glow_rect = rect.inflate(inflate, inflate)
            glow = pygame.Surface(glow_rect.size, pygame.SRCALPHA)
            pygame.draw.rect(glow, (*color, max(8, alpha // (i + 1))), glow.get_rect(), border_radius=4)
            surface.blit(glow, glow_rect.topleft)

    @staticmethod
    def _draw_glow_circle(surface: pygame.Surface, color: Color, center: tuple[int, int], radius: float) -> None:
        for i in range(3, 0, -1):
            glow_radius = int(radius + i * 4)
            glow = pygame.Surface((glow_radius * 2, glow_radius * 2), pygame.SRCALPHA)
            pygame.draw.circle(glow, (*color, max(8, 140 // (i + 1))), (glow_radius, glow_radius), glow_radius)
            surface.blit(glow, (center[0] - glow_radius, center[1] - glow_radius))
