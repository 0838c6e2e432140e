"""On-screen start/reset buttons and the session win counter."""

from __future__ import annotations

from dataclasses import dataclass
import pygame

from .state import SessionWins
from .utils import BUTTON_COLOR, SHADOW_COLOR, TEXT_COLOR

START_LABEL = "Start Game"
NEW_GAME_LABEL = "New Game"
RESET_LABEL = "Reset"


@dataclass(slots=True)
class Button:
    """Single clickable control."""

    label: str
    action: str
    visible: bool = True
    rect: pygame.Rect | None = None

    def hit(self, position: tuple[int, int]) -> bool:
        """Return whether a visible button contains the point."""
        return self.visible and self.rect is not None and self.rect.collidepoint(position)


class ControlPanel:
    """Start and reset controls whose visibility follows the game phase."""

    def __init__(self) -> None:
        self.start = Button(START_LABEL, "start")
        self.reset = Button(RESET_LABEL, "reset", visible=False)

    @property
    def buttons(self) -> tuple[Button, Button]:
        return (self.start, self.reset)

    def on_start(self) -> None:
        """Hide both controls while a game runs."""
        self.start.visible = False
        self.reset.visible = False

    def on_game_over(self) -> None:
        """Offer a new game or a session reset."""
        self.start.label = NEW_GAME_LABEL
        self.start.visible = True
        self.reset.visible = True

    def on_reset(self) -> None:
        """Back to the initial layout."""
        self.start.label = START_LABEL
        self.start.visible = True
        self.reset.visible = False

    def layout(self, width: int, height: int) -> None:
        """Place the buttons below the center overlay text."""
        button_w = max(120, int(width * 0.18))
        button_h = max(32, int(height * 0.07))
        top = int(height * 0.62)
        gap = 16
        self.start.rect = pygame.Rect(0, 0, button_w, button_h)
        self.reset.rect = pygame.Rect(0, 0, button_w, button_h)
        if self.reset.visible:
            self.start.rect.topright = (width // 2 - gap // 2, top)
            self.reset.rect.topleft = (width // 2 + gap // 2, top)
        else:
            self.start.rect.midtop = (width // 2, top)
            self.reset.rect.midtop = (width // 2, top + button_h + gap)

    def action_at(self, position: tuple[int, int]) -> str | None:
        """Return the action of the visible button under a click."""
        for button in self.buttons:
            if button.hit(position):
                return button.action
        return None

    def render(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Draw the visible buttons."""
        self.layout(surface.get_width(), surface.get_height())
        for button in self.buttons:
            if not button.visible or button.rect is None:
                continue
            shadow = button.rect.move(3, 3)
            pygame.draw.rect(surface, SHADOW_COLOR, shadow, border_radius=6)
            pygame.draw.rect(surface, BUTTON_COLOR, button.rect, border_radius=6)
            pygame.draw.rect(surface, TEXT_COLOR, button.rect, width=2, border_radius=6)
            text = font.render(button.label, True, TEXT_COLOR)
            surface.blit(text, text.get_rect(center=button.rect.center))


def win_counter_text(wins: SessionWins) -> str:
    """Format the session tally shown under the playfield."""
    return f"Player: {wins.player} - Computer: {wins.ai}"
