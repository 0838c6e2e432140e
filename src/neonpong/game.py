"""Frame loop driver: input, physics, feedback and rendering."""

from __future__ import annotations

from pathlib import Path
import logging
import pygame

from .ai import TrackingAI
from .audio import AudioManager, SoundPlayer
from .controls import ControlPanel
from .particles import ParticleSystem
from .physics import EventKind, SimEvent, step
from .render import PygameRenderer, Renderer
from .settings import GameSettings, SettingsManager
from .state import Phase, SimulationState, reset_session, resize_surface, start_game
from .utils import FPS, MIN_HEIGHT, MIN_WIDTH, SHAKE_FRAMES, SHAKE_MAGNITUDE

logger = logging.getLogger(__name__)


class PongGame:
    """Owns the simulation state and drives one step plus one render per frame."""

    def __init__(
        self,
        root: Path,
        renderer: Renderer | None = None,
        audio: SoundPlayer | None = None,
    ) -> None:
        pygame.mixer.pre_init(44100, -16, 2)
        pygame.init()
        pygame.font.init()

        self.root = root
        self.settings_manager = SettingsManager()
        self.settings: GameSettings = self.settings_manager.settings

        self.screen = self._open_window(self.settings.window_width, self.settings.window_height)
        pygame.display.set_caption("Neon Pong")
        self.clock = pygame.time.Clock()

        width, height = self.screen.get_size()
        self.state = SimulationState.create(width, height)
        self.ai = TrackingAI()
        self.particles = ParticleSystem()
        self.controls = ControlPanel()
        self.renderer: Renderer = renderer or PygameRenderer(self.screen, self.settings.display)

        if audio is None:
            manager = AudioManager(self.root)
            manager.load_assets()
            manager.set_volumes(self.settings.master_volume, self.settings.sfx_volume)
            audio = manager
        self.audio: SoundPlayer = audio

        self.screen_shake_frames = 0
        self.running = True

    def _open_window(self, width: int, height: int) -> pygame.Surface:
        if self.settings.display.fullscreen:
            return pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        return pygame.display.set_mode((width, height), pygame.RESIZABLE)

    def run(self) -> None:
        """Main event/update/render loop; runs until the window is closed."""
        logger.info("Loop started at %d FPS", FPS)
        while self.running:
            self.clock.tick(FPS)
            self.tick()
        self.settings_manager.save()
        pygame.quit()

    def tick(self) -> None:
        """Process pending input, then one physics step and one render pass."""
        self.running = self._handle_events()
        if not self.running:
            return
        self.update()
        self.renderer.render(self.state, self.particles, self.controls, self._shake_offset())

    def update(self) -> None:
        """One simulation tick: gated physics, then cosmetic particles."""
        for event in step(self.state, self.ai):
            self._dispatch(event)
        self.particles.update()

    def _dispatch(self, event: SimEvent) -> None:
        if event.kind is EventKind.HIT:
            self.audio.play_hit()
            if event.position is not None and event.color is not None:
                self.particles.burst(event.position, event.color)
        elif event.kind is EventKind.SCORE:
            self.audio.play_score()
        elif event.kind is EventKind.SHAKE:
            if self.settings.display.screen_shake:
                self.screen_shake_frames = SHAKE_FRAMES
        elif event.kind is EventKind.GAME_OVER:
            self.controls.on_game_over()

    def _shake_offset(self) -> tuple[int, int]:
        if self.screen_shake_frames <= 0:
            return (0, 0)
        self.screen_shake_frames -= 1
        ticks = pygame.time.get_ticks()
        shake_x = int(ticks % SHAKE_MAGNITUDE) - SHAKE_MAGNITUDE // 2
        shake_y = int((ticks // 2) % SHAKE_MAGNITUDE) - SHAKE_MAGNITUDE // 2
        return (shake_x, shake_y)

    def start(self) -> None:
        """Start or restart a game from the start / new game control."""
        if start_game(self.state):
            self.controls.on_start()

    def reset(self) -> None:
        """Clear the session tally from the reset control."""
        if reset_session(self.state):
            self.particles.clear()
            self.controls.on_reset()

    def move_player(self, pointer_y: float) -> None:
        self.state.player.follow_pointer(pointer_y)

    def resize(self, width: int, height: int) -> None:
        """Rescale the playfield to a new window size."""
        width = max(MIN_WIDTH, int(width))
        height = max(MIN_HEIGHT, int(height))
        surface = pygame.display.get_surface()
        if surface is None or surface.get_size() != (width, height):
            surface = self._open_window(width, height)
        self.screen = surface
        if isinstance(self.renderer, PygameRenderer):
            self.renderer.screen = surface
        resize_surface(self.state, *surface.get_size())
        self.particles.clear()
        if not self.settings.display.fullscreen:
            self.settings_manager.remember_window(*surface.get_size())

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.MOUSEMOTION:
                self.move_player(event.pos[1])
            elif event.type == pygame.FINGERMOTION:
                self.move_player(event.y * self.state.height)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._click(event.pos)
            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                self._handle_key(event.key)
        return True

    def _click(self, position: tuple[int, int]) -> None:
        self.controls.layout(int(self.state.width), int(self.state.height))
        action = self.controls.action_at(position)
        if action == "start":
            self.start()
        elif action == "reset":
            self.reset()

    def _handle_key(self, key: int) -> None:
        if key in (pygame.K_SPACE, pygame.K_RETURN) and self.controls.start.visible:
            self.start()
        elif key == pygame.K_r and self.controls.reset.visible:
            self.reset()
        elif key == pygame.K_h:
            self.settings_manager.toggle_screen_shake()
        elif key in (pygame.K_MINUS, pygame.K_EQUALS):
            delta = -0.05 if key == pygame.K_MINUS else 0.05
            self.settings_manager.adjust_volume("sfx_volume", delta)
            if isinstance(self.audio, AudioManager):
                self.audio.set_volumes(self.settings.master_volume, self.settings.sfx_volume)

    @property
    def phase(self) -> Phase:
        return self.state.phase
