"""Particle sparks emitted when the ball strikes a paddle."""

from __future__ import annotations

import random
import pygame

from .utils import PARTICLE_BURST, PARTICLE_FADE, Color, Point


class Particle(pygame.sprite.Sprite):
    """Spark that drifts and fades out, then removes itself from its groups."""

    def __init__(
        self,
        position: Point,
        color: Color,
        velocity: tuple[float, float],
        radius: float,
        alpha: float = 1.0,
    ) -> None:
        super().__init__()
        self.position = [float(position[0]), float(position[1])]
        self.velocity = [velocity[0], velocity[1]]
        self.color = color
        self.radius = radius
        self.initial_alpha = alpha
        self.alpha = alpha
        self.age = 0

    def update(self) -> None:
        """Advance particle simulation one frame."""
        self.position[0] += self.velocity[0]
        self.position[1] += self.velocity[1]
        self.age += 1
        # Hits exactly zero after 1 / PARTICLE_FADE ticks.
        self.alpha = self.initial_alpha - self.age * PARTICLE_FADE
        if self.alpha <= 0:
            self.kill()


class ParticleSystem:
    """Owns the live particle group and the burst emitter."""

    def __init__(self) -> None:
        self.particles = pygame.sprite.Group()

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles.sprites())

    def burst(self, position: Point, color: Color, count: int = PARTICLE_BURST) -> None:
        """Emit a spray of sparks around an impact point."""
        for _ in range(count):
            velocity = ((random.random() - 0.5) * 5, (random.random() - 0.5) * 5)
            self.particles.add(
                Particle(
                    position=position,
                    color=color,
                    velocity=velocity,
                    radius=random.random() * 3 + 1,
                )
            )

    def update(self) -> None:
        """Update all particles."""
        self.particles.update()

    def clear(self) -> None:
        """Drop every live particle."""
        self.particles.empty()
