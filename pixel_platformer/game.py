"""Game loop driver: input, physics, interactions, rendering once per frame."""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from . import interactions, physics
from .config import GameConfig
from .input import InputProvider, KeyboardInput
from .level import DEFAULT_LEVEL, LevelData, build_default_world
from .renderer import Renderer
from .world import World

logger = logging.getLogger(__name__)


class PlatformerGame:
    """High-level game orchestration."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_provider: Optional[InputProvider] = None,
        level: LevelData = DEFAULT_LEVEL,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.config = config or GameConfig()
        self.level = level
        self.screen = pygame.display.set_mode(self.config.display.window_size)
        pygame.display.set_caption(self.config.caption)

        self.clock = pygame.time.Clock()
        self.input_provider = input_provider or KeyboardInput()
        self.renderer = Renderer(self.screen, self.config.render, self.config.display.buffer_size)
        self.world: World
        self.reset()
        self.running = True

    def reset(self) -> None:
        """Start over with a freshly built World."""
        self.world, self.physics = build_default_world(self.config, self.level)
        if hasattr(self.input_provider, "reset"):
            self.input_provider.reset()  # type: ignore[attr-defined]
        logger.info(
            "New game: %d pickups, %d hazards, %d lives",
            len(self.world.pickups),
            len(self.world.hazards),
            self.world.lives,
        )

    def tick(self) -> None:
        """Run one frame of the pipeline and present it."""
        inputs = self.input_provider.poll()
        if self.world.playing:
            physics.step(self.world, inputs, self.physics)
            interactions.resolve(self.world, self.physics)
        self.renderer.draw(self.world)
        pygame.display.flip()

    def run(self) -> None:
        try:
            while self.running:
                self.clock.tick(self.config.target_fps)
                self._handle_events(pygame.event.get())
                if not self.running:
                    break
                self.tick()
        finally:
            pygame.quit()

    def _handle_events(self, events: list[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r and not self.world.playing:
                self.reset()
            else:
                self.input_provider.handle_event(event)
