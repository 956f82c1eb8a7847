"""Low-resolution rendering with a nearest-neighbour upscale to the window."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
import pygame

from .config import RenderingConfig
from .world import GamePhase, World


def vertical_gradient(
    size: tuple[int, int],
    top: tuple[int, int, int],
    bottom: tuple[int, int, int],
) -> pygame.Surface:
    """Build a top-to-bottom linear gradient surface."""
    width, height = size
    t = np.linspace(0.0, 1.0, height, dtype=np.float32)[None, :, None]
    start = np.asarray(top, dtype=np.float32)[None, None, :]
    end = np.asarray(bottom, dtype=np.float32)[None, None, :]
    column = start + (end - start) * t
    pixels = np.broadcast_to(column, (width, height, 3))
    return pygame.surfarray.make_surface(np.rint(pixels).astype(np.uint8))


class Renderer:
    """Paints a World into the low-res buffer and presents it on the display."""

    def __init__(
        self,
        display: pygame.Surface,
        config: RenderingConfig,
        buffer_size: tuple[int, int],
    ) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.display = display
        self.cfg = config
        self.buffer = pygame.Surface(buffer_size)
        self.width, self.height = buffer_size
        self._background: Optional[pygame.Surface] = None
        self.hud_font = pygame.font.Font(None, config.hud_font_size)
        self.title_font = pygame.font.Font(None, config.title_font_size)
        self.subtitle_font = pygame.font.Font(None, config.subtitle_font_size)

    def draw(self, world: World) -> None:
        self._draw_background()
        self._draw_platforms(world)
        self._draw_pickups(world)
        self._draw_hazards(world)
        self._draw_player(world)
        self._draw_hud(world)
        if world.phase is GamePhase.LOST:
            self._draw_lost()
        elif world.phase is GamePhase.WON:
            self._draw_won(world)
        self.present()

    def present(self) -> None:
        # pygame.transform.scale samples nearest-neighbour; smoothscale would blur.
        scaled = pygame.transform.scale(self.buffer, self.display.get_size())
        self.display.blit(scaled, (0, 0))

    def _draw_background(self) -> None:
        if self._background is None:
            background = vertical_gradient(
                (self.width, self.height), self.cfg.sky_top_color, self.cfg.sky_bottom_color
            )
            band_top = int(self.height * self.cfg.ground_band_start)
            pygame.draw.rect(
                background,
                self.cfg.ground_color,
                pygame.Rect(0, band_top, self.width, self.height - band_top),
            )
            self._background = background
        self.buffer.blit(self._background, (0, 0))

    def _draw_platforms(self, world: World) -> None:
        for p in world.platforms:
            x, y = math.floor(p.x), math.floor(p.y)
            w, h = math.ceil(p.w), math.ceil(p.h)
            pygame.draw.rect(self.buffer, self.cfg.platform_color, pygame.Rect(x, y, w, h))
            pygame.draw.rect(self.buffer, self.cfg.platform_highlight_color, pygame.Rect(x, y, w, 1))

    def _draw_pickups(self, world: World) -> None:
        for c in world.pickups:
            centre = (round(c.x), round(c.y))
            radius = max(1, round(c.r))
            pygame.draw.circle(self.buffer, self.cfg.pickup_color, centre, radius)
            pygame.draw.circle(self.buffer, self.cfg.pickup_outline_color, centre, radius, 1)

    def _draw_hazards(self, world: World) -> None:
        for e in world.hazards:
            x, y = math.floor(e.x), math.floor(e.y)
            pygame.draw.rect(
                self.buffer, self.cfg.hazard_color, pygame.Rect(x, y, math.ceil(e.w), math.ceil(e.h))
            )
            self.buffer.fill(self.cfg.hazard_accent_color, pygame.Rect(x + 1, y + 1, 1, 1))

    def _draw_player(self, world: World) -> None:
        p = world.player
        x, y = math.floor(p.x), math.floor(p.y)
        w, h = max(1, math.ceil(p.w)), max(1, math.ceil(p.h))
        pygame.draw.rect(self.buffer, self.cfg.player_color, pygame.Rect(x, y, w, h))
        pygame.draw.rect(self.buffer, self.cfg.player_cap_color, pygame.Rect(x, y - 1, w, 1))
        # Eyes: two white pixels with a pupil below the left one.
        self.buffer.fill(self.cfg.eye_color, pygame.Rect(x + 2, y + 2, 1, 1))
        self.buffer.fill(self.cfg.eye_color, pygame.Rect(x + 4, y + 2, 1, 1))
        self.buffer.fill(self.cfg.pupil_color, pygame.Rect(x + 2, y + 3, 1, 1))

    def _draw_hud(self, world: World) -> None:
        score = self.hud_font.render(f"S:{world.score}", False, self.cfg.hud_text_color)
        lives = self.hud_font.render(f"L:{world.lives}", False, self.cfg.hud_text_color)
        panel_height = min(self.hud_font.get_height() + 1, self.height - 2)
        panel = pygame.Surface((min(40, self.width - 2), panel_height), pygame.SRCALPHA)
        panel.fill(self.cfg.hud_panel_color)
        self.buffer.blit(panel, (1, 1))
        self.buffer.blit(score, (2, 1))
        self.buffer.blit(lives, (18, 1))

    def _overlay(self, color: tuple[int, int, int, int]) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill(color)
        self.buffer.blit(overlay, (0, 0))

    def _blit_centered(self, font: pygame.font.Font, text: str, color: tuple[int, int, int], y: int) -> None:
        surf = font.render(text, False, color)
        self.buffer.blit(surf, surf.get_rect(center=(self.width // 2, y)))

    def _draw_lost(self) -> None:
        self._overlay(self.cfg.lost_overlay_color)
        mid = self.height // 2
        self._blit_centered(self.title_font, "Game Over", self.cfg.lost_text_color, mid - 6)
        self._blit_centered(self.subtitle_font, "Press R to try again", self.cfg.lost_text_color, mid + 6)

    def _draw_won(self, world: World) -> None:
        self._overlay(self.cfg.won_overlay_color)
        mid = self.height // 2
        self._blit_centered(self.title_font, "You Win!", self.cfg.won_text_color, mid - 6)
        self._blit_centered(self.subtitle_font, f"Score: {world.score}", self.cfg.won_text_color, mid + 6)
