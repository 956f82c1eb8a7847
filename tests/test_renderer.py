import numpy as np
import pygame
import pytest

from pixel_platformer.config import GameConfig, RenderingConfig
from pixel_platformer.level import build_default_world
from pixel_platformer.renderer import Renderer, vertical_gradient
from pixel_platformer.world import GamePhase


@pytest.fixture
def scene():
    config = GameConfig()
    world, _ = build_default_world(config)
    display = pygame.Surface(config.display.window_size)
    renderer = Renderer(display, config.render, config.display.buffer_size)
    return config, world, display, renderer


def test_upscale_is_blocky(scene):
    config, world, display, renderer = scene
    renderer.draw(world)

    scale = config.display.pixel_scale
    bw, bh = config.display.buffer_size
    pixels = pygame.surfarray.array3d(display)
    blocks = pixels.reshape(bw, scale, bh, scale, 3)
    assert (blocks == blocks[:, :1, :, :1, :]).all()


def test_display_matches_buffer(scene):
    config, world, display, renderer = scene
    renderer.draw(world)

    scale = config.display.pixel_scale
    buffer = pygame.surfarray.array3d(renderer.buffer)
    shown = pygame.surfarray.array3d(display)[::scale, ::scale]
    assert np.array_equal(buffer, shown)


def test_drawing_does_not_mutate_world(scene):
    _, world, _, renderer = scene
    before = (
        world.score,
        world.lives,
        world.phase,
        (world.player.x, world.player.y, world.player.vx, world.player.vy),
        world.pickups.snapshot(),
        world.hazards.snapshot(),
    )
    renderer.draw(world)
    after = (
        world.score,
        world.lives,
        world.phase,
        (world.player.x, world.player.y, world.player.vx, world.player.vy),
        world.pickups.snapshot(),
        world.hazards.snapshot(),
    )
    assert before == after


def test_platforms_and_player_are_painted(scene):
    _, world, _, renderer = scene
    renderer.draw(world)
    cfg = renderer.cfg

    ground = world.platforms[0]
    assert renderer.buffer.get_at((90, int(ground.y) + 2))[:3] == cfg.platform_color
    player = world.player
    centre = (int(player.x) + 1, int(player.y) + player.h - 2)
    assert renderer.buffer.get_at(centre)[:3] == cfg.player_color


def test_lost_overlay_darkens(scene):
    config, world, display, renderer = scene
    world.phase = GamePhase.LOST
    renderer.draw(world)
    corner = display.get_at((0, config.display.window_size[1] - 1))
    assert max(corner[:3]) < 100


def test_won_overlay_lightens(scene):
    config, world, display, renderer = scene
    world.phase = GamePhase.WON
    renderer.draw(world)
    corner = display.get_at((0, config.display.window_size[1] - 1))
    assert min(corner[:3]) > 200


def test_vertical_gradient_runs_top_to_bottom():
    cfg = RenderingConfig()
    surface = vertical_gradient((4, 10), cfg.sky_top_color, cfg.sky_bottom_color)
    assert surface.get_size() == (4, 10)
    assert surface.get_at((0, 0))[:3] == cfg.sky_top_color
    assert surface.get_at((3, 9))[:3] == cfg.sky_bottom_color
