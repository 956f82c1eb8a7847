import pytest

from pixel_platformer.config import DisplayConfig, GameConfig, PhysicsConfig, PlayerConfig
from pixel_platformer.level import (
    DEFAULT_LEVEL,
    LevelData,
    build_default_world,
    scale_level,
    scale_physics,
    scale_player,
)
from pixel_platformer.world import GamePhase, Hazard, Pickup, Platform


def test_scale_of_one_is_identity():
    assert scale_level(DEFAULT_LEVEL, 1) == DEFAULT_LEVEL


def test_scale_divides_every_linear_dimension():
    level = scale_level(DEFAULT_LEVEL, 5)

    assert level.platforms[0] == Platform(x=0, y=95.2, w=180, h=4.8)
    assert level.pickups[0] == Pickup(x=32, y=68, r=1.6)
    first = level.hazards[0]
    assert (first.x, first.y, first.w, first.h) == (50, 71.2, 6, 4.8)
    assert (first.left, first.right) == (24, 50)
    assert first.vx == pytest.approx(0.24)


def test_scaling_does_not_touch_input():
    hazard = Hazard(x=10, y=10, w=10, h=10, vx=2, left=0, right=20)
    level = scale_level(LevelData(platforms=(), pickups=(), hazards=(hazard,)), 2)
    assert hazard.x == 10
    assert level.hazards[0].x == 5
    assert level.hazards[0] is not hazard


def test_scale_physics_keeps_ratios():
    scaled = scale_physics(PhysicsConfig(), 5)
    assert scaled.gravity == pytest.approx(0.18)
    assert scaled.max_fall_speed == pytest.approx(4.8)
    assert scaled.friction == 0.9
    assert scaled.stomp_score == 2


def test_scale_player_snaps_body_to_pixels():
    scaled = scale_player(PlayerConfig(), 5)
    assert (scaled.width, scaled.height) == (7, 8)
    assert scaled.start == pytest.approx((9.6, 72.0))
    assert scaled.jump_impulse == pytest.approx(3.2)
    assert scaled.lives == 3


def test_display_must_divide_by_scale():
    with pytest.raises(ValueError):
        DisplayConfig(window_size=(900, 500), pixel_scale=3)
    with pytest.raises(ValueError):
        DisplayConfig(pixel_scale=0)
    assert DisplayConfig().buffer_size == (180, 100)


def test_default_world_starts_in_play():
    world, cfg = build_default_world(GameConfig())

    assert world.width == 180
    assert world.phase is GamePhase.PLAYING
    assert world.score == 0
    assert world.lives == 3
    assert len(world.pickups) == 5
    assert len(world.hazards) == 2
    assert (world.player.x, world.player.y) == world.start
    for hazard in world.hazards:
        assert hazard.left <= hazard.x <= hazard.right
    assert cfg.gravity == pytest.approx(0.18)


def test_worlds_do_not_share_mutable_entities():
    first, _ = build_default_world(GameConfig())
    second, _ = build_default_world(GameConfig())

    next(iter(first.hazards)).x = -100
    assert next(iter(second.hazards)).x == 50
    assert DEFAULT_LEVEL.hazards[0].x == 250


def test_default_hazards_patrol_with_left_edge_bounds():
    world, _ = build_default_world(GameConfig())
    _, second = world.hazards.snapshot()

    assert (second.x, second.y) == (pytest.approx(124), pytest.approx(63.2))
    assert (second.left, second.right) == (pytest.approx(104), pytest.approx(126))
    for hazard in DEFAULT_LEVEL.hazards:
        assert hazard.left <= hazard.x <= hazard.right
