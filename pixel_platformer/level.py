"""Level geometry in display units and the scaler into simulation units."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .config import GameConfig, PhysicsConfig, PlayerConfig
from .world import ActiveSet, Hazard, Pickup, Platform, Player, World


@dataclass(frozen=True)
class LevelData:
    """Static level records. Pickups and hazards are copied into each World."""

    platforms: tuple[Platform, ...]
    pickups: tuple[Pickup, ...]
    hazards: tuple[Hazard, ...]


# Authored against the default 900x500 window.
DEFAULT_LEVEL = LevelData(
    platforms=(
        Platform(x=0, y=476, w=900, h=24),  # ground
        Platform(x=120, y=380, w=160, h=18),
        Platform(x=340, y=320, w=120, h=18),
        Platform(x=520, y=260, w=120, h=18),
        Platform(x=700, y=340, w=160, h=18),
        Platform(x=420, y=440, w=120, h=18),
    ),
    pickups=(
        Pickup(x=160, y=340, r=8),
        Pickup(x=380, y=280, r=8),
        Pickup(x=560, y=220, r=8),
        Pickup(x=740, y=300, r=8),
        Pickup(x=460, y=400, r=8),
    ),
    hazards=(
        Hazard(x=250, y=356, w=30, h=24, vx=1.2, left=120, right=250),
        Hazard(x=620, y=316, w=30, h=24, vx=0.9, left=520, right=630),
    ),
)


def scale_level(level: LevelData, scale: float) -> LevelData:
    """Divide every linear dimension of ``level`` by ``scale``."""
    return LevelData(
        platforms=tuple(
            Platform(x=p.x / scale, y=p.y / scale, w=p.w / scale, h=p.h / scale)
            for p in level.platforms
        ),
        pickups=tuple(
            Pickup(x=c.x / scale, y=c.y / scale, r=c.r / scale) for c in level.pickups
        ),
        hazards=tuple(
            Hazard(
                x=e.x / scale,
                y=e.y / scale,
                w=e.w / scale,
                h=e.h / scale,
                vx=e.vx / scale,
                left=e.left / scale,
                right=e.right / scale,
            )
            for e in level.hazards
        ),
    )


def scale_physics(physics: PhysicsConfig, scale: float) -> PhysicsConfig:
    # friction is a ratio and scores are counts; neither is a length.
    return replace(
        physics,
        gravity=physics.gravity / scale,
        acceleration=physics.acceleration / scale,
        max_fall_speed=physics.max_fall_speed / scale,
        bounce_impulse=physics.bounce_impulse / scale,
        stomp_threshold=physics.stomp_threshold / scale,
    )


def scale_player(player: PlayerConfig, scale: float) -> PlayerConfig:
    """Scale player tuning; the body snaps to whole buffer pixels."""
    return replace(
        player,
        width=max(1, round(player.width / scale)),
        height=max(1, round(player.height / scale)),
        start=(player.start[0] / scale, player.start[1] / scale),
        max_speed=player.max_speed / scale,
        jump_impulse=player.jump_impulse / scale,
    )


def build_world(level: LevelData, player_cfg: PlayerConfig, width: float) -> World:
    """Create a fresh World from simulation-unit level data and player config."""
    start = player_cfg.start
    player = Player(
        x=start[0],
        y=start[1],
        w=player_cfg.width,
        h=player_cfg.height,
        max_speed=player_cfg.max_speed,
        jump_impulse=player_cfg.jump_impulse,
        lives=player_cfg.lives,
    )
    return World(
        player=player,
        platforms=tuple(level.platforms),
        pickups=ActiveSet([replace(c) for c in level.pickups]),
        hazards=ActiveSet([replace(e) for e in level.hazards]),
        width=width,
        start=start,
    )


def build_default_world(config: GameConfig, level: LevelData = DEFAULT_LEVEL) -> tuple[World, PhysicsConfig]:
    """Scale display-unit data by the pixel scale and build the starting World."""
    scale = config.display.pixel_scale
    world = build_world(
        scale_level(level, scale),
        scale_player(config.player, scale),
        config.display.buffer_size[0],
    )
    return world, scale_physics(config.physics, scale)
