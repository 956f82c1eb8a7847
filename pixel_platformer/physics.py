"""Per-tick kinematics and collision resolution against static platforms."""

from __future__ import annotations

from .config import PhysicsConfig
from .input import InputState
from .world import Hazard, Platform, Player, World, rects_overlap


def penetration(player: Player, platform: Platform) -> tuple[float, float, float, float]:
    """Return (dx, dy, overlap_x, overlap_y) between the two box centres."""
    dx = (player.x + player.w / 2) - (platform.x + platform.w / 2)
    dy = (player.y + player.h / 2) - (platform.y + platform.h / 2)
    overlap_x = (player.w + platform.w) / 2 - abs(dx)
    overlap_y = (player.h + platform.h) / 2 - abs(dy)
    return dx, dy, overlap_x, overlap_y


def _overlaps(player: Player, platform: Platform) -> bool:
    return rects_overlap(
        player.x, player.y, player.w, player.h,
        platform.x, platform.y, platform.w, platform.h,
    )


def apply_intent(player: Player, inputs: InputState, physics: PhysicsConfig) -> None:
    if inputs.move_left:
        player.vx = max(player.vx - physics.acceleration, -player.max_speed)
    if inputs.move_right:
        player.vx = min(player.vx + physics.acceleration, player.max_speed)
    if not inputs.move_left and not inputs.move_right:
        player.vx *= physics.friction

    if inputs.jump and player.on_ground:
        player.vy = -player.jump_impulse
        player.on_ground = False

    player.vy = min(player.vy + physics.gravity, physics.max_fall_speed)


def move_horizontal(player: Player, platforms: tuple[Platform, ...]) -> None:
    player.x += player.vx
    for platform in platforms:
        if not _overlaps(player, platform):
            continue
        dx, _, overlap_x, overlap_y = penetration(player, platform)
        if overlap_x < overlap_y:
            player.x += overlap_x if dx > 0 else -overlap_x
            player.vx = 0.0


def move_vertical(player: Player, platforms: tuple[Platform, ...]) -> None:
    start_y = player.y
    player.y += player.vy
    player.on_ground = False
    for platform in platforms:
        if not _overlaps(player, platform):
            continue
        _, dy, overlap_x, overlap_y = penetration(player, platform)
        if overlap_y <= overlap_x:
            if dy > 0:
                player.y += overlap_y
            else:
                player.y -= overlap_y
                player.on_ground = True
            player.vy = 0.0
    player.last_dy = player.y - start_y


def clamp_to_world(player: Player, width: float) -> None:
    player.x = max(0.0, min(player.x, width - player.w))


def patrol(hazard: Hazard) -> None:
    """Advance one hazard, pinning it to the bound it reaches and reversing."""
    hazard.x += hazard.vx
    if hazard.x <= hazard.left:
        hazard.x = hazard.left
        hazard.vx = abs(hazard.vx)
    elif hazard.x >= hazard.right:
        hazard.x = hazard.right
        hazard.vx = -abs(hazard.vx)


def step(world: World, inputs: InputState, physics: PhysicsConfig) -> None:
    """Advance the player and hazards by one fixed tick."""
    if not world.playing:
        return

    player = world.player
    apply_intent(player, inputs, physics)
    move_horizontal(player, world.platforms)
    move_vertical(player, world.platforms)
    clamp_to_world(player, world.width)

    for hazard in world.hazards:
        patrol(hazard)
