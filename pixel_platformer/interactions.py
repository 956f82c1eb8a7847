"""Pickup collection, hazard stomps/damage and win/loss transitions."""

from __future__ import annotations

import logging

from .config import PhysicsConfig
from .world import GamePhase, Hazard, Player, World, rects_overlap

logger = logging.getLogger(__name__)


def _touches(player: Player, x: float, y: float, w: float, h: float) -> bool:
    return rects_overlap(player.x, player.y, player.w, player.h, x, y, w, h)


def is_landing(player: Player, hazard: Hazard, threshold: float) -> bool:
    """True when a falling player's feet started this tick within ``threshold`` of the hazard top."""
    if player.vy <= 0:
        return False
    start_bottom = player.bottom - player.last_dy
    return start_bottom - hazard.y < threshold


def collect_pickups(world: World, physics: PhysicsConfig) -> int:
    collected = 0
    for index, pickup in world.pickups.enumerate_alive():
        if _touches(world.player, *pickup.bounds) and world.pickups.discard(index):
            collected += 1
    if collected:
        world.pickups.compact()
        world.score += collected * physics.pickup_score
        logger.debug("Collected %d pickup(s); score=%d", collected, world.score)
    return collected


def damage_player(world: World) -> None:
    player = world.player
    player.respawn(world.start)
    player.lives -= 1
    logger.info("Player hit; lives=%d", player.lives)
    if player.lives <= 0:
        world.phase = GamePhase.LOST
        logger.info("Game over with score %d", world.score)


def resolve_hazards(world: World, physics: PhysicsConfig) -> None:
    """Evaluate every overlapping hazard independently, in order."""
    player = world.player
    for index, hazard in world.hazards.enumerate_alive():
        if not _touches(player, hazard.x, hazard.y, hazard.w, hazard.h):
            continue
        if is_landing(player, hazard, physics.stomp_threshold):
            world.hazards.discard(index)
            player.vy = -physics.bounce_impulse
            world.score += physics.stomp_score
            logger.debug("Stomped hazard %d; score=%d", index, world.score)
        else:
            damage_player(world)
            if not world.playing:
                break
    world.hazards.compact()


def check_win(world: World) -> None:
    if world.playing and not world.pickups:
        world.phase = GamePhase.WON
        logger.info("All pickups collected; final score %d", world.score)


def resolve(world: World, physics: PhysicsConfig) -> None:
    """Apply this tick's interactions after physics has moved everything."""
    if not world.playing:
        return
    collect_pickups(world, physics)
    resolve_hazards(world, physics)
    check_win(world)
