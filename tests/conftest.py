import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pixel_platformer.config import PhysicsConfig
from pixel_platformer.world import ActiveSet, Player, World


@pytest.fixture(scope="session", autouse=True)
def headless_pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def physics_cfg():
    """Constants chosen to be exact in binary floating point."""
    return PhysicsConfig(
        gravity=0.5,
        friction=0.75,
        acceleration=0.5,
        max_fall_speed=8.0,
        bounce_impulse=4.0,
        stomp_threshold=2.0,
    )


@pytest.fixture
def make_world():
    """Build a small World; the player is 10x10 unless overridden."""

    def factory(
        *,
        platforms=(),
        pickups=(),
        hazards=(),
        x=0.0,
        y=0.0,
        w=10.0,
        h=10.0,
        vx=0.0,
        vy=0.0,
        on_ground=False,
        lives=3,
        start=(0.0, 0.0),
        width=900.0,
    ):
        player = Player(
            x=x,
            y=y,
            w=w,
            h=h,
            max_speed=4.0,
            jump_impulse=8.0,
            lives=lives,
            vx=vx,
            vy=vy,
            on_ground=on_ground,
        )
        return World(
            player=player,
            platforms=tuple(platforms),
            pickups=ActiveSet(list(pickups)),
            hazards=ActiveSet(list(hazards)),
            width=width,
            start=start,
        )

    return factory
