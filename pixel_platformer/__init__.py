"""Pixel-art platformer package."""

from .config import DisplayConfig, GameConfig, PhysicsConfig, PlayerConfig, RenderingConfig
from .game import PlatformerGame
from .input import InputState, KeyboardInput
from .level import DEFAULT_LEVEL, LevelData, scale_level
from .world import GamePhase, World

__all__ = [
    "PlatformerGame",
    "GameConfig",
    "DisplayConfig",
    "PhysicsConfig",
    "PlayerConfig",
    "RenderingConfig",
    "InputState",
    "KeyboardInput",
    "LevelData",
    "DEFAULT_LEVEL",
    "scale_level",
    "GamePhase",
    "World",
]
