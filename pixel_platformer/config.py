"""Configuration data structures for the pixel platformer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DisplayConfig:
    """Window size and the pixel scale of the low-resolution buffer."""

    window_size: tuple[int, int] = (900, 500)
    pixel_scale: int = 5  # display pixels per game pixel

    def __post_init__(self) -> None:
        if self.pixel_scale <= 0:
            raise ValueError(f"pixel_scale must be positive, got {self.pixel_scale}")
        width, height = self.window_size
        if width % self.pixel_scale or height % self.pixel_scale:
            raise ValueError(
                f"window size {width}x{height} is not divisible by pixel scale {self.pixel_scale}"
            )

    @property
    def buffer_size(self) -> tuple[int, int]:
        width, height = self.window_size
        return width // self.pixel_scale, height // self.pixel_scale


@dataclass(frozen=True)
class PhysicsConfig:
    """Per-tick movement constants, authored in display units."""

    gravity: float = 0.9
    friction: float = 0.9  # multiplier applied to vx when no direction is held
    acceleration: float = 0.6
    max_fall_speed: float = 24.0
    bounce_impulse: float = 10.0  # upward speed after stomping a hazard
    stomp_threshold: float = 12.0
    stomp_score: int = 2
    pickup_score: int = 1


@dataclass(frozen=True)
class PlayerConfig:
    """Player body and tuning, authored in display units."""

    width: float = 34.0
    height: float = 40.0
    start: tuple[float, float] = (48.0, 360.0)
    max_speed: float = 3.8
    jump_impulse: float = 16.0
    lives: int = 3


@dataclass(frozen=True)
class RenderingConfig:
    """Colours and text sizes for the low-resolution renderer."""

    sky_top_color: tuple[int, int, int] = (135, 206, 235)
    sky_bottom_color: tuple[int, int, int] = (176, 224, 230)
    ground_color: tuple[int, int, int] = (76, 166, 74)
    ground_band_start: float = 0.6  # fraction of the buffer height
    platform_color: tuple[int, int, int] = (139, 90, 43)
    platform_highlight_color: tuple[int, int, int] = (194, 139, 90)
    pickup_color: tuple[int, int, int] = (255, 215, 0)
    pickup_outline_color: tuple[int, int, int] = (184, 134, 11)
    hazard_color: tuple[int, int, int] = (160, 82, 45)
    hazard_accent_color: tuple[int, int, int] = (59, 47, 47)
    player_color: tuple[int, int, int] = (221, 34, 34)
    player_cap_color: tuple[int, int, int] = (153, 0, 0)
    eye_color: tuple[int, int, int] = (255, 255, 255)
    pupil_color: tuple[int, int, int] = (0, 0, 0)
    hud_panel_color: tuple[int, int, int, int] = (0, 0, 0, 153)
    hud_text_color: tuple[int, int, int] = (255, 255, 255)
    lost_overlay_color: tuple[int, int, int, int] = (0, 0, 0, 179)
    lost_text_color: tuple[int, int, int] = (255, 255, 255)
    won_overlay_color: tuple[int, int, int, int] = (255, 255, 255, 242)
    won_text_color: tuple[int, int, int] = (21, 63, 6)
    hud_font_size: int = 10
    title_font_size: int = 24
    subtitle_font_size: int = 10


@dataclass(frozen=True)
class GameConfig:
    """High-level configuration of the game."""

    target_fps: int = 60
    caption: str = "Pixel Platformer"
    display: DisplayConfig = field(default_factory=DisplayConfig)
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    render: RenderingConfig = field(default_factory=RenderingConfig)
