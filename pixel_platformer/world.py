"""Simulation state: entities, the active-set container and the World aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class GamePhase(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Platform:
    """Static axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float


@dataclass
class Pickup:
    """Circular collectible; overlap is tested against its circumscribing square."""

    x: float
    y: float
    r: float

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return self.x - self.r, self.y - self.r, self.r * 2, self.r * 2


@dataclass
class Hazard:
    """Patrolling enemy that reverses direction at its [left, right] range."""

    x: float
    y: float
    w: float
    h: float
    vx: float
    left: float
    right: float


@dataclass
class Player:
    """The controlled character's kinematic state."""

    x: float
    y: float
    w: float
    h: float
    max_speed: float
    jump_impulse: float
    lives: int
    vx: float = 0.0
    vy: float = 0.0
    on_ground: bool = False
    last_dy: float = 0.0  # vertical displacement applied during the latest tick

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def respawn(self, position: tuple[float, float]) -> None:
        self.x, self.y = position
        self.vx = 0.0
        self.vy = 0.0
        self.on_ground = False
        self.last_dy = 0.0


def rects_overlap(
    ax: float, ay: float, aw: float, ah: float,
    bx: float, by: float, bw: float, bh: float,
) -> bool:
    """Strict AABB overlap; touching edges do not count."""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


class ActiveSet(Generic[T]):
    """Index-stable collection supporting removal while iterating.

    ``discard`` only marks a slot dead; ``compact`` drops dead slots once the
    current pass is over, so indices handed out by ``enumerate_alive`` stay
    valid for the whole pass.
    """

    def __init__(self, items: list[T] | None = None) -> None:
        self._items: list[T] = list(items or [])
        self._alive: list[bool] = [True] * len(self._items)

    def __len__(self) -> int:
        return sum(self._alive)

    def __iter__(self) -> Iterator[T]:
        for item, alive in zip(self._items, self._alive):
            if alive:
                yield item

    def __bool__(self) -> bool:
        return any(self._alive)

    def enumerate_alive(self) -> Iterator[tuple[int, T]]:
        for index in range(len(self._items)):
            if self._alive[index]:
                yield index, self._items[index]

    def discard(self, index: int) -> bool:
        """Mark ``index`` dead. Returns False if it was already removed."""
        if not self._alive[index]:
            return False
        self._alive[index] = False
        return True

    def compact(self) -> None:
        self._items = [item for item, alive in zip(self._items, self._alive) if alive]
        self._alive = [True] * len(self._items)

    def snapshot(self) -> list[T]:
        return list(self)


@dataclass
class World:
    """Everything the tick pipeline mutates, owned in one place."""

    player: Player
    platforms: tuple[Platform, ...]
    pickups: ActiveSet[Pickup]
    hazards: ActiveSet[Hazard]
    width: float
    start: tuple[float, float]
    score: int = 0
    phase: GamePhase = field(default=GamePhase.PLAYING)

    @property
    def lives(self) -> int:
        return self.player.lives

    @property
    def playing(self) -> bool:
        return self.phase is GamePhase.PLAYING
