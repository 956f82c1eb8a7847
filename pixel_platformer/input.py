"""Input abstractions for the platformer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import pygame

MOVE_LEFT_KEYS = frozenset({"left", "a"})
MOVE_RIGHT_KEYS = frozenset({"right", "d"})
JUMP_KEYS = frozenset({"up", "w", "space"})


@dataclass(frozen=True)
class InputState:
    """Snapshot of player intent for one tick."""

    move_left: bool = False
    move_right: bool = False
    jump: bool = False


class InputProvider(Protocol):
    """Interface for supplying player input to the game loop."""

    def handle_event(self, event: pygame.event.Event) -> None:
        """Feed a raw host event."""

    def poll(self) -> InputState:
        """Return an InputState representing the latest player intent."""


def normalize_key(name: str) -> str:
    # pygame names the space bar " " on some platforms and "space" on others.
    name = name.lower()
    return "space" if name == " " else name


class KeyboardInput(InputProvider):
    """Key-held map fed by KEYDOWN/KEYUP events (Arrows or A/D to move, Up/W/Space to jump)."""

    def __init__(self) -> None:
        self._held: dict[str, bool] = {}

    def press(self, key: str) -> None:
        self._held[normalize_key(key)] = True

    def release(self, key: str) -> None:
        self._held[normalize_key(key)] = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return
        key = normalize_key(pygame.key.name(event.key))
        if event.type == pygame.KEYDOWN:
            self.press(key)
        else:
            self.release(key)

    def is_held(self, key: str) -> bool:
        return self._held.get(normalize_key(key), False)

    def _any_held(self, keys: frozenset[str]) -> bool:
        return any(self._held.get(key, False) for key in keys)

    def poll(self) -> InputState:
        return InputState(
            move_left=self._any_held(MOVE_LEFT_KEYS),
            move_right=self._any_held(MOVE_RIGHT_KEYS),
            jump=self._any_held(JUMP_KEYS),
        )

    def reset(self) -> None:
        """Forget every held key."""
        self._held.clear()
