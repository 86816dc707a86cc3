"""Player movement on a map."""

from __future__ import annotations

from enum import Enum

import pygame

from routewalker.mapfile import GameMap
from routewalker.models import MAP_HEIGHT, MAP_WIDTH

_BLOCKING = frozenset(" W")


class Direction(Enum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def direction_for_key(key: int) -> Direction | None:
    """Return the direction bound to a key, or None."""
    return _KEYS.get(key)


def move(game_map: GameMap, direction: Direction, x: int, y: int) -> tuple[int, int]:
    """Return the position after trying to step; void and water tiles block."""
    if direction is Direction.UP:
        allowed, target = y > 0, (x, y - 1)
    elif direction is Direction.DOWN:
        allowed, target = y < MAP_HEIGHT - 1, (x, y + 1)
    elif direction is Direction.LEFT:
        allowed, target = x > 0, (x - 1, y)
    else:
        allowed, target = x < MAP_WIDTH - 2, (x + 1, y)
    if allowed and game_map.tile(*target) not in _BLOCKING:
        return target
    return x, y