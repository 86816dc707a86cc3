"""Drawing the visible part of a map around the player."""

from __future__ import annotations

from typing import Iterator

import pygame

from routewalker.mapfile import GameMap
from routewalker.models import MAP_HEIGHT, MAP_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH
from routewalker.movement import Direction

TILE_SIZE = 16
VIEW_HALF_WIDTH = SCREEN_WIDTH // TILE_SIZE - 10
VIEW_HALF_HEIGHT = SCREEN_HEIGHT // TILE_SIZE - 10
PLAYER_SIZE = 30

_PATH = pygame.Rect(103, 1, 16, 16)
_GRASS = pygame.Rect(120, 1, 16, 16)
_WATER = pygame.Rect(188, 18, 16, 16)
_DOOR = pygame.Rect(358, 290, 16, 16)
_TREASURE = pygame.Rect(120, 35, 16, 16)
_END = pygame.Rect(18, 562, 16, 16)

_TILES = {
    "P": _PATH,
    "G": _GRASS,
    "B": _GRASS,
    "W": _WATER,
    "0": _DOOR,
    "1": _DOOR,
    "2": _DOOR,
    "T": _TREASURE,
    "A": _END,
}

_SPRITES = {
    Direction.UP: pygame.Rect(55, 9, 32, 32),
    Direction.DOWN: pygame.Rect(55, 40, 30, 30),
    Direction.LEFT: pygame.Rect(34, 2, 30, 30),
    Direction.RIGHT: pygame.Rect(83, 2, 30, 30),
}


def camera_center(x: int, y: int, map_width: int = MAP_WIDTH, map_height: int = MAP_HEIGHT) -> tuple[int, int]:
    """Return the cell the camera centres on, kept inside the map edges."""
    cx, cy = x, y
    if y - VIEW_HALF_HEIGHT < 0:
        cy = VIEW_HALF_HEIGHT
    elif y + VIEW_HALF_HEIGHT > map_height:
        cy = map_height - VIEW_HALF_HEIGHT
    if x - VIEW_HALF_WIDTH < 0:
        cx = VIEW_HALF_WIDTH
    elif x + VIEW_HALF_WIDTH > map_width:
        cx = map_width - VIEW_HALF_WIDTH
    return cx, cy


def visible_cells(
    x: int, y: int, map_width: int = MAP_WIDTH, map_height: int = MAP_HEIGHT
) -> Iterator[tuple[int, int, int, int]]:
    """Yield (cell_x, cell_y, screen_x, screen_y) for each cell in view, row by row."""
    center_x, center_y = camera_center(x, y, map_width, map_height)
    rows = range(center_y - VIEW_HALF_HEIGHT, center_y + VIEW_HALF_HEIGHT)
    columns = range(center_x - VIEW_HALF_WIDTH, center_x + VIEW_HALF_WIDTH)
    for row, cell_y in enumerate(rows):
        for column, cell_x in enumerate(columns):
            yield cell_x, cell_y, column * TILE_SIZE, row * TILE_SIZE


def tile_source(tile: str) -> pygame.Rect | None:
    """Return the area of the route image for a tile, or None for void tiles."""
    rect = _TILES.get(tile)
    return rect.copy() if rect is not None else None


def player_sprite(direction: Direction | None) -> pygame.Rect:
    """Return the sprite-sheet area for the player facing a direction."""
    return _SPRITES.get(direction, _SPRITES[Direction.DOWN]).copy()


def draw_route(
    surface: pygame.Surface,
    route_image: pygame.Surface,
    sprite_sheet: pygame.Surface,
    game_map: GameMap,
    x: int,
    y: int,
    facing: Direction | None = None,
) -> None:
    """Draw the map around (x, y) and the player onto surface."""
    surface.fill((0, 0, 0))
    player_position = None
    for cell_x, cell_y, screen_x, screen_y in visible_cells(x, y):
        if (cell_x, cell_y) == (x, y):
            player_position = (screen_x, screen_y)
        area = tile_source(game_map.tile(cell_x, cell_y))
        if area is not None:
            surface.blit(route_image, (screen_x, screen_y), area)
    if player_position is not None:
        area = player_sprite(facing)
        area.width = min(area.width, PLAYER_SIZE)
        area.height = min(area.height, PLAYER_SIZE)
        surface.blit(sprite_sheet, player_position, area)