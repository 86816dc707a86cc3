"""A live viewer for map files while they are being edited."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from routewalker.mapfile import GameMap, load_map
from routewalker.render import TILE_SIZE, tile_source

EDITOR_WIDTH = 700
EDITOR_HEIGHT = 700
EDITOR_COLUMNS = 50
EDITOR_ROWS = 50
DEFAULT_MAP_DIR = "../../../bin/Debug/maps"
MAP_SUFFIX = ".txt"
ICON_FILE = "windowIcon.bmp"
ROUTE_IMAGE = "route.bmp"
REFRESH_RATE = 30


def editor_map_path(name: str, base=DEFAULT_MAP_DIR) -> Path:
    """Return the file of the map called name inside base."""
    return Path(base) / f"{name}{MAP_SUFFIX}"


def _read_map(path: Path) -> GameMap:
    try:
        return load_map(path)
    except OSError:
        return GameMap(name=str(path))


def _load_image(path: str) -> pygame.Surface:
    try:
        return pygame.image.load(path)
    except (pygame.error, FileNotFoundError) as error:
        print(f"Failed to load image: {error}")
        return pygame.Surface((1, 1))


def _draw_grid(surface: pygame.Surface, route: pygame.Surface, game_map: GameMap) -> None:
    surface.fill((0, 0, 0))
    for cell_y in range(EDITOR_ROWS + 1):
        for cell_x in range(EDITOR_COLUMNS + 1):
            area = tile_source(game_map.tile(cell_x, cell_y))
            if area is not None:
                surface.blit(route, (cell_x * TILE_SIZE, cell_y * TILE_SIZE), area)


def main(argv=None) -> int:
    """Show a map file, re-reading it continuously so edits appear at once."""
    parser = argparse.ArgumentParser(description="View a map while editing it.")
    parser.add_argument("name", nargs="?", help="map name, without directory or suffix")
    parser.add_argument("--base", default=DEFAULT_MAP_DIR, help="directory holding the maps")
    args = parser.parse_args(argv)
    name = args.name or input("Enter map name to edit: ").strip()
    path = editor_map_path(name, args.base)

    pygame.init()
    try:
        window = pygame.display.set_mode((EDITOR_WIDTH, EDITOR_HEIGHT))
        pygame.display.set_caption("Map Editor")
        pygame.display.set_icon(_load_image(ICON_FILE))
        route = _load_image(ROUTE_IMAGE)
        clock = pygame.time.Clock()
        running = True
        while running:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                running = False
            _draw_grid(window, route, _read_map(path))
            pygame.display.flip()
            clock.tick(REFRESH_RATE)
    finally:
        pygame.quit()
    return 0