import pygame

from routewalker.mapfile import GameMap
from routewalker.movement import Direction
from routewalker.render import (
    VIEW_HALF_HEIGHT,
    VIEW_HALF_WIDTH,
    camera_center,
    draw_route,
    player_sprite,
    tile_source,
    visible_cells,
)


def test_camera_follows_player_away_from_edges():
    assert camera_center(50, 60, 200, 200) == (50, 60)


def test_camera_clamps_at_top_left():
    assert camera_center(0, 0, 200, 200) == (VIEW_HALF_WIDTH, VIEW_HALF_HEIGHT)


def test_camera_clamps_at_bottom_right():
    assert camera_center(199, 199, 200, 200) == (200 - VIEW_HALF_WIDTH, 200 - VIEW_HALF_HEIGHT)


def test_visible_cells_cover_window_and_include_player():
    cells = list(visible_cells(3, 4, 200, 200))
    assert len(cells) == (2 * VIEW_HALF_WIDTH) * (2 * VIEW_HALF_HEIGHT)
    assert any((cx, cy) == (3, 4) for cx, cy, _, _ in cells)
    assert cells[0][2:] == (0, 0)
    assert len({(sx, sy) for _, _, sx, sy in cells}) == len(cells)


def test_tile_sources_match_sheet():
    assert tile_source("P") == pygame.Rect(103, 1, 16, 16)
    assert tile_source("G") == tile_source("B")
    assert tile_source("0") == tile_source("2")
    assert tile_source(" ") is None
    assert tile_source("3") is None


def test_player_sprite_defaults_to_down():
    assert player_sprite(Direction.UP) == pygame.Rect(55, 9, 32, 32)
    assert player_sprite(None) == player_sprite(Direction.DOWN)


def test_draw_route_blits_tiles_and_player():
    red, blue, black = (255, 0, 0, 255), (0, 0, 255, 255), (0, 0, 0, 255)
    route = pygame.Surface((400, 600))
    route.fill(red[:3])
    sheet = pygame.Surface((200, 200))
    sheet.fill(blue[:3])
    screen = pygame.Surface((320, 320))
    game_map = GameMap(cells={(0, 0): "P", (5, 5): "G"})

    draw_route(screen, route, sheet, game_map, 5, 5, Direction.LEFT)

    positions = {(cx, cy): (sx, sy) for cx, cy, sx, sy in visible_cells(5, 5)}
    tile_x, tile_y = positions[(0, 0)]
    assert tuple(screen.get_at((tile_x + 1, tile_y + 1))) == red
    px, py = positions[(5, 5)]
    assert tuple(screen.get_at((px + 1, py + 1))) == blue
    vx, vy = positions[(1, 0)]
    assert tuple(screen.get_at((vx + 8, vy + 8))) == black