"""The overworld game: walking a route, finding items, doors and encounters."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field
from typing import Callable

import pygame

from routewalker.battle import BattleOutcome, battle
from routewalker.mapfile import GameMap, load_map
from routewalker.menu import print_menu
from routewalker.models import SCREEN_HEIGHT, SCREEN_WIDTH, Game, Player
from routewalker.movement import Direction, direction_for_key, move
from routewalker.render import draw_route
from routewalker.savefile import DEFAULT_SAVE, load

START_MAP = "maps/map0_1.txt"
BATTLE_MAP = "maps/battle.txt"
BATTLE_POSITION = (2, 4)
ICON_FILE = "windowIcon.bmp"
ROUTE_IMAGE = "route.bmp"
SPRITE_SHEET = "spriteSheet.png"
END_SCREEN = "endGameScreen - win.bmp"

ENCOUNTER_ODDS = 7
FRAME_DELAY_MS = 30
BATTLE_INTRO_MS = 1000
AFTER_BATTLE_MS = 100
TREASURE_PROMPT = "You found one potion!\nPick it up?\nY/N\n"


@dataclass
class Session:
    """A running game: the current map, the player and where they stand."""

    game_map: GameMap
    player: Player
    x: int = 0
    y: int = 0
    facing: Direction | None = None
    rng: random.Random = field(default_factory=random.Random)
    read_answer: Callable[[], str] = input
    fight: Callable[[Player], BattleOutcome] = battle
    load: Callable[[str], GameMap] = load_map
    write: Callable[[str], object] = sys.stdout.write
    finished: bool = False
    won: bool = False

    @property
    def game(self) -> Game:
        """The current state as saveable game data."""
        return Game(self.x, self.y, self.game_map.name, self.player)

    def move(self, direction: Direction) -> None:
        """Face a direction and step that way if the tile allows it."""
        self.facing = direction
        self.x, self.y = move(self.game_map, direction, self.x, self.y)

    def enter_tile(self) -> None:
        """Apply whatever the tile under the player does."""
        tile = self.game_map.tile(self.x, self.y)
        if tile == "T":
            self.write(TREASURE_PROMPT)
            if self.read_answer().strip()[:1] == "y":
                self.player.inventory.potion += 1
        elif tile == "G":
            if self.rng.randrange(ENCOUNTER_ODDS) == 0:
                self._fight()
        elif tile == "B":
            self._fight()
        elif tile == "A":
            self.won = True
            self.finished = True
        else:
            link = self.game_map.door(tile)
            if link is not None:
                self.game_map = self.load(link.map_name)
                self.x, self.y = link.x, link.y

    def _fight(self) -> None:
        if self.fight(self.player).blacked_out:
            self.finished = True


def _read_map(path: str) -> GameMap:
    try:
        return load_map(path)
    except OSError:
        return GameMap(name=path)


def _load_image(path: str) -> pygame.Surface:
    try:
        return pygame.image.load(path)
    except (pygame.error, FileNotFoundError) as error:
        print(f"Failed to load image: {error}")
        return pygame.Surface((1, 1))


def _quit_requested() -> bool:
    return any(event.type == pygame.QUIT for event in pygame.event.get())


def _show_end_screen(window: pygame.Surface) -> None:
    window.fill((0, 0, 0))
    window.blit(_load_image(END_SCREEN), (0, 0))
    pygame.display.flip()
    while pygame.event.wait().type != pygame.QUIT:
        pass


def main(argv=None) -> int:
    """Run the game from a save file."""
    parser = argparse.ArgumentParser(description="Walk the route.")
    parser.add_argument("--save", default=DEFAULT_SAVE, help="encrypted save file to load")
    parser.add_argument("--map", default=START_MAP, help="map file to start on")
    args = parser.parse_args(argv)

    state = load(args.save)
    game_map = _read_map(args.map)

    pygame.init()
    try:
        window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Game")
        pygame.display.set_icon(_load_image(ICON_FILE))
        route = _load_image(ROUTE_IMAGE)
        sprites = _load_image(SPRITE_SHEET)
        sprites.set_colorkey((0xFF, 0xFF, 0xFF))

        def redraw(session: Session) -> None:
            draw_route(window, route, sprites, session.game_map, session.x, session.y, session.facing)
            pygame.display.flip()

        def fight(player: Player) -> BattleOutcome:
            draw_route(window, route, sprites, _read_map(BATTLE_MAP), *BATTLE_POSITION)
            pygame.display.flip()
            pygame.time.delay(BATTLE_INTRO_MS)
            outcome = battle(player)
            if _quit_requested():
                session.finished = True
            pygame.time.delay(AFTER_BATTLE_MS)
            return outcome

        session = Session(game_map, state.player, state.x, state.y, fight=fight, load=_read_map)
        redraw(session)

        while not session.finished:
            pygame.time.delay(FRAME_DELAY_MS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    session.finished = True
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_SPACE:
                        print_menu(session.game)
                    direction = direction_for_key(event.key)
                    if direction is not None:
                        session.move(direction)
                        redraw(session)
                        session.enter_tile()
                    if not session.won:
                        redraw(session)
        if session.won:
            _show_end_screen(window)
    finally:
        pygame.quit()
    return 0