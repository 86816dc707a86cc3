"""Map files: a header of door links followed by a grid of tile characters."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

MAP_SIZE = 100
MAX_DOORS = 10
VOID = " "


@dataclass
class AdjMap:
    """Where a door leads: a map file and the arrival position."""

    map_name: str
    x: int
    y: int


@dataclass
class GameMap:
    """A tile grid addressed by (x, y) together with its door links."""

    name: str = ""
    cells: dict[tuple[int, int], str] = field(default_factory=dict)
    doors: dict[int, AdjMap] = field(default_factory=dict)

    def tile(self, x: int, y: int) -> str:
        """Return the tile at (x, y); unset or outside cells are void."""
        return self.cells.get((x, y), VOID)

    def door(self, tile: str) -> AdjMap | None:
        """Return the link for a door tile, or None if the tile is not a door."""
        if len(tile) != 1 or not "0" <= tile <= "9":
            return None
        index = int(tile)
        if index not in self.doors:
            raise KeyError(f"door {index} has no destination")
        return self.doors[index]


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


class _Reader:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def getline(self, delim: str = "\n") -> str | None:
        if self._pos >= len(self._text):
            return None
        end = self._text.find(delim, self._pos)
        if end < 0:
            chunk = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            chunk = self._text[self._pos:end]
            self._pos = end + 1
        return chunk

    def get(self) -> str | None:
        if self._pos >= len(self._text):
            return None
        char = self._text[self._pos]
        self._pos += 1
        return char


def parse_map(text: str) -> GameMap:
    """Parse map text into a GameMap."""
    reader = _Reader(text)
    game_map = GameMap()

    while (token := reader.getline(" ")) is not None:
        if token == "\n":
            break
        index = _atoi(token)
        if not 0 <= index < MAX_DOORS:
            raise ValueError(f"door index out of range: {index}")
        map_name = reader.getline(" ") or ""
        x = _atoi(reader.getline(" ") or "")
        y = _atoi(reader.getline(" ") or "")
        game_map.doors[index] = AdjMap(map_name, x, y)
    reader.getline()

    x = y = 0
    while (char := reader.get()) is not None:
        if char == "\n":
            y += 1
            x = 0
            char = reader.get()
            if char is None:
                break
        if x >= MAP_SIZE or y >= MAP_SIZE:
            raise ValueError(f"map exceeds {MAP_SIZE}x{MAP_SIZE} tiles")
        game_map.cells[(x, y)] = char
        x += 1
    return game_map


def load_map(path) -> GameMap:
    """Read and parse a map file."""
    game_map = parse_map(Path(path).read_text(encoding="latin-1"))
    game_map.name = str(path)
    return game_map