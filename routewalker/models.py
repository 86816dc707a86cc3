"""Core game objects: moves, creatures, inventory, player and game state."""

from __future__ import annotations

from dataclasses import dataclass, field

SCREEN_WIDTH = 20 * 16
SCREEN_HEIGHT = 20 * 16

# Logical map size used for movement limits and the camera.
MAP_WIDTH = 200
MAP_HEIGHT = 200

DEFAULT_PLAYER_NAME = "Kurt"


@dataclass
class Attack:
    """A move a creature can use."""

    name: str = ""
    pp: int = 0
    power: int = 0
    accuracy: int = 0
    type: str = ""


@dataclass
class Pokemon:
    """A creature with a level, hit points and up to four moves."""

    level: int = 0
    hp: int = 0
    species: str = ""
    nickname: str = ""
    type: str = ""
    moves: list[Attack] = field(default_factory=list)

    @classmethod
    def from_level(cls, level: int) -> "Pokemon":
        """Create a creature of the given level with ten hit points per level."""
        return cls(level=level, hp=level * 10)


class Squirtle(Pokemon):
    """A water creature whose hit points scale with its level."""

    def __init__(self, level: int) -> None:
        super().__init__(level=level, hp=level * 10, species="Squirtle", type="Water")


@dataclass
class Inventory:
    """Items carried by the player."""

    potion: int = 0


@dataclass
class Player:
    """The player: a name, hit points and an inventory starting with one potion."""

    name: str
    hp: int
    inventory: Inventory = field(default_factory=lambda: Inventory(potion=1))


@dataclass
class Game:
    """Saved game state: position, current map file and the player."""

    x: int
    y: int
    current_map: str
    player: Player