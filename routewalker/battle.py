"""Turn-based encounters with a wild creature."""

from __future__ import annotations

import random
import sys
from enum import Enum
from typing import Callable

from routewalker.models import Player, Squirtle

WILD_LEVEL = 10
MAX_PLAYER_HP = 100
POTION_HEAL = 15
PLAYER_ATTACK_RANGE = 100
ENEMY_ATTACK_RANGE = 25
SCREEN_CLEAR_LINES = 50


class BattleOutcome(Enum):
    """How an encounter ended."""

    WON = "won"
    FLED = "fled"
    BLACKED_OUT = "blacked_out"

    @property
    def blacked_out(self) -> bool:
        """True when the player lost the encounter."""
        return self is BattleOutcome.BLACKED_OUT


def _first_char(text: str) -> str:
    return text.strip()[:1]


def battle(
    player: Player,
    read_choice: Callable[[], str] | None = None,
    read_answer: Callable[[], str] | None = None,
    rng=None,
    write: Callable[[str], object] | None = None,
) -> BattleOutcome:
    """Fight a wild creature until it faints, the player flees or blacks out."""
    read_choice = read_choice or input
    read_answer = read_answer or input
    rng = rng or random
    write = write or sys.stdout.write

    def say(line: str) -> None:
        write(line + "\n")

    enemy = Squirtle(WILD_LEVEL)
    while enemy.hp > 0:
        write("\n" * SCREEN_CLEAR_LINES)
        say(f"A wild {enemy.species} appeared")
        say(f"{enemy.species} HP:{enemy.hp}")
        say(f"Your HP:{player.hp}")
        say("Battle!")
        say("1. Attack")
        say("2. Potion")
        say("3. Run")
        choice = _first_char(read_choice())

        if choice == "1":
            enemy.hp -= rng.randrange(PLAYER_ATTACK_RANGE)
            say(f"The wild {enemy.species} attacked!")
            player.hp -= rng.randrange(ENEMY_ATTACK_RANGE)
            if player.hp <= 0:
                say("You blacked out")
                return BattleOutcome.BLACKED_OUT
        elif choice == "2":
            say(f"{player.inventory.potion} potions left")
            say("Use one?")
            say("y/n")
            if _first_char(read_answer()) == "y":
                if player.inventory.potion > 0:
                    player.inventory.potion -= 1
                    player.hp = min(player.hp + POTION_HEAL, MAX_PLAYER_HP)
                    say(f"The wild {enemy.species} attacked!")
                    player.hp -= rng.randrange(ENEMY_ATTACK_RANGE)
                else:
                    say("No potions left!")
        elif choice == "3":
            say("Got away safely!")
            return BattleOutcome.FLED
    return BattleOutcome.WON