"""The in-game menu."""

from __future__ import annotations

import sys
from typing import Callable

from routewalker.models import Game


def print_menu(game: Game, write: Callable[[str], object] | None = None) -> None:
    """Show the in-game menu."""
    (write or sys.stdout.write)("Menu.")