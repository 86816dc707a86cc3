"""Reading and writing the obfuscated save file."""

from __future__ import annotations

import os
import re
from pathlib import Path

from routewalker.models import DEFAULT_PLAYER_NAME, Game, Inventory, Player

_SHIFT = ord("k")
_ENCODING = "latin-1"
_LABELS = ("map:", "x:", "y:", "ptn:", "hp:")

DEFAULT_SAVE = "game.sav"
DEFAULT_PLAIN = "decrypt.sav"


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _shift(data: bytes, amount: int) -> bytes:
    return bytes((byte + amount) % 256 for byte in data if byte != 0x0A)


def encrypt_text(text: bytes) -> bytes:
    """Shift every byte up by the key; line breaks are dropped."""
    return _shift(text, _SHIFT)


def decrypt_text(text: bytes) -> bytes:
    """Shift every byte down by the key; line breaks are dropped."""
    return _shift(text, -_SHIFT)


def format_state(game: Game) -> str:
    """Render game state in the plain save format."""
    return (
        f"map: {game.current_map}"
        f" x: {game.x}"
        f" y: {game.y}"
        f" ptn: {game.player.inventory.potion}"
        f" hp: {game.player.hp}"
    )


def parse_state(text: str) -> Game:
    """Parse the plain save format into a Game."""
    line = text.split("\n", 1)[0]
    parts = line.split(" ", 9)
    if len(parts) != 10 or tuple(parts[0::2]) != _LABELS:
        raise ValueError(f"malformed save data: {line!r}")
    map_name = parts[1]
    x, y, potions, hp = (_atoi(value) for value in parts[3::2])
    player = Player(DEFAULT_PLAYER_NAME, hp, Inventory(potion=potions))
    return Game(x, y, map_name, player)


def _convert(path, target, transform) -> None:
    source = Path(path)
    destination = Path(target)
    data = source.read_bytes()
    same = destination.exists() and os.path.samefile(source, destination)
    destination.write_bytes(transform(data))
    if not same:
        source.unlink()


def encrypt(path, target=DEFAULT_SAVE) -> None:
    """Encrypt the file at path into target and remove the original."""
    _convert(path, target, encrypt_text)


def decrypt(path, target=DEFAULT_PLAIN) -> None:
    """Decrypt the file at path into target and remove the original."""
    _convert(path, target, decrypt_text)


def save(game: Game, path=DEFAULT_SAVE) -> None:
    """Write game state to an encrypted save file."""
    Path(path).write_bytes(encrypt_text(format_state(game).encode(_ENCODING)))


def load(path=DEFAULT_SAVE) -> Game:
    """Read game state from an encrypted save file."""
    plain = decrypt_text(Path(path).read_bytes())
    return parse_state(plain.decode(_ENCODING))