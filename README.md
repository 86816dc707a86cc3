# routewalker

A small tile-based overworld adventure. Walk a route drawn from a text map,
step through tall grass for a chance of a wild encounter, pick up potions from
treasure tiles, pass through doors to other maps, and reach the goal tile to
win. The player's position, potions and hit points are read from a lightly
obfuscated save file.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
routewalker [--save game.sav] [--map maps/map0_1.txt]
```

The game reads the player's position, potions and hit points from the save
file (`game.sav` by default) and starts on the map given by `--map`
(`maps/map0_1.txt` by default; a missing map file gives an empty map). The
images `windowIcon.bmp`, `route.bmp`, `spriteSheet.png` and
`endGameScreen - win.bmp` are loaded from the current directory; a missing
image is reported and replaced by a blank one.

Use the arrow keys to walk. The space bar shows the menu. Battles and item
pick-ups are answered on the terminal: in a battle, `1` attacks, `2` offers a
potion (heals 15, up to 100) and `3` runs. Before each battle the map
`maps/battle.txt` is shown for a second. Losing all hit points ends the game;
reaching the goal tile shows the end screen until the window is closed.

Tiles in a map file:

| Tile    | Meaning                                       |
|---------|-----------------------------------------------|
| `P`     | path                                          |
| `G`     | grass, with a 1 in 7 chance of a wild battle  |
| `B`     | a battle that always starts                   |
| `W`     | water, which cannot be crossed                |
| `T`     | treasure holding a potion                     |
| `A`     | the goal; reaching it ends the game           |
| `0`–`9` | a door to the map named in the header         |
| space   | nothing; cannot be crossed                    |

A map file begins with door records, each field followed by a space, in the
form `<door> <map file> <x> <y> `. The header ends with a token that is a lone
newline; the rest of the line after it is skipped and the rows of tiles
follow. For example:

```
0 maps/map0_2.txt 5 1 
 
PPPGG
WWPGT
```

Maps may be at most 100 by 100 tiles and door numbers run from 0 to 9;
anything else raises `ValueError`.

## Viewing maps while editing

```
routewalker-editor [name] [--base DIR]
```

Shows the map `<DIR>/<name>.txt` (the directory defaults to
`../../../bin/Debug/maps`), asking for the name if none is given. The file is
read again on every frame, so changes made in a text editor appear at once.

## Save files

```
routewalker-encrypt decrypt.sav [-o game.sav]
```

Obfuscates a plain save file into `game.sav` (or the file given by `-o`) and
removes the plain file. A plain save file is a single line such as
`map: maps/map0_1.txt x: 3 y: 4 ptn: 1 hp: 100`.

In code, `routewalker.savefile` offers `save`, `load`, `encrypt`, `decrypt`,
`format_state` and `parse_state`, and `routewalker.mapfile` offers `load_map`
and `parse_map`, which return a `GameMap` with its tiles and door links.

## What it does not do

The in-game menu only prints `Menu.`; it has no options, and the game never
writes a save file of its own. Progress is kept only by writing a save file
with `routewalker.savefile.save` or by hand and then `routewalker-encrypt`.
The map viewer only displays maps; it does not change them.