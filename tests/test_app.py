from routewalker.app import ENCOUNTER_ODDS, Session
from routewalker.battle import BattleOutcome
from routewalker.mapfile import AdjMap, GameMap
from routewalker.models import Inventory, Player
from routewalker.movement import Direction

import pytest


def make_map(rows, doors=None, name="maps/test.txt"):
    cells = {
        (x, y): char
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
    }
    return GameMap(name=name, cells=cells, doors=doors or {})


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.bounds = []

    def randrange(self, bound):
        self.bounds.append(bound)
        return self.value


class FakeFight:
    def __init__(self, outcome):
        self.outcome = outcome
        self.players = []

    def __call__(self, player):
        self.players.append(player)
        return self.outcome


def make_session(rows, x=0, y=0, **kwargs):
    player = Player("Kurt", 100, Inventory(potion=1))
    output = []
    session = Session(make_map(rows, kwargs.pop("doors", None)), player, x, y,
                      write=output.append, **kwargs)
    return session, output


def test_move_onto_path_updates_position_and_facing():
    session, _ = make_session(["PP"])
    session.move(Direction.RIGHT)
    assert (session.x, session.y) == (1, 0)
    assert session.facing is Direction.RIGHT


def test_move_into_water_is_blocked():
    session, _ = make_session(["PW"])
    session.move(Direction.RIGHT)
    assert (session.x, session.y) == (0, 0)
    assert session.facing is Direction.RIGHT


def test_treasure_picked_up_on_yes():
    session, output = make_session(["T"], read_answer=lambda: "y")
    session.enter_tile()
    assert session.player.inventory.potion == 2
    assert "You found one potion!" in "".join(output)


def test_treasure_left_on_no():
    session, _ = make_session(["T"], read_answer=lambda: "n")
    session.enter_tile()
    assert session.player.inventory.potion == 1


def test_boss_tile_always_fights():
    fight = FakeFight(BattleOutcome.FLED)
    session, _ = make_session(["B"], fight=fight)
    session.enter_tile()
    assert fight.players == [session.player]
    assert session.finished is False


def test_blacking_out_finishes_session():
    fight = FakeFight(BattleOutcome.BLACKED_OUT)
    session, _ = make_session(["B"], fight=fight)
    session.enter_tile()
    assert session.finished is True
    assert session.won is False


def test_grass_encounter_when_roll_is_zero():
    fight = FakeFight(BattleOutcome.WON)
    rng = FixedRng(0)
    session, _ = make_session(["G"], fight=fight, rng=rng)
    session.enter_tile()
    assert len(fight.players) == 1
    assert rng.bounds == [ENCOUNTER_ODDS]


def test_grass_without_encounter():
    fight = FakeFight(BattleOutcome.WON)
    session, _ = make_session(["G"], fight=fight, rng=FixedRng(3))
    session.enter_tile()
    assert fight.players == []


def test_end_tile_wins():
    session, _ = make_session(["A"])
    session.enter_tile()
    assert session.won is True
    assert session.finished is True


def test_door_loads_linked_map_and_moves_player():
    target = make_map(["PPPP", "PPPP"], name="maps/next.txt")
    requested = []

    def loader(name):
        requested.append(name)
        return target

    doors = {1: AdjMap("maps/next.txt", 3, 1)}
    session, _ = make_session(["1"], doors=doors, load=loader)
    session.enter_tile()
    assert requested == ["maps/next.txt"]
    assert session.game_map is target
    assert (session.x, session.y) == (3, 1)


def test_door_without_link_raises():
    session, _ = make_session(["2"])
    with pytest.raises(KeyError):
        session.enter_tile()


def test_plain_path_changes_nothing():
    fight = FakeFight(BattleOutcome.WON)
    session, output = make_session(["P"], fight=fight)
    session.enter_tile()
    assert (session.x, session.y, session.finished) == (0, 0, False)
    assert output == []
    assert fight.players == []


def test_game_reflects_session_state():
    session, _ = make_session(["PP"])
    session.move(Direction.RIGHT)
    game = session.game
    assert (game.x, game.y) == (1, 0)
    assert game.current_map == "maps/test.txt"
    assert game.player is session.player