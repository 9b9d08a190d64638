import random

import pytest

from scrabblebot.bag import TILE_DISTRIBUTION, TOTAL_TILES, TileBag, make_full_bag, remaining_tiles
from scrabblebot.errors import InvalidRackStateError
from scrabblebot.rack import Rack


def test_regulation_distribution():
    assert TOTAL_TILES == 100
    assert TILE_DISTRIBUTION["?"] == 2
    assert TILE_DISTRIBUTION["E"] == 12
    assert TILE_DISTRIBUTION["Z"] == 1
    assert len(make_full_bag()) == 100


def test_draw_and_refill():
    bag = TileBag(rng=random.Random(1))
    assert len(bag) == 100
    assert bag.counts()["?"] == 2
    drawn = bag.draw(7)
    assert len(drawn) == 7 and len(bag) == 93

    rack = bag.refill(Rack.from_string("AB"))
    assert len(rack) == 7
    assert len(bag) == 88


def test_draw_stops_when_bag_runs_low():
    bag = TileBag(["A", "B"], rng=random.Random(0))
    assert sorted(bag.draw(5)) == ["A", "B"]
    assert bag.is_empty()


def test_same_seed_same_order():
    first = TileBag(rng=random.Random(42)).draw(10)
    second = TileBag(rng=random.Random(42)).draw(10)
    assert first == second


def test_exchange_swaps_tiles():
    bag = TileBag(list("EEEEEEE"), rng=random.Random(0))
    rack = bag.exchange(Rack.from_string("QZ"), ["Q"])
    assert sorted(rack.tiles) == ["E", "Z"]
    assert len(bag) == 7
    assert bag.counts()["Q"] == 1


def test_exchange_refused_when_bag_short():
    bag = TileBag(["E"], rng=random.Random(0))
    with pytest.raises(InvalidRackStateError):
        bag.exchange(Rack.from_string("QZ"), ["Q", "Z"])


def test_remaining_tiles(make_board):
    board = make_board(("CaT", 7, 7, "H"))
    unseen = remaining_tiles(board, Rack.from_string("S?"))
    assert len(unseen) == 95
    # One blank on the board, one on the rack
    assert unseen.count("?") == 0
    assert unseen.count("A") == 9
    assert unseen.count("C") == 1
