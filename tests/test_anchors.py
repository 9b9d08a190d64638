import random

import pytest

from scrabblebot.anchors import find_anchors, priority_map
from scrabblebot.board import Board


CAT_ANCHORS = [(6, 7), (6, 8), (6, 9), (7, 6), (7, 10), (8, 7), (8, 8), (8, 9)]


def test_first_move_has_only_the_center():
    anchors = find_anchors(Board(), is_first_move=True)
    assert [(a.row, a.col) for a in anchors] == [(7, 7)]


def test_anchors_touch_existing_tiles(cat_board):
    anchors = find_anchors(cat_board, is_first_move=False)
    assert [(a.row, a.col) for a in anchors] == CAT_ANCHORS


def test_shuffle_is_seeded(cat_board):
    first = find_anchors(cat_board, False, rng=random.Random(3))
    second = find_anchors(cat_board, False, rng=random.Random(3))
    assert first == second
    assert sorted((a.row, a.col) for a in first) == CAT_ANCHORS


def test_prioritized_anchors_descend(cat_board):
    anchors = find_anchors(cat_board, False, prioritize=True)
    priorities = [a.priority for a in anchors]
    assert priorities == sorted(priorities, reverse=True)
    assert sorted((a.row, a.col) for a in anchors) == CAT_ANCHORS


def test_priority_map_favours_premium_squares():
    pmap = priority_map(Board())
    assert pmap.shape == (15, 15)
    # A triple word square outranks its plain neighbour
    assert pmap[0, 0] > pmap[0, 1]
    assert pmap[1, 1] > pmap[1, 2]


def test_covered_premium_squares_stop_attracting(make_board):
    open_map = priority_map(Board())
    covered_map = priority_map(make_board(("A", 0, 0, "H")))
    # (0,1) is one step from the TW at (0,0): 10 * (8 - 1) / 8
    assert open_map[0, 1] - covered_map[0, 1] == pytest.approx(8.75)


def test_own_square_is_not_counted_as_nearby(make_board):
    open_map = priority_map(Board())
    covered_map = priority_map(make_board(("A", 0, 0, "H")))
    # Covering the TW only removes its pull on other squares
    assert open_map[0, 0] == pytest.approx(covered_map[0, 0])
