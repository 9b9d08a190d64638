import pytest

from scrabblebot.board import Board
from scrabblebot.dictionary import Dictionary
from scrabblebot.errors import InvalidPlacementError
from scrabblebot.move import PlacedTile
from scrabblebot.placement import extract_word, fit_word, try_place_word, validate_submission, word_cells
from scrabblebot.rack import Rack


BOARD_WITH_HE = "\n".join([
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    ".......HE......",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
])


def test_extract_word_walks_both_ways(make_board):
    board = make_board(("CaT", 7, 7, "H"), ("T", 6, 8, "H"), ("E", 8, 8, "H"))
    assert extract_word(board, 7, 9, "H") == "CAT"
    assert extract_word(board, 7, 8, "V") == "TAE"
    assert extract_word(board, 6, 8, "H") == "T"
    assert extract_word(board, 0, 0, "H") == ""
    cells = word_cells(board, 7, 8, "H")
    assert [(r, c) for r, c, _cell in cells] == [(7, 7), (7, 8), (7, 9)]
    assert cells[1][2].is_blank


def test_first_move_through_center():
    board = Board()
    move = try_place_word("CAT", 7, 7, "H", board, Rack.from_string("CAT??"), Dictionary(["CAT"]), True)
    assert move is not None
    assert (move.word, move.row, move.col, move.direction) == ("CAT", 7, 7, "H")
    assert [(t.row, t.col, t.letter, t.is_blank) for t in move.tiles] == [
        (7, 7, "C", False), (7, 8, "A", False), (7, 9, "T", False),
    ]
    assert board.is_board_empty()


def test_first_move_must_cover_center():
    rack = Rack.from_string("CAT")
    dictionary = Dictionary(["CAT"])
    # Anchor far from the centre: no offset can reach (7,7)
    assert try_place_word("CAT", 0, 0, "H", Board(), rack, dictionary, True) is None
    assert fit_word("CAT", 7, 8, "H", Board(), rack, True) is None


def test_first_move_needs_two_tiles(make_board):
    board = make_board(("A", 7, 7, "H"))
    assert fit_word("AT", 7, 7, "H", board, Rack.from_string("T"), True) is None
    assert fit_word("AT", 7, 7, "H", board, Rack.from_string("T"), False) is not None
    assert try_place_word("A", 7, 7, "H", Board(), Rack.from_string("A"), Dictionary(["A"]), True) is None


def test_blank_used_only_when_letter_missing():
    move = try_place_word("CAT", 7, 7, "H", Board(), Rack.from_string("C?T"), Dictionary(["CAT"]), True)
    assert [t.is_blank for t in move.tiles] == [False, True, False]
    assert move.rack_tokens == ["C", "?", "T"]


def test_word_ending_at_board_edge(make_board):
    assert fit_word("CAT", 7, 13, "H", Board(), Rack.from_string("CAT"), False) is None
    board = make_board(("AT", 7, 13, "H"))
    move = try_place_word("CAT", 7, 12, "H", board, Rack.from_string("C"), Dictionary(["CAT", "AT"]), False)
    assert move is not None
    assert (move.row, move.col) == (7, 12)
    assert [(t.row, t.col) for t in move.tiles] == [(7, 12)]


def test_hook_reuses_existing_tiles(cat_board):
    move = try_place_word("CATS", 7, 10, "H", cat_board, Rack.from_string("S"), Dictionary(["CAT", "CATS"]), False)
    assert move is not None
    assert (move.word, move.row, move.col) == ("CATS", 7, 7)
    assert [(t.row, t.col, t.letter) for t in move.tiles] == [(7, 10, "S")]


def test_occupied_cell_must_match(cat_board):
    # DOGS either clashes with CAT or runs on from it as CATDOGS
    assert try_place_word("DOGS", 7, 10, "H", cat_board, Rack.from_string("DOGS"), Dictionary(["DOGS"]), False) is None


def test_connectivity_required(cat_board):
    dictionary = Dictionary(["CAT", "DOG"])
    assert try_place_word("DOG", 0, 0, "H", cat_board, Rack.from_string("DOG"), dictionary, False) is None


def test_cross_words_validated():
    board = Board.from_string(BOARD_WITH_HE)
    rack = Rack.from_string("AT")

    move = try_place_word("AT", 8, 7, "H", board, rack, Dictionary(["HE", "AT", "HA", "ET"]), False)
    assert move is not None
    assert move.cross_words == ["HA", "ET"]
    assert move.words_formed == ["AT", "HA", "ET"]

    # Without ET the parallel play is rejected as a whole
    assert try_place_word("AT", 8, 7, "H", board, rack, Dictionary(["HE", "AT", "HA"]), False) is None


def test_extraction_round_trip_after_commit(cat_board):
    move = try_place_word("CATS", 7, 10, "H", cat_board, Rack.from_string("S"), Dictionary(["CAT", "CATS"]), False)
    before = cat_board.count_tiles()
    cat_board.place(move.tiles)
    assert cat_board.count_tiles() == before + len(move.tiles)
    for t in move.tiles:
        assert extract_word(cat_board, t.row, t.col, move.direction) == move.word


# explicit submissions

def test_submission_accepted():
    board = Board.from_string(BOARD_WITH_HE)
    move = validate_submission(
        board,
        [PlacedTile(8, 8, "T"), PlacedTile(8, 7, "A")],
        Dictionary(["HE", "AT", "HA", "ET"]),
        is_first_move=False,
    )
    assert move.words_formed == ["AT", "HA", "ET"]
    assert [(t.row, t.col) for t in move.tiles] == [(8, 7), (8, 8)]


def test_single_tile_submission_picks_its_line(cat_board):
    move = validate_submission(cat_board, [PlacedTile(7, 10, "S")], Dictionary(["CAT", "CATS"]), False)
    assert (move.word, move.direction) == ("CATS", "H")


@pytest.mark.parametrize("tiles, first, reason", [
    ([], True, "No tiles"),
    ([PlacedTile(0, 0, "A"), PlacedTile(0, 1, "T")], True, "center"),
    ([PlacedTile(7, 7, "A")], True, "two tiles"),
    ([PlacedTile(7, 7, "A"), PlacedTile(8, 8, "T")], True, "single row or column"),
    ([PlacedTile(7, 7, "A"), PlacedTile(7, 9, "T")], True, "contiguous"),
    ([PlacedTile(7, 7, "A"), PlacedTile(7, 7, "T")], True, "Two tiles"),
    ([PlacedTile(7, 15, "A")], True, "outside"),
    ([PlacedTile(7, 7, "T"), PlacedTile(7, 8, "A")], True, "'TA'"),
])
def test_submission_rejected_on_empty_board(tiles, first, reason):
    with pytest.raises(InvalidPlacementError, match=reason):
        validate_submission(Board(), tiles, Dictionary(["AT"]), first)


def test_submission_rejected_when_disconnected(cat_board):
    with pytest.raises(InvalidPlacementError, match="connect"):
        validate_submission(cat_board, [PlacedTile(0, 0, "A"), PlacedTile(0, 1, "T")], Dictionary(["AT"]), False)


def test_submission_rejected_on_occupied_cell(cat_board):
    with pytest.raises(InvalidPlacementError, match="occupied"):
        validate_submission(cat_board, [PlacedTile(7, 7, "A")], Dictionary(["AT"]), False)
