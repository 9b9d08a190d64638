import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from scrabblebot.board import Board
from scrabblebot.constants import step
from scrabblebot.move import PlacedTile


def place_word(board: Board, word: str, row: int, col: int, direction: str = "H") -> Board:
    """Put *word* on the board; lowercase letters go down as blanks."""
    dr, dc = step(direction)
    board.place(
        PlacedTile(row + i * dr, col + i * dc, ch.upper(), ch.islower())
        for i, ch in enumerate(word)
    )
    return board


@pytest.fixture
def make_board():
    def _make(*words):
        board = Board()
        for word, row, col, direction in words:
            place_word(board, word, row, col, direction)
        return board
    return _make


@pytest.fixture
def cat_board(make_board):
    """CAT across row 7, columns 7-9."""
    return make_board(("CAT", 7, 7, "H"))
