"""Word extraction and placement validation.

The validator never mutates the board it is given: cross-word checks run on
a scratch copy with the new tiles applied, discarded afterwards.
"""

from __future__ import annotations

import logging

from scrabblebot.board import Board, Cell, in_bounds
from scrabblebot.constants import BLANK, CENTER, perpendicular, step
from scrabblebot.dictionary import Dictionary
from scrabblebot.errors import InvalidPlacementError
from scrabblebot.move import Move, PlacedTile
from scrabblebot.rack import Rack

log = logging.getLogger("scrabblebot.placement")


# word extraction

def word_cells(board: Board, row: int, col: int, direction: str) -> list[tuple[int, int, Cell]]:
    """Cells of the contiguous word through (row, col) along *direction*.

    Walks back while the previous cell is occupied, then reads forward while
    cells remain occupied. Empty list when (row, col) itself is empty.
    """
    if not board.is_occupied(row, col):
        return []
    dr, dc = step(direction)
    r, c = row, col
    while board.is_occupied(r - dr, c - dc):
        r -= dr
        c -= dc
    cells: list[tuple[int, int, Cell]] = []
    while board.is_occupied(r, c):
        cells.append((r, c, board.cells[r][c]))
        r += dr
        c += dc
    return cells


def extract_word(board: Board, row: int, col: int, direction: str) -> str:
    """Word through (row, col), blanks read as the letter they represent."""
    return "".join(cell.letter for _r, _c, cell in word_cells(board, row, col, direction))


# candidate placement

def fit_word(
    word: str,
    row: int,
    col: int,
    direction: str,
    board: Board,
    rack: Rack,
    is_first_move: bool,
) -> list[PlacedTile] | None:
    """New tiles needed to lay *word* from (row, col), or None if it cannot go there.

    Checks bounds, agreement with occupied cells, rack supply (exact letter
    before blank), at least one new tile, the first-move rule and
    connectivity. Words formed are not checked here.
    """
    dr, dc = step(direction)
    n = len(word)
    if not (in_bounds(row, col) and in_bounds(row + (n - 1) * dr, col + (n - 1) * dc)):
        return None

    remaining = rack.counts.copy()
    tiles: list[PlacedTile] = []
    reused = False
    covers_center = False
    for i, ch in enumerate(word):
        r = row + i * dr
        c = col + i * dc
        cell = board.cells[r][c]
        if not cell.is_empty:
            if cell.letter != ch:
                return None
            reused = True
        elif remaining[ch] > 0:
            remaining[ch] -= 1
            tiles.append(PlacedTile(r, c, ch, False))
        elif remaining[BLANK] > 0:
            remaining[BLANK] -= 1
            tiles.append(PlacedTile(r, c, ch, True))
        else:
            return None
        if r == CENTER and c == CENTER:
            covers_center = True

    if not tiles:
        return None
    if is_first_move:
        if not covers_center or len(tiles) < 2:
            return None
    elif not reused and not any(board.has_occupied_neighbor(t.row, t.col) for t in tiles):
        return None
    return tiles


def words_formed(
    board: Board,
    tiles: list[PlacedTile],
    direction: str,
) -> tuple[list[tuple[int, int, Cell]], list[str]]:
    """Main-word cells and perpendicular words (length > 1) formed by *tiles*."""
    scratch = board.copy()
    scratch.place(tiles)
    first = tiles[0]
    main = word_cells(scratch, first.row, first.col, direction)
    cross_dir = perpendicular(direction)
    cross_words: list[str] = []
    for t in tiles:
        cw = extract_word(scratch, t.row, t.col, cross_dir)
        if len(cw) > 1:
            cross_words.append(cw)
    return main, cross_words


def try_place_word(
    word: str,
    anchor_row: int,
    anchor_col: int,
    direction: str,
    board: Board,
    rack: Rack,
    dictionary: Dictionary,
    is_first_move: bool,
) -> Move | None:
    """First placement of *word* through the anchor that passes every rule.

    Offsets are tried so the anchor sits at each letter position in turn.
    The returned Move is unscored.
    """
    word = word.upper()
    if len(word) < 2:
        return None
    dr, dc = step(direction)
    for offset in range(len(word)):
        row = anchor_row - offset * dr
        col = anchor_col - offset * dc
        tiles = fit_word(word, row, col, direction, board, rack, is_first_move)
        if tiles is None:
            continue
        main, cross_words = words_formed(board, tiles, direction)
        main_word = "".join(cell.letter for _r, _c, cell in main)
        if main_word not in dictionary:
            continue
        if any(cw not in dictionary for cw in cross_words):
            continue
        start_r, start_c, _cell = main[0]
        return Move(main_word, start_r, start_c, direction, tiles, cross_words=cross_words)
    return None


# explicit submissions

def validate_submission(
    board: Board,
    tiles: list[PlacedTile],
    dictionary: Dictionary,
    is_first_move: bool,
) -> Move:
    """Check a hand-placed set of tiles and return the (unscored) Move it makes.

    Raises InvalidPlacementError naming the first rule broken.
    """
    if not tiles:
        raise InvalidPlacementError("No tiles placed")
    seen: set[tuple[int, int]] = set()
    for t in tiles:
        if not in_bounds(t.row, t.col):
            raise InvalidPlacementError(f"({t.row},{t.col}) is outside the board")
        if board.is_occupied(t.row, t.col):
            raise InvalidPlacementError(f"({t.row},{t.col}) is already occupied")
        if (t.row, t.col) in seen:
            raise InvalidPlacementError(f"Two tiles placed on ({t.row},{t.col})")
        seen.add((t.row, t.col))

    rows = {t.row for t in tiles}
    cols = {t.col for t in tiles}
    if len(rows) > 1 and len(cols) > 1:
        raise InvalidPlacementError("Tiles must be placed in a single row or column")

    if len(tiles) > 1:
        direction = "H" if len(rows) == 1 else "V"
    else:
        # A lone tile plays along whichever line it extends
        t = tiles[0]
        horizontal = board.is_occupied(t.row, t.col - 1) or board.is_occupied(t.row, t.col + 1)
        direction = "H" if horizontal else "V"

    dr, dc = step(direction)
    ordered = sorted(tiles, key=lambda t: (t.row, t.col))
    first, last = ordered[0], ordered[-1]
    r, c = first.row, first.col
    reused = False
    while (r, c) != (last.row, last.col):
        r += dr
        c += dc
        if (r, c) in seen:
            continue
        if not board.is_occupied(r, c):
            raise InvalidPlacementError("Tiles must form one contiguous line")
        reused = True

    if is_first_move:
        if (CENTER, CENTER) not in seen:
            raise InvalidPlacementError("The first word must cover the center square")
        if len(tiles) < 2:
            raise InvalidPlacementError("The first word must use at least two tiles")
    elif not reused and not any(board.has_occupied_neighbor(t.row, t.col) for t in tiles):
        raise InvalidPlacementError("The word must connect to tiles already on the board")

    main, cross_words = words_formed(board, ordered, direction)
    main_word = "".join(cell.letter for _r, _c, cell in main)
    formed = ([main_word] if len(main_word) > 1 else []) + cross_words
    if not formed:
        raise InvalidPlacementError("A single letter is not a word")
    for w in formed:
        if w not in dictionary:
            raise InvalidPlacementError(f"{w!r} is not in the dictionary")

    log.debug("Submission accepted: %s", ", ".join(formed))
    start_r, start_c, _cell = main[0]
    return Move(main_word, start_r, start_c, direction, ordered, cross_words=cross_words)
