"""Scoring engine.

Letter and word multipliers apply only to squares covered by tiles placed
this turn; tiles already on the board count at face value (0 for blanks).
"""

from __future__ import annotations

from scrabblebot.board import Board, BonusGrid, Cell
from scrabblebot.constants import BINGO_BONUS, RACK_SIZE, perpendicular
from scrabblebot.move import Move
from scrabblebot.placement import word_cells


def score_word(
    cells: list[tuple[int, int, Cell]],
    new_positions: set[tuple[int, int]],
    bonus_grid: BonusGrid,
) -> int:
    """Score one word from its per-cell decomposition."""
    total = 0
    word_mult = 1
    for r, c, cell in cells:
        value = cell.points
        if (r, c) in new_positions:
            bonus = bonus_grid.at(r, c)
            value *= bonus.letter_multiplier
            word_mult *= bonus.word_multiplier
        total += value
    return total * word_mult


def score_move(board: Board, move: Move) -> int:
    """Total score of *move* played on the pre-move *board*.

    Main word plus every perpendicular word of length > 1 through a new
    tile, plus the bingo bonus when all seven rack tiles are placed.
    """
    if not move.tiles:
        return 0
    scratch = board.copy()
    scratch.place(move.tiles)
    new_positions = {(t.row, t.col) for t in move.tiles}
    grid = board.bonus_grid

    total = 0
    first = move.tiles[0]
    main = word_cells(scratch, first.row, first.col, move.direction)
    if len(main) > 1:
        total += score_word(main, new_positions, grid)

    cross_dir = perpendicular(move.direction)
    for t in move.tiles:
        cells = word_cells(scratch, t.row, t.col, cross_dir)
        if len(cells) > 1:
            total += score_word(cells, new_positions, grid)

    if len(move.tiles) == RACK_SIZE:
        total += BINGO_BONUS
    return total
