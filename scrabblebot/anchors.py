"""Anchor discovery and priority scoring.

An anchor is an empty square orthogonally next to a tile, or the centre
square before anything has been played. Priority favours anchors that sit
on, or open access to, still-empty premium squares.
"""

from __future__ import annotations

import random
from typing import NamedTuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from scrabblebot.board import Board, Bonus
from scrabblebot.constants import BOARD_SIZE, CENTER, MAX_REACH

# ── Priority weights ─────────────────────────────────────────────────────
#
# Own-square weight for the anchor itself, and the weight a nearby empty
# premium square contributes before distance decay.

_OWN_WEIGHT: dict[Bonus, float] = {
    Bonus.TRIPLE_WORD: 50.0,
    Bonus.DOUBLE_WORD: 25.0,
    Bonus.TRIPLE_LETTER: 15.0,
    Bonus.DOUBLE_LETTER: 8.0,
}

_NEARBY_WEIGHT: dict[Bonus, float] = {
    Bonus.TRIPLE_WORD: 10.0,
    Bonus.DOUBLE_WORD: 5.0,
    Bonus.TRIPLE_LETTER: 3.0,
}

# Decay over Manhattan distance inside the ±MAX_REACH window; zero from 8 on
_SPAN = 2 * MAX_REACH + 1
_offsets = np.abs(np.arange(_SPAN) - MAX_REACH)
_DECAY = np.maximum(0, (MAX_REACH + 1) - (_offsets[:, None] + _offsets[None, :])) / (MAX_REACH + 1)
# A square only counts once, through its own weight
_DECAY[MAX_REACH, MAX_REACH] = 0.0


class AnchorPoint(NamedTuple):
    row: int
    col: int
    priority: float = 0.0


def priority_map(board: Board) -> np.ndarray:
    """Priority of every square as a BOARD_SIZE x BOARD_SIZE float array."""
    empty = np.array([[cell.is_empty for cell in row] for row in board.cells], dtype=bool)
    own = np.zeros((BOARD_SIZE, BOARD_SIZE))
    nearby = np.zeros((BOARD_SIZE, BOARD_SIZE))
    for r, c, bonus in board.bonus_grid.premium_cells():
        own[r, c] = _OWN_WEIGHT.get(bonus, 0.0)
        nearby[r, c] = _NEARBY_WEIGHT.get(bonus, 0.0)

    # Occupied premium squares are spent
    nearby = np.where(empty, nearby, 0.0)
    windows = sliding_window_view(np.pad(nearby, MAX_REACH), (_SPAN, _SPAN))
    reach = np.einsum("ijkl,kl->ij", windows, _DECAY)
    return own + reach


def find_anchors(
    board: Board,
    is_first_move: bool,
    prioritize: bool = False,
    rng: random.Random | None = None,
) -> list[AnchorPoint]:
    """Anchors for this turn.

    With *prioritize* the list is sorted by descending priority (row-major
    among equals). Otherwise it is row-major, shuffled when *rng* is given.
    """
    if is_first_move:
        cells = [(CENTER, CENTER)]
    else:
        cells = [
            (r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if board.cells[r][c].is_empty and board.has_occupied_neighbor(r, c)
        ]

    if prioritize:
        pmap = priority_map(board)
        anchors = [AnchorPoint(r, c, float(pmap[r, c])) for r, c in cells]
        anchors.sort(key=lambda a: a.priority, reverse=True)
        return anchors

    anchors = [AnchorPoint(r, c) for r, c in cells]
    if rng is not None:
        rng.shuffle(anchors)
    return anchors
