"""Strategic evaluation for the expert tier.

Raw score says how good a move is now; the adjustment here estimates what
it does to the rest of the game. It is added to the raw score to rank
candidates and never changes the score actually awarded.

The evaluation considers:
  1. Rack turnover            (more tiles played = fresher draw)
  2. Bingo bonus              (on top of the scored +50)
  3. Premium-square exposure  (empty DW/TW squares opened next to new tiles)
  4. Premium-square denial    (DW/TW squares the move covers itself)
  5. Keeper tiles             (spending an S or a blank on a cheap move)
"""

from __future__ import annotations

from scrabblebot.board import Board, Bonus, in_bounds
from scrabblebot.constants import BLANK
from scrabblebot.move import Move

# ── 1. Rack turnover ─────────────────────────────────────────────────────

_PER_TILE = 2.0

# ── 2. Bingo ─────────────────────────────────────────────────────────────

_BINGO_EXTRA = 25.0

# ── 3. Exposure ──────────────────────────────────────────────────────────
#
# Penalty for each distinct empty premium square in the 8-neighbourhood of
# a new tile that the move leaves open for the opponent.

_EXPOSURE_PENALTY: dict[Bonus, float] = {
    Bonus.TRIPLE_WORD: 5.0,
    Bonus.DOUBLE_WORD: 2.0,
}

_NEIGHBOURHOOD = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def _exposure_penalty(move: Move, board: Board) -> float:
    covered = {(t.row, t.col) for t in move.tiles}
    exposed: set[tuple[int, int]] = set()
    for t in move.tiles:
        for dr, dc in _NEIGHBOURHOOD:
            r, c = t.row + dr, t.col + dc
            if not in_bounds(r, c) or (r, c) in covered or board.is_occupied(r, c):
                continue
            if board.bonus_at(r, c) in _EXPOSURE_PENALTY:
                exposed.add((r, c))
    return -sum(_EXPOSURE_PENALTY[board.bonus_at(r, c)] for r, c in exposed)


# ── 4. Denial ────────────────────────────────────────────────────────────

_DENIAL_BONUS: dict[Bonus, float] = {
    Bonus.TRIPLE_WORD: 10.0,
    Bonus.DOUBLE_WORD: 4.0,
}


def _denial_bonus(move: Move, board: Board) -> float:
    return sum(_DENIAL_BONUS.get(board.bonus_at(t.row, t.col), 0.0) for t in move.tiles)


# ── 5. Keeper tiles ──────────────────────────────────────────────────────
#
# Waived once the move scores enough to justify spending them.

_KEEPER_PENALTY: dict[str, float] = {"S": 3.0, BLANK: 6.0}
_KEEPER_WAIVER_SCORE = 30


def _keeper_penalty(move: Move) -> float:
    if move.score >= _KEEPER_WAIVER_SCORE:
        return 0.0
    return -sum(_KEEPER_PENALTY.get(token, 0.0) for token in move.rack_tokens)


# ── Public API ───────────────────────────────────────────────────────────

def strategic_adjustment(move: Move, board: Board) -> float:
    """Return the additive strategic value of *move* on the pre-move *board*.

    ``move.score`` must already hold the raw score.
    """
    value = _PER_TILE * len(move.tiles)
    if move.is_bingo:
        value += _BINGO_EXTRA
    value += _exposure_penalty(move, board)
    value += _denial_bonus(move, board)
    value += _keeper_penalty(move)
    return round(value, 1)
