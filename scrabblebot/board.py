"""15×15 game board, its cells and the bonus square grid."""

from __future__ import annotations

import enum
from typing import Iterable

from scrabblebot.constants import BOARD_SIZE, BONUS_LAYOUT, CENTER, TILE_VALUES
from scrabblebot.errors import InvalidPlacementError, OutOfBoundsError


class Bonus(enum.Enum):
    """Bonus square kinds, valued by their layout code."""

    NORMAL = "NO"
    DOUBLE_LETTER = "DL"
    TRIPLE_LETTER = "TL"
    DOUBLE_WORD = "DW"
    TRIPLE_WORD = "TW"
    START = "ST"

    @property
    def letter_multiplier(self) -> int:
        if self is Bonus.DOUBLE_LETTER:
            return 2
        if self is Bonus.TRIPLE_LETTER:
            return 3
        return 1

    @property
    def word_multiplier(self) -> int:
        # The start square doubles the word like a DW
        if self is Bonus.DOUBLE_WORD or self is Bonus.START:
            return 2
        if self is Bonus.TRIPLE_WORD:
            return 3
        return 1

    @property
    def is_premium(self) -> bool:
        return self is not Bonus.NORMAL


class BonusGrid:
    """Read-only bonus lookup with the same dimensions as the board."""

    __slots__ = ("_grid",)

    def __init__(self, layout: list[list[str]] | None = None):
        layout = layout or BONUS_LAYOUT
        if len(layout) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in layout):
            raise ValueError(f"Bonus layout must be {BOARD_SIZE}x{BOARD_SIZE}")
        self._grid: tuple[tuple[Bonus, ...], ...] = tuple(
            tuple(Bonus(code) for code in row) for row in layout
        )

    def at(self, row: int, col: int) -> Bonus:
        if not in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        return self._grid[row][col]

    def premium_cells(self) -> Iterable[tuple[int, int, Bonus]]:
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                bonus = self._grid[r][c]
                if bonus.is_premium:
                    yield r, c, bonus


STANDARD_BONUS_GRID = BonusGrid()


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Cell:
    """One board square: empty, a lettered tile, or a blank standing in for a letter.

    Cells are immutable; use the module-level ``EMPTY`` and the
    :meth:`tile` / :meth:`blank` constructors.
    """

    EMPTY_KIND = "empty"
    LETTER_KIND = "letter"
    BLANK_KIND = "blank"

    __slots__ = ("kind", "letter")

    def __init__(self, kind: str, letter: str | None = None):
        self.kind = kind
        self.letter = letter

    @classmethod
    def tile(cls, letter: str) -> Cell:
        return cls(cls.LETTER_KIND, letter.upper())

    @classmethod
    def blank(cls, letter: str) -> Cell:
        return cls(cls.BLANK_KIND, letter.upper())

    @classmethod
    def from_char(cls, ch: str | None) -> Cell:
        """Parse ``'.'``/None (empty), ``'A'``-``'Z'`` (tile) or ``'a'``-``'z'`` (blank)."""
        if ch is None or ch == ".":
            return EMPTY
        if "A" <= ch <= "Z":
            return cls.tile(ch)
        if "a" <= ch <= "z":
            return cls.blank(ch)
        raise ValueError(f"Invalid board character: {ch!r}")

    @property
    def is_empty(self) -> bool:
        return self.kind == Cell.EMPTY_KIND

    @property
    def is_blank(self) -> bool:
        return self.kind == Cell.BLANK_KIND

    @property
    def points(self) -> int:
        if self.kind == Cell.LETTER_KIND:
            return TILE_VALUES.get(self.letter, 0)
        # blanks and empty squares are worth nothing
        return 0

    def to_char(self) -> str:
        if self.kind == Cell.LETTER_KIND:
            return self.letter
        if self.kind == Cell.BLANK_KIND:
            return self.letter.lower()
        return "."

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.kind == other.kind and self.letter == other.letter

    def __hash__(self) -> int:
        return hash((self.kind, self.letter))

    def __repr__(self) -> str:
        return f"Cell({self.to_char()!r})"


EMPTY = Cell(Cell.EMPTY_KIND)


class Board:
    """15x15 game board of :class:`Cell` values plus its bonus grid."""

    def __init__(self, bonus_grid: BonusGrid | None = None):
        self.cells: list[list[Cell]] = [
            [EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.bonus_grid = bonus_grid or STANDARD_BONUS_GRID

    @classmethod
    def from_string(cls, multiline: str, bonus_grid: BonusGrid | None = None) -> Board:
        """Build a board from 15 lines of 15 chars: '.' empty, A-Z tile, a-z blank."""
        rows = [line.strip() for line in multiline.strip().splitlines() if line.strip()]
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError(f"Board string must be {BOARD_SIZE} lines of {BOARD_SIZE} characters")
        board = cls(bonus_grid)
        for r, line in enumerate(rows):
            board.cells[r] = [Cell.from_char(ch) for ch in line]
        return board

    def to_string(self) -> str:
        return "\n".join("".join(cell.to_char() for cell in row) for row in self.cells)

    def cell_at(self, row: int, col: int) -> Cell:
        if not in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        return self.cells[row][col]

    def letter_at(self, row: int, col: int) -> str | None:
        """Represented letter at (row, col); None when empty or off the board."""
        if in_bounds(row, col):
            return self.cells[row][col].letter
        return None

    def bonus_at(self, row: int, col: int) -> Bonus:
        return self.bonus_grid.at(row, col)

    def is_empty(self, row: int, col: int) -> bool:
        """True if no tile at (row, col)."""
        return self.cell_at(row, col).is_empty

    def is_occupied(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board and holds a tile."""
        return in_bounds(row, col) and not self.cells[row][col].is_empty

    def has_occupied_neighbor(self, row: int, col: int) -> bool:
        return any(
            self.is_occupied(row + dr, col + dc)
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
        )

    def is_board_empty(self) -> bool:
        """True if no tiles on the board."""
        return all(cell.is_empty for row in self.cells for cell in row)

    def count_tiles(self) -> int:
        """Number of tiles on the board."""
        return sum(1 for row in self.cells for cell in row if not cell.is_empty)

    def occupied(self) -> Iterable[tuple[int, int, Cell]]:
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                cell = self.cells[r][c]
                if not cell.is_empty:
                    yield r, c, cell

    def place(self, tiles) -> None:
        """Commit newly placed tiles (anything with row/col/letter/is_blank).

        Placement is all-or-nothing and never overwrites an occupied cell.
        """
        tiles = list(tiles)
        for t in tiles:
            if self.cell_at(t.row, t.col).is_empty:
                continue
            raise InvalidPlacementError(f"({t.row},{t.col}) is already occupied")
        for t in tiles:
            self.cells[t.row][t.col] = Cell.blank(t.letter) if t.is_blank else Cell.tile(t.letter)

    def copy(self) -> Board:
        """Copy of the grid; cells are immutable so rows can be sliced."""
        b = Board(self.bonus_grid)
        for r in range(BOARD_SIZE):
            b.cells[r] = self.cells[r][:]
        return b

    @property
    def center(self) -> tuple[int, int]:
        return CENTER, CENTER

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __str__(self) -> str:
        header = "    " + " ".join(f"{c:>2}" for c in range(BOARD_SIZE))
        sep = "   " + "---" * BOARD_SIZE
        lines = [header, sep]
        for r in range(BOARD_SIZE):
            parts = [f"{r:>2} |"]
            for c in range(BOARD_SIZE):
                cell = self.cells[r][c]
                if not cell.is_empty:
                    parts.append(f" {cell.to_char()} ")
                else:
                    bonus = self.bonus_grid.at(r, c)
                    if bonus is Bonus.NORMAL:
                        parts.append(" . ")
                    elif bonus is Bonus.START:
                        parts.append(" * ")
                    else:
                        parts.append(f"{bonus.value:>3}")
            lines.append("".join(parts))
        return "\n".join(lines)
