"""Move representation."""

from __future__ import annotations

from typing import NamedTuple

from scrabblebot.constants import BLANK, RACK_SIZE


class PlacedTile(NamedTuple):
    """A tile newly put down this turn. ``letter`` is the represented letter."""

    row: int
    col: int
    letter: str
    is_blank: bool = False

    @property
    def rack_token(self) -> str:
        """Token this tile consumes from the rack."""
        return BLANK if self.is_blank else self.letter


class Move:
    """A candidate or committed placement.

    ``tiles`` holds exactly the newly placed tiles, never cells that were
    occupied before the turn. ``row``/``col`` is the first cell of the main
    word, which may start on an existing tile.
    """

    __slots__ = (
        "word", "row", "col", "direction", "tiles",
        "score", "strategic_value", "cross_words",
    )

    def __init__(
        self,
        word: str,
        row: int,
        col: int,
        direction: str,
        tiles: list[PlacedTile],
        score: int = 0,
        strategic_value: float = 0.0,
        cross_words: list[str] | None = None,
    ):
        self.word = word
        self.row = row
        self.col = col
        self.direction = direction  # 'H' or 'V'
        self.tiles = tiles
        self.score = score
        self.strategic_value = strategic_value
        self.cross_words = cross_words or []

    @property
    def is_bingo(self) -> bool:
        return len(self.tiles) == RACK_SIZE

    @property
    def equity(self) -> float:
        """Raw score plus the strategic adjustment."""
        return self.score + self.strategic_value

    @property
    def words_formed(self) -> list[str]:
        """Main word (when longer than one letter) followed by the cross words."""
        main = [self.word] if len(self.word) > 1 else []
        return main + self.cross_words

    @property
    def rack_tokens(self) -> list[str]:
        return [t.rack_token for t in self.tiles]

    def key(self) -> tuple[str, int, int, str]:
        """Identity for de-duplication: same word, start and direction."""
        return self.word, self.row, self.col, self.direction

    def __repr__(self) -> str:
        bingo = " +BINGO!" if self.is_bingo else ""
        arrow = "→" if self.direction == "H" else "↓"
        eq = f"  equity={self.equity:+.1f}" if self.strategic_value else ""
        return f"{self.word} at ({self.row},{self.col}) {arrow} = {self.score} pts{bingo}{eq}"
