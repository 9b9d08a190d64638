"""Exception types raised by the scrabblebot core.

Per-candidate failures during search (a word that does not fit, a bad cross
word) are ordinary control flow and never surface as exceptions. A search
that finds nothing returns ``None``; a search that runs out of time returns
the best move found so far.
"""

from __future__ import annotations


class ScrabbleBotError(Exception):
    """Base class for all scrabblebot errors."""


class OutOfBoundsError(ScrabbleBotError, IndexError):
    """A board coordinate outside ``[0, BOARD_SIZE)`` was accessed."""

    def __init__(self, row: int, col: int):
        super().__init__(f"({row},{col}) is outside the board")
        self.row = row
        self.col = col


class InvalidRackStateError(ScrabbleBotError, ValueError):
    """The rack holds too many tiles or an unrecognised token."""


class MalformedDictionaryError(ScrabbleBotError):
    """The word list could not be read or contained no usable words."""


class InvalidPlacementError(ScrabbleBotError, ValueError):
    """An explicit placement (submission or commit) breaks a placement rule."""
