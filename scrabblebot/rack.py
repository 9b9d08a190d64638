"""Rack snapshot and the exact formability rule."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from scrabblebot.constants import ALPHABET, BLANK, BLANK_ALIASES, RACK_SIZE
from scrabblebot.errors import InvalidRackStateError


def normalize_token(token: str) -> str:
    """Uppercase letter, or ``BLANK`` for any blank alias.

    Raises InvalidRackStateError for anything else.
    """
    if not isinstance(token, str) or len(token) != 1:
        raise InvalidRackStateError(f"Unrecognised rack token: {token!r}")
    if token in BLANK_ALIASES:
        return BLANK
    up = token.upper()
    if up not in ALPHABET:
        raise InvalidRackStateError(f"Unrecognised rack token: {token!r}")
    return up


class Rack:
    """Immutable multiset of up to seven tile tokens (``?`` is a blank)."""

    __slots__ = ("tiles", "counts")

    def __init__(self, tiles: Iterable[str] = (), capacity: int = RACK_SIZE):
        normalized = tuple(normalize_token(t) for t in tiles)
        if len(normalized) > capacity:
            raise InvalidRackStateError(
                f"Rack holds {len(normalized)} tiles, capacity is {capacity}"
            )
        self.tiles: tuple[str, ...] = normalized
        self.counts: Counter[str] = Counter(normalized)

    @classmethod
    def from_string(cls, s: str) -> Rack:
        """'CAT??' -> Rack(['C', 'A', 'T', '?', '?']). Whitespace is ignored."""
        return cls(ch for ch in s if not ch.isspace())

    @property
    def blanks(self) -> int:
        return self.counts[BLANK]

    @property
    def letters(self) -> list[str]:
        """Non-blank tokens."""
        return [t for t in self.tiles if t != BLANK]

    def can_form(self, word: str) -> bool:
        """True if *word* can be spelled from this rack alone.

        Each letter consumes one exact copy when available and a blank
        only when it is not; nothing is consumed twice.
        """
        return _deduct(self.counts, word) is not None

    def without(self, used: Iterable[str]) -> Rack:
        """Rack left after spending *used* tokens (``?`` for blanks)."""
        remaining = self.counts.copy()
        for t in used:
            t = normalize_token(t)
            if remaining[t] <= 0:
                raise InvalidRackStateError(f"Tile {t!r} is not on the rack")
            remaining[t] -= 1
        return Rack(remaining.elements())

    def extended(self, letters: Iterable[str]) -> Counter[str]:
        """Counts of this rack plus borrowed board *letters* (no capacity limit)."""
        counts = self.counts.copy()
        counts.update(ch.upper() for ch in letters)
        return counts

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self):
        return iter(self.tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rack):
            return NotImplemented
        return self.counts == other.counts

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.tiles)))

    def __str__(self) -> str:
        return "".join(self.tiles)

    def __repr__(self) -> str:
        return f"Rack({str(self)!r})"


def can_form_from_counts(counts: Counter[str], word: str) -> bool:
    return _deduct(counts, word) is not None


def _deduct(counts: Counter[str], word: str) -> Counter[str] | None:
    remaining = counts.copy()
    for ch in word.upper():
        if remaining[ch] > 0:
            remaining[ch] -= 1
        elif remaining[BLANK] > 0:
            remaining[BLANK] -= 1
        else:
            return None
    return remaining
