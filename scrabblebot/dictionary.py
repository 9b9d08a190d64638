"""Dictionary / word list with a trie-backed prefix set."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator

from scrabblebot.constants import BOARD_SIZE
from scrabblebot.errors import MalformedDictionaryError
from scrabblebot.trie import Trie

log = logging.getLogger("scrabblebot.dictionary")


def normalize_word(line: str) -> str | None:
    """Uppercased word from one word-list line; None for lines to skip."""
    word = line.strip().upper()
    if not word:
        return None
    if not word.isalpha() or not word.isascii():
        return None
    if len(word) > BOARD_SIZE:
        return None
    return word


class PrefixSet:
    """All prefixes of all dictionary words (the words themselves included)."""

    __slots__ = ("_trie",)

    def __init__(self, trie: Trie):
        self._trie = trie

    def __contains__(self, prefix: str) -> bool:
        return self._trie.is_prefix(prefix.upper())


class Dictionary:
    """Immutable word set with O(1) membership and a prefix set.

    The prefix trie and the longest-first scan order are built here, once,
    so searches only read from a Dictionary and never pay for either.

    ``validate=False`` is the degraded mode used when no word list could be
    loaded: every word is accepted, while enumeration still walks ``words``.
    """

    def __init__(self, words: Iterable[str] = (), validate: bool = True):
        normalized = (normalize_word(w) for w in words)
        self.words: frozenset[str] = frozenset(w for w in normalized if w)
        self.validate = validate
        self._by_length: list[str] = sorted(self.words, key=lambda w: (-len(w), w))
        self._prefixes = PrefixSet(Trie(self._by_length))
        log.debug("Built prefix trie over %d words", len(self.words))

    # loading

    @classmethod
    def from_file(cls, dict_path: str | os.PathLike) -> Dictionary:
        """Load a newline-delimited UTF-8 word list (case-insensitive).

        Blank lines are ignored; lines that are not a single alphabetic word
        are skipped and counted. Raises MalformedDictionaryError when the file
        cannot be read or yields no words.
        """
        words: list[str] = []
        skipped = 0
        try:
            with open(dict_path, "r", encoding="utf-8") as f:
                for line in f:
                    if not line.strip():
                        continue
                    word = normalize_word(line)
                    if word is None:
                        skipped += 1
                        continue
                    words.append(word)
        except (OSError, UnicodeDecodeError) as exc:
            raise MalformedDictionaryError(f"Cannot read word list {dict_path}: {exc}") from exc

        if not words:
            raise MalformedDictionaryError(f"Word list {dict_path} contains no usable words")
        if skipped:
            log.warning("Skipped %d malformed lines in %s", skipped, dict_path)

        dictionary = cls(words)
        log.info("Loaded %s words from %s", f"{len(dictionary):,}", dict_path)
        return dictionary

    @classmethod
    def permissive(cls, words: Iterable[str] = ()) -> Dictionary:
        """Degraded mode: word validation disabled."""
        log.warning("Word validation disabled -- any word will be accepted.")
        return cls(words, validate=False)

    # queries

    def is_valid(self, word: str) -> bool:
        if not self.validate:
            return True
        return word.upper() in self.words

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.by_length())

    @property
    def prefixes(self) -> PrefixSet:
        return self._prefixes

    def by_length(self) -> list[str]:
        """Words longest first, alphabetical within a length (deterministic scan order)."""
        return self._by_length
