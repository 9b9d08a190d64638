"""Difficulty tiers.

Every tier shares placement validation and scoring; a ``Strategy`` only
decides which words to try, at which anchors, for how long, and how to rank
what was found.
"""

from __future__ import annotations

import random

from scrabblebot.anchors import AnchorPoint, find_anchors
from scrabblebot.board import Board
from scrabblebot.dictionary import Dictionary
from scrabblebot.evaluation import strategic_adjustment
from scrabblebot.move import Move
from scrabblebot.rack import Rack
from scrabblebot.timing import Deadline
from scrabblebot.words import (
    EASY_WORDS,
    MEDIUM_WORDS,
    curated_words,
    dictionary_words,
    hook_words,
    rank_candidates,
)


class Strategy:
    """Base tier: defaults shared by all four configurations."""

    name = "base"
    time_budget_ms = 15_000
    max_candidates: int | None = None  # placements collected before ranking
    max_anchors: int | None = None
    prioritize_anchors = False
    shuffle_anchors = False
    uses_evaluator = False

    def anchors(self, board: Board, is_first_move: bool, rng: random.Random) -> list[AnchorPoint]:
        anchors = find_anchors(
            board,
            is_first_move,
            prioritize=self.prioritize_anchors,
            rng=rng if self.shuffle_anchors else None,
        )
        if self.max_anchors is not None:
            anchors = anchors[: self.max_anchors]
        return anchors

    def generate_candidates(
        self,
        rack: Rack,
        board: Board,
        dictionary: Dictionary,
        deadline: Deadline,
        rng: random.Random,
        poll_interval: int = 250,
    ) -> list[str]:
        raise NotImplementedError

    def evaluate(self, move: Move, board: Board) -> None:
        """Attach the strategic value to an already-scored move."""
        if self.uses_evaluator:
            move.strategic_value = strategic_adjustment(move, board)

    def ranking_key(self, move: Move) -> float:
        return move.score

    def rank(self, moves: list[Move]) -> list[Move]:
        """Best first; ties by raw score, then discovery order."""
        return sorted(moves, key=lambda m: (self.ranking_key(m), m.score), reverse=True)


class EasyStrategy(Strategy):
    """Everyday words only, random anchors, first few placements."""

    name = "easy"
    time_budget_ms = 15_000
    max_candidates = 3
    max_anchors = 30
    shuffle_anchors = True

    def generate_candidates(self, rack, board, dictionary, deadline, rng, poll_interval=250):
        words = curated_words(rack, dictionary, EASY_WORDS)
        rng.shuffle(words)
        return words


class MediumStrategy(Strategy):
    """Larger curated list, longer words tried first; rewards tile turnover."""

    name = "medium"
    time_budget_ms = 15_000
    max_candidates = 8
    max_anchors = 60
    shuffle_anchors = True

    def generate_candidates(self, rack, board, dictionary, deadline, rng, poll_interval=250):
        words = curated_words(rack, dictionary, MEDIUM_WORDS)
        long_words = [w for w in words if len(w) > 5]
        mid_words = [w for w in words if 3 < len(w) <= 5]
        short_words = [w for w in words if len(w) <= 3]
        for group in (long_words, mid_words, short_words):
            rng.shuffle(group)
        return long_words + mid_words + short_words

    def ranking_key(self, move: Move) -> float:
        return move.score + 2 * len(move.tiles)


class HardStrategy(Strategy):
    """Full dictionary scan, most promising words first."""

    name = "hard"
    time_budget_ms = 20_000
    max_candidates = 30
    word_cap = 100

    def generate_candidates(self, rack, board, dictionary, deadline, rng, poll_interval=250):
        words = dictionary_words(rack.counts, dictionary, deadline, poll_interval)
        return rank_candidates(words, self.word_cap)


class ExpertStrategy(Strategy):
    """Dictionary scan plus hooks, prioritized anchors, strategic ranking."""

    name = "expert"
    time_budget_ms = 25_000
    max_candidates = None
    prioritize_anchors = True
    uses_evaluator = True
    word_cap = 200

    def generate_candidates(self, rack, board, dictionary, deadline, rng, poll_interval=250):
        words = dictionary_words(rack.counts, dictionary, deadline, poll_interval)
        for hooked in hook_words(rack, board, dictionary):
            if hooked not in words:
                words.append(hooked)
        return rank_candidates(words, self.word_cap)

    def ranking_key(self, move: Move) -> float:
        return move.equity


STRATEGIES: dict[str, type[Strategy]] = {
    cls.name: cls for cls in (EasyStrategy, MediumStrategy, HardStrategy, ExpertStrategy)
}

DIFFICULTIES = tuple(STRATEGIES)


def get_strategy(difficulty: str) -> Strategy:
    try:
        return STRATEGIES[difficulty.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown difficulty {difficulty!r}; choose from {', '.join(DIFFICULTIES)}"
        ) from None
