"""Move engine: tiered, time-boxed search for the best placement."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import Iterable

from scrabblebot.anchors import AnchorPoint
from scrabblebot.board import Board
from scrabblebot.constants import DIRECTIONS
from scrabblebot.dictionary import Dictionary
from scrabblebot.move import Move
from scrabblebot.placement import try_place_word
from scrabblebot.rack import Rack
from scrabblebot.scoring import score_move
from scrabblebot.tiers import Strategy, get_strategy
from scrabblebot.timing import Clock, Deadline
from scrabblebot.words import borrowed_letters, dictionary_words, rank_candidates

log = logging.getLogger("scrabblebot.search")


@dataclass
class EngineConfig:
    poll_interval: int = 250  # dictionary entries between deadline checks
    time_multiplier: float = 1.0  # applied to every budget, see timing.calibrate
    fallback_words_per_line: int = 20


class SearchState(enum.Enum):
    IDLE = "idle"
    ENUMERATING_ANCHORS = "enumerating_anchors"
    GENERATING_CANDIDATES = "generating_candidates"
    VALIDATING_PLACEMENTS = "validating_placements"
    RANKING = "ranking"
    DONE = "done"


class MoveEngine:
    """Finds legal moves for one difficulty tier.

    The engine never mutates the board, rack or dictionary it is given.
    Running out of time is a normal outcome: the best move found so far is
    returned, or nothing if nothing was found.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        difficulty: str = "expert",
        config: EngineConfig | None = None,
        rng: random.Random | None = None,
        clock: Clock | None = None,
    ):
        self.dict = dictionary
        self.strategy: Strategy = get_strategy(difficulty)
        self.config = config or EngineConfig()
        self.rng = rng or random.Random()
        self.clock = clock
        self.state = SearchState.IDLE
        self.timed_out = False

    # public API

    def budget_ms(self, time_budget_ms: float | None = None) -> float:
        """Effective budget: explicit or the tier's default, times the multiplier."""
        base = self.strategy.time_budget_ms if time_budget_ms is None else time_budget_ms
        return base * self.config.time_multiplier

    def find_moves(
        self,
        board: Board,
        rack: Rack | Iterable[str],
        is_first_move: bool,
        time_budget_ms: float | None = None,
        top_n: int | None = 10,
    ) -> list[Move]:
        """Ranked legal moves found within the budget, best first."""
        rack = rack if isinstance(rack, Rack) else Rack(rack)
        self.state = SearchState.IDLE
        self.timed_out = False
        deadline = Deadline(self.budget_ms(time_budget_ms), self.clock)

        if not len(rack):
            self.state = SearchState.DONE
            return []
        if not is_first_move and board.is_board_empty():
            log.debug("Board is empty; applying first-move rules")
            is_first_move = True

        log.info(
            "%s search: rack %s, budget %.0f ms",
            self.strategy.name, rack, deadline.budget_ms,
        )

        self.state = SearchState.ENUMERATING_ANCHORS
        anchors = self.strategy.anchors(board, is_first_move, self.rng)

        self.state = SearchState.GENERATING_CANDIDATES
        words = self.strategy.generate_candidates(
            rack, board, self.dict, deadline, self.rng, self.config.poll_interval,
        )
        log.debug("%d candidate words, %d anchors", len(words), len(anchors))

        self.state = SearchState.VALIDATING_PLACEMENTS
        moves = self._place_words(words, anchors, board, rack, is_first_move, deadline)
        if not moves and not deadline.expired():
            moves = self._fallback(anchors, board, rack, is_first_move, deadline)

        self.state = SearchState.RANKING
        ranked = self.strategy.rank(moves)
        self.timed_out = deadline.expired()
        if self.timed_out:
            log.info("Time budget exhausted after %.0f ms; using best found so far", deadline.elapsed_ms())

        self.state = SearchState.DONE
        if ranked:
            log.info("Found %d moves in %.0f ms; best %r", len(ranked), deadline.elapsed_ms(), ranked[0])
        else:
            log.info("No valid move found in %.0f ms; pass", deadline.elapsed_ms())
        return ranked if top_n is None else ranked[:top_n]

    def find_best_move(
        self,
        board: Board,
        rack: Rack | Iterable[str],
        is_first_move: bool,
        time_budget_ms: float | None = None,
    ) -> Move | None:
        moves = self.find_moves(board, rack, is_first_move, time_budget_ms, top_n=1)
        return moves[0] if moves else None

    # placement

    def _place_words(
        self,
        words: list[str],
        anchors: list[AnchorPoint],
        board: Board,
        rack: Rack,
        is_first_move: bool,
        deadline: Deadline,
        moves: list[Move] | None = None,
        seen: set[tuple[str, int, int, str]] | None = None,
    ) -> list[Move]:
        """Try every word at every anchor in both directions until the cap or deadline."""
        moves = [] if moves is None else moves
        seen = set() if seen is None else seen
        cap = self.strategy.max_candidates
        for anchor in anchors:
            if deadline.expired():
                break
            for word in words:
                if deadline.expired():
                    return moves
                for direction in DIRECTIONS:
                    move = try_place_word(
                        word, anchor.row, anchor.col, direction,
                        board, rack, self.dict, is_first_move,
                    )
                    if move is None or move.key() in seen:
                        continue
                    seen.add(move.key())
                    move.score = score_move(board, move)
                    self.strategy.evaluate(move, board)
                    moves.append(move)
                    if cap is not None and len(moves) >= cap:
                        return moves
        return moves

    def _fallback(
        self,
        anchors: list[AnchorPoint],
        board: Board,
        rack: Rack,
        is_first_move: bool,
        deadline: Deadline,
    ) -> list[Move]:
        """Build words around the letters next to each anchor.

        Board letters count toward formability only; placement still has to
        succeed with the real rack.
        """
        log.info("No candidates from the primary search; trying words through board letters")
        moves: list[Move] = []
        seen: set[tuple[str, int, int, str]] = set()
        cap = self.strategy.max_candidates
        for anchor in anchors:
            if deadline.expired():
                break
            for direction in DIRECTIONS:
                borrowed = borrowed_letters(board, anchor.row, anchor.col, direction)
                if not borrowed:
                    continue
                words = dictionary_words(
                    rack.extended(borrowed), self.dict, deadline, self.config.poll_interval,
                )
                words = rank_candidates(words, self.config.fallback_words_per_line)
                self._place_words(
                    words, [anchor], board, rack, is_first_move, deadline, moves, seen,
                )
                if cap is not None and len(moves) >= cap:
                    return moves
        log.debug("Fallback produced %d moves", len(moves))
        return moves


def find_move(
    rack: Rack | Iterable[str],
    board: Board,
    dictionary: Dictionary,
    is_first_move: bool,
    time_budget_ms: float | None = None,
    difficulty: str = "expert",
    rng: random.Random | None = None,
    clock: Clock | None = None,
    config: EngineConfig | None = None,
) -> Move | None:
    """Best move for *rack* on *board*, or None to pass.

    Raises InvalidRackStateError for a bad rack before any search happens.
    """
    engine = MoveEngine(dictionary, difficulty, config=config, rng=rng, clock=clock)
    return engine.find_best_move(board, rack, is_first_move, time_budget_ms)
