"""Command-line front end for scrabblebot."""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
import time

from scrabblebot.board import Board
from scrabblebot.dictionary import Dictionary
from scrabblebot.engine import EngineConfig, MoveEngine
from scrabblebot.errors import ScrabbleBotError
from scrabblebot.move import Move
from scrabblebot.rack import Rack
from scrabblebot.tiers import DIFFICULTIES
from scrabblebot.timing import calibrate
from scrabblebot.words import MEDIUM_WORDS

log = logging.getLogger("scrabblebot")

DEFAULT_DICTIONARY_PATHS = (
    "dictionary.txt",
    "twl06.txt",
    "sowpods.txt",
    "words.txt",
    "/usr/share/dict/words",
)


def load_dictionary(dict_path: str | None) -> Dictionary:
    """Explicit path, else the first default word list found.

    An explicit path that cannot be loaded is fatal. With no word list at
    all, validation is disabled over the built-in vocabulary.
    """
    if dict_path:
        return Dictionary.from_file(dict_path)
    for path in DEFAULT_DICTIONARY_PATHS:
        if os.path.exists(path):
            return Dictionary.from_file(path)
    log.warning("No dictionary file found -- using the built-in word list.")
    return Dictionary.permissive(MEDIUM_WORDS)


def load_board(board_path: str | None) -> Board:
    if not board_path:
        return Board()
    with open(board_path, "r", encoding="utf-8") as f:
        return Board.from_string(f.read())


def print_results(moves: list[Move], elapsed: float) -> None:
    """Results table and the best move, as shown in terminal mode."""
    print(f"Found {len(moves)} moves in {elapsed:.2f}s.\n")

    if not moves:
        print("No valid moves found -- pass (or exchange tiles).")
        return

    print("=" * 72)
    print(f" {'#':>2}  {'Score':>5}  {'Equity':>6}  {'Word':<15} {'Position':<10} {'Dir':>3}  Extra")
    print("-" * 72)
    for i, m in enumerate(moves):
        arrow = ">" if m.direction == "H" else "v"
        extra_parts: list[str] = []
        if m.is_bingo:
            extra_parts.append("BINGO +50")
        if m.cross_words:
            extra_parts.append(f"Cross: {', '.join(m.cross_words)}")
        extra = "  ".join(extra_parts)
        position = f"({m.row},{m.col})"
        print(
            f" {i+1:>2}  {m.score:>5}  {m.equity:>6.1f}  {m.word:<15} "
            f"{position:<10} {arrow:>3}  {extra}"
        )
    print("=" * 72)

    best = moves[0]
    print(
        f"\nBEST MOVE: Play '{best.word}' at ({best.row},{best.col}) "
        f"{'horizontally >' if best.direction == 'H' else 'vertically v'} "
        f"for {best.score} points!"
    )
    if best.is_bingo:
        print("   BINGO (all 7 tiles) -- +50 bonus!")
    tiles = " ".join(
        f"{t.letter.lower() if t.is_blank else t.letter}>({t.row},{t.col})" for t in best.tiles
    )
    print(f"   Tiles to place: {tiles}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scrabblebot",
        description="scrabblebot -- finds the best move for a rack and board",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--board", type=str, default=None,
                        help="Board file: 15 lines of 15 chars ('.' empty, A-Z tile, a-z blank)")
    parser.add_argument("--rack", type=str, default=None,
                        help="Rack tiles, e.g. AEIRST? ('?' or '_' for blanks)")
    parser.add_argument("--difficulty", choices=DIFFICULTIES, default="expert",
                        help="Bot tier (default: expert)")
    parser.add_argument("--budget-ms", type=float, default=None,
                        help="Time budget in milliseconds (default: the tier's budget)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible searches")
    parser.add_argument("--first-move", action="store_true",
                        help="Treat this as the opening move of the game")
    parser.add_argument("--top", type=int, default=10,
                        help="Number of moves to list")
    parser.add_argument("--calibrate", action="store_true",
                        help="Benchmark this machine and scale the time budget")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.rack and not args.calibrate:
        parser.error("--rack is required unless --calibrate is given")

    try:
        dictionary = load_dictionary(args.dict)
        config = EngineConfig()
        if args.calibrate:
            profile = calibrate(dictionary)
            config.time_multiplier = profile.time_multiplier
            print(
                f"Performance score {profile.performance_score:.2f} ({profile.tier}), "
                f"time multiplier {profile.time_multiplier:.1f}x"
            )
            if not args.rack:
                return 0

        board = load_board(args.board)
        rack = Rack.from_string(args.rack)
    except (ScrabbleBotError, OSError, ValueError) as exc:
        log.error("%s", exc)
        return 2

    engine = MoveEngine(
        dictionary,
        args.difficulty,
        config=config,
        rng=random.Random(args.seed),
    )

    print(f"\nRack: {' '.join(rack.tiles)}")
    print(f"Searching for best moves ({args.difficulty})...\n")

    t0 = time.time()
    moves = engine.find_moves(board, rack, args.first_move, args.budget_ms, top_n=args.top)
    elapsed = time.time() - t0

    print_results(moves, elapsed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
