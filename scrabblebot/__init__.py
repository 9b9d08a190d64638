"""scrabblebot: tiered move search for a Scrabble-like board game."""

from scrabblebot.constants import BOARD_SIZE, TILE_VALUES, BONUS_LAYOUT, BINGO_BONUS, CENTER
from scrabblebot.errors import (
    InvalidPlacementError,
    InvalidRackStateError,
    MalformedDictionaryError,
    OutOfBoundsError,
    ScrabbleBotError,
)
from scrabblebot.trie import Trie, TrieNode
from scrabblebot.dictionary import Dictionary, PrefixSet
from scrabblebot.board import Board, Bonus, BonusGrid, Cell
from scrabblebot.rack import Rack
from scrabblebot.bag import TileBag, remaining_tiles, TILE_DISTRIBUTION
from scrabblebot.move import Move, PlacedTile
from scrabblebot.anchors import AnchorPoint, find_anchors
from scrabblebot.placement import extract_word, try_place_word, validate_submission
from scrabblebot.scoring import score_move
from scrabblebot.evaluation import strategic_adjustment
from scrabblebot.timing import Deadline, PerformanceProfile, calibrate
from scrabblebot.engine import EngineConfig, MoveEngine, SearchState, find_move

__all__ = [
    "BOARD_SIZE",
    "TILE_VALUES",
    "BONUS_LAYOUT",
    "BINGO_BONUS",
    "CENTER",
    "TILE_DISTRIBUTION",
    "AnchorPoint",
    "Board",
    "Bonus",
    "BonusGrid",
    "Cell",
    "Deadline",
    "Dictionary",
    "EngineConfig",
    "InvalidPlacementError",
    "InvalidRackStateError",
    "MalformedDictionaryError",
    "Move",
    "MoveEngine",
    "OutOfBoundsError",
    "PerformanceProfile",
    "PlacedTile",
    "PrefixSet",
    "Rack",
    "ScrabbleBotError",
    "SearchState",
    "TileBag",
    "Trie",
    "TrieNode",
    "calibrate",
    "extract_word",
    "find_anchors",
    "find_move",
    "remaining_tiles",
    "score_move",
    "strategic_adjustment",
    "try_place_word",
    "validate_submission",
]
