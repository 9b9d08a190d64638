"""Game constants: board geometry, tile values and the bonus layout."""

from __future__ import annotations

BOARD_SIZE = 15
CENTER = 7  # 0-indexed center square
RACK_SIZE = 7

BLANK = "?"
BLANK_ALIASES = frozenset({"?", "_"})

BINGO_BONUS = 50  # flat bonus for placing all 7 rack tiles in one turn

# Longest reach of a single play from an anchor (a full rack on either side)
MAX_REACH = RACK_SIZE

TILE_VALUES: dict[str, int] = {
    'A': 1, 'B': 3, 'C': 3, 'D': 2, 'E': 1, 'F': 4, 'G': 2,
    'H': 4, 'I': 1, 'J': 8, 'K': 5, 'L': 1, 'M': 3, 'N': 1,
    'O': 1, 'P': 3, 'Q': 10, 'R': 1, 'S': 1, 'T': 1, 'U': 1,
    'V': 4, 'W': 4, 'X': 8, 'Y': 4, 'Z': 10, BLANK: 0,
}

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Key: NO = normal, DL = double letter, TL = triple letter,
#      DW = double word, TW = triple word, ST = start (doubles the word)
# fmt: off
BONUS_LAYOUT: list[list[str]] = [
    ["TW", "NO", "NO", "DL", "NO", "NO", "NO", "TW", "NO", "NO", "NO", "DL", "NO", "NO", "TW"],
    ["NO", "DW", "NO", "NO", "NO", "TL", "NO", "NO", "NO", "TL", "NO", "NO", "NO", "DW", "NO"],
    ["NO", "NO", "DW", "NO", "NO", "NO", "DL", "NO", "DL", "NO", "NO", "NO", "DW", "NO", "NO"],
    ["DL", "NO", "NO", "DW", "NO", "NO", "NO", "DL", "NO", "NO", "NO", "DW", "NO", "NO", "DL"],
    ["NO", "NO", "NO", "NO", "DW", "NO", "NO", "NO", "NO", "NO", "DW", "NO", "NO", "NO", "NO"],
    ["NO", "TL", "NO", "NO", "NO", "TL", "NO", "NO", "NO", "TL", "NO", "NO", "NO", "TL", "NO"],
    ["NO", "NO", "DL", "NO", "NO", "NO", "DL", "NO", "DL", "NO", "NO", "NO", "DL", "NO", "NO"],
    ["TW", "NO", "NO", "DL", "NO", "NO", "NO", "ST", "NO", "NO", "NO", "DL", "NO", "NO", "TW"],
    ["NO", "NO", "DL", "NO", "NO", "NO", "DL", "NO", "DL", "NO", "NO", "NO", "DL", "NO", "NO"],
    ["NO", "TL", "NO", "NO", "NO", "TL", "NO", "NO", "NO", "TL", "NO", "NO", "NO", "TL", "NO"],
    ["NO", "NO", "NO", "NO", "DW", "NO", "NO", "NO", "NO", "NO", "DW", "NO", "NO", "NO", "NO"],
    ["DL", "NO", "NO", "DW", "NO", "NO", "NO", "DL", "NO", "NO", "NO", "DW", "NO", "NO", "DL"],
    ["NO", "NO", "DW", "NO", "NO", "NO", "DL", "NO", "DL", "NO", "NO", "NO", "DW", "NO", "NO"],
    ["NO", "DW", "NO", "NO", "NO", "TL", "NO", "NO", "NO", "TL", "NO", "NO", "NO", "DW", "NO"],
    ["TW", "NO", "NO", "DL", "NO", "NO", "NO", "TW", "NO", "NO", "NO", "DL", "NO", "NO", "TW"],
]
# fmt: on

DIRECTIONS = ("H", "V")


def step(direction: str) -> tuple[int, int]:
    """(dr, dc) unit step along *direction* ('H' or 'V')."""
    return (0, 1) if direction == "H" else (1, 0)


def perpendicular(direction: str) -> str:
    return "V" if direction == "H" else "H"
