"""Tile bag.

Defines the regulation tile distribution (how many of each letter exist in
the game), the bag the turn manager draws refills from, and a helper to
compute the unseen tiles given the board state and a player's rack.
"""

from __future__ import annotations

import logging
import random

from scrabblebot.board import Board
from scrabblebot.constants import BLANK, RACK_SIZE
from scrabblebot.errors import InvalidRackStateError
from scrabblebot.rack import Rack, normalize_token

log = logging.getLogger("scrabblebot.bag")

# ── Regulation tile distribution ───────────────────────────────────────
# Total: 100 tiles (98 lettered + 2 blanks).

TILE_DISTRIBUTION: dict[str, int] = {
    "A": 9,  "B": 2,  "C": 2,  "D": 4,  "E": 12, "F": 2,  "G": 3,
    "H": 2,  "I": 9,  "J": 1,  "K": 1,  "L": 4,  "M": 2,  "N": 6,
    "O": 8,  "P": 2,  "Q": 1,  "R": 6,  "S": 4,  "T": 6,  "U": 4,
    "V": 2,  "W": 2,  "X": 1,  "Y": 2,  "Z": 1,  BLANK: 2,
}

TOTAL_TILES = sum(TILE_DISTRIBUTION.values())  # 100


def make_full_bag() -> list[str]:
    """Return a list of all tiles in the bag (unshuffled)."""
    bag: list[str] = []
    for tile, count in TILE_DISTRIBUTION.items():
        bag.extend([tile] * count)
    return bag


class TileBag:
    """Undrawn tiles. Owned by the turn manager; the search only reads racks."""

    def __init__(self, tiles: list[str] | None = None, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.tiles: list[str] = list(tiles) if tiles is not None else make_full_bag()
        self.rng.shuffle(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def is_empty(self) -> bool:
        return not self.tiles

    def draw(self, n: int) -> list[str]:
        """Pop up to *n* tiles (fewer when the bag runs low)."""
        n = max(0, min(n, len(self.tiles)))
        drawn = [self.tiles.pop() for _ in range(n)]
        return drawn

    def refill(self, rack: Rack) -> Rack:
        """Top *rack* back up to seven tiles."""
        drawn = self.draw(RACK_SIZE - len(rack))
        log.debug("Refilled rack %s with %s", rack, "".join(drawn))
        return Rack(list(rack.tiles) + drawn)

    def exchange(self, rack: Rack, tiles: list[str]) -> Rack:
        """Swap *tiles* from *rack* for the same number of fresh tiles.

        Exchange is refused when the bag holds fewer tiles than requested.
        """
        tiles = [normalize_token(t) for t in tiles]
        if len(tiles) > len(self.tiles):
            raise InvalidRackStateError(
                f"Cannot exchange {len(tiles)} tiles with {len(self.tiles)} left in the bag"
            )
        kept = rack.without(tiles)
        drawn = self.draw(len(tiles))
        self.tiles.extend(tiles)
        self.rng.shuffle(self.tiles)
        return Rack(list(kept.tiles) + drawn)

    def counts(self) -> dict[str, int]:
        pool = {tile: 0 for tile in TILE_DISTRIBUTION}
        for t in self.tiles:
            pool[t] += 1
        return pool


def remaining_tiles(board: Board, my_rack: Rack) -> list[str]:
    """Compute the unseen tiles: full bag minus board tiles minus my rack.

    Blank cells on the board count as blanks consumed from the bag.

    Parameters
    ----------
    board : Board
        The current board state.
    my_rack : Rack
        The player's current rack.

    Returns
    -------
    list[str]
        Tiles remaining in the bag + opponents' racks (unseen pool).
    """
    pool: dict[str, int] = dict(TILE_DISTRIBUTION)

    for _r, _c, cell in board.occupied():
        tile = BLANK if cell.is_blank else cell.letter
        pool[tile] = pool.get(tile, 0) - 1

    for tile in my_rack:
        pool[tile] = pool.get(tile, 0) - 1

    # Negative counts come from hand-entered boards; ignore them
    remaining: list[str] = []
    for tile, count in pool.items():
        remaining.extend([tile] * max(0, count))

    return remaining
