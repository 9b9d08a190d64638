"""Candidate word generation.

Everything here is a pure function of its inputs: the rack (or a letter
count), the dictionary and, for hooks, the board. Placement is decided
later by the validator.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from scrabblebot.board import Board
from scrabblebot.constants import ALPHABET, BINGO_BONUS, BLANK, BOARD_SIZE, RACK_SIZE, TILE_VALUES, step
from scrabblebot.dictionary import Dictionary, PrefixSet
from scrabblebot.rack import Rack, can_form_from_counts
from scrabblebot.timing import Deadline

# ── Curated word lists ───────────────────────────────────────────────────
#
# Everyday vocabulary for the lower tiers. Entries still have to be in the
# game dictionary to be played.

_SHORT_WORDS = (
    "AT", "TO", "IT", "IN", "IS", "ON", "AN", "AS", "BE", "BY",
    "DO", "GO", "HE", "IF", "ME", "MY", "NO", "OF", "OR", "SO",
    "UP", "US", "WE", "AM", "AX", "EM", "EX", "HI", "LO", "MA",
    "PA", "PI", "RE", "TA", "XI", "YA", "YE",
    "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "CAN", "HER",
    "WAS", "ONE", "OUR", "OUT", "DAY", "GET", "HAS", "HIM", "HIS", "HOW",
    "ITS", "LET", "MAY", "NEW", "NOW", "OLD", "SEE", "WAY", "WHO", "BOY",
    "DID", "OWN", "SAY", "SHE", "TOO", "USE", "ACE", "ACT", "ADD", "AGE",
    "AGO", "AID", "AIM", "AIR", "ART", "ASK", "ATE", "BAD", "BAG", "BAT",
    "BED", "BIG", "BIT", "BOX", "BUS", "BUY", "CAR", "CAT", "CUT", "DOG",
    "EAR", "EAT", "END", "EYE", "FAR", "FEW", "FIT", "FLY", "FUN", "GOT",
    "GUN", "GUY", "HAD", "HAT", "HIT", "HOT", "ICE", "JOB", "JOY", "KEY",
    "KID", "LAY", "LED", "LEG", "LIE", "LOT", "LOW", "MAN", "MAP", "MEN",
    "MET", "MIX", "MOB", "MOM", "MUD", "NET", "NOR", "NUT", "ODD", "OFF",
    "OIL", "PAN", "PAY", "PEN", "PET", "PIE", "PIN", "PIT", "POT", "PUT",
    "RAN", "RAT", "RAW", "RED", "RID", "ROW", "RUB", "RUN", "SAD", "SAT",
    "SET", "SIT", "SIX", "SKY", "SON", "SUN", "TAN", "TAX", "TEA", "TEN",
    "TIE", "TIP", "TOP", "TOY", "TRY", "TWO", "VAN", "WAR", "WET", "WIN",
    "WON", "YES", "YET", "ZAP", "ZEN", "ZIP", "ZOO",
)

_EXTRA_SHORT_WORDS = (
    "OX", "AH", "EH", "OH", "UH", "UM", "MM", "SH", "OW", "AW", "OO",
    "JAM", "JAR", "JAW", "JET", "JIG", "JOG", "JOT", "JUG", "QUA",
)

_LONGER_WORDS = (
    "ABLE", "ACID", "AGED", "ALSO", "AREA", "ARMY", "AWAY", "BABY", "BACK",
    "BALL", "BAND", "BANK", "BASE", "BEAR", "BEAT", "BEEN", "BEST", "BIRD",
    "BLUE", "BOAT", "BODY", "BOOK", "BORN", "BOTH", "BUSY", "CALL", "CAME",
    "CAMP", "CARD", "CARE", "CASE", "CASH", "CAST", "CITY", "CLUB", "COAT",
    "CODE", "COLD", "COME", "COOL", "COPY", "COST", "DARK", "DATE", "DEAL",
    "DEEP", "DOOR", "DOWN", "DRAW", "DROP", "EACH", "EAST", "EASY", "EDGE",
    "EVEN", "EVER", "FACE", "FACT", "FAIR", "FALL", "FARM", "FAST", "FEAR",
    "FEEL", "FILE", "FILM", "FIND", "FINE", "FIRE", "FISH", "FIVE", "FLAT",
    "FOOD", "FORM", "FREE", "GAIN", "GAME", "GIVE", "GOAL", "GOLD", "GOOD",
    "HAIR", "HALF", "HAND", "HARD", "HAVE", "HEAD", "HEAR", "HEAT", "HELP",
    "HIGH", "HOLD", "HOME", "HOPE", "IDEA", "IRON", "ITEM", "JAZZ", "JOIN",
    "JOKE", "JUMP", "JURY", "JUST", "KEEP", "KICK", "KIND", "KING", "KNOW",
    "LAKE", "LAND", "LAST", "LATE", "LEAD", "LEFT", "LIFE", "LIKE", "LINE",
    "LIST", "LIVE", "LOAD", "LONG", "LOOK", "LOVE", "LUCK", "MADE", "MAIN",
    "MAKE", "MARK", "MEAN", "MEET", "MILK", "MIND", "MOON", "MORE", "MOVE",
    "NAME", "NEAR", "NEED", "NEXT", "NICE", "NOTE", "OPEN", "OVER", "PACK",
    "PAGE", "PAIR", "PARK", "PART", "PAST", "PLAN", "PLAY", "POOL", "PURE",
    "QUIT", "QUIZ", "RACE", "RAIN", "RATE", "READ", "REAL", "REST", "RICH",
    "RIDE", "RING", "RISE", "ROAD", "ROCK", "ROLE", "ROOM", "ROSE", "RULE",
    "SAFE", "SALT", "SAME", "SAND", "SAVE", "SEAT", "SEND", "SHIP", "SHOP",
    "SHOW", "SIDE", "SIGN", "SIZE", "SKIN", "SLOW", "SNOW", "SOFT", "SONG",
    "SOON", "STAR", "STAY", "STEP", "STOP", "TAKE", "TALE", "TALK", "TEAM",
    "TELL", "TEST", "TEXT", "THAT", "THEM", "THIS", "TIME", "TONE", "TOOL",
    "UPSET", "URBAN", "USAGE", "USUAL", "VALID", "VALUE", "VIDEO", "VISIT",
    "VITAL", "VOICE", "WAGON", "WASTE", "WATCH", "WATER", "WHEAT", "WHEEL",
    "WHITE", "WHOLE", "WOMAN", "WORLD", "WORRY", "WORTH", "WRITE", "WRONG",
    "YIELD", "YOUNG", "YOUTH", "ZEBRA", "ZONES",
    "PLANET", "STRIPE", "GARDEN", "SILVER", "RETAIN", "STAIRS", "TRAINS",
    "RETAINS", "STATION", "NOTICES", "READING",
)

EASY_WORDS: tuple[str, ...] = _SHORT_WORDS
MEDIUM_WORDS: tuple[str, ...] = _SHORT_WORDS + _EXTRA_SHORT_WORDS + _LONGER_WORDS


# ── Rack-only formability ────────────────────────────────────────────────

def rack_pairs(rack: Rack, dictionary: Dictionary) -> list[str]:
    """Two-letter dictionary words made from two distinct rack letters."""
    letters = rack.letters
    found: list[str] = []
    for i, a in enumerate(letters):
        for j, b in enumerate(letters):
            if i == j:
                continue
            pair = a + b
            if pair in dictionary and pair not in found:
                found.append(pair)
    return found


def curated_words(rack: Rack, dictionary: Dictionary, word_list: Iterable[str]) -> list[str]:
    """Curated words the rack can spell and the dictionary accepts, then rack pairs."""
    found: list[str] = []
    seen: set[str] = set()
    for word in word_list:
        if word in seen:
            continue
        if rack.can_form(word) and word in dictionary:
            found.append(word)
            seen.add(word)
    for pair in rack_pairs(rack, dictionary):
        if pair not in seen:
            found.append(pair)
            seen.add(pair)
    return found


def two_letter_openings(counts: Counter[str], prefixes: PrefixSet) -> set[str]:
    """Two-letter openings the tiles can spell that start some dictionary word."""
    openings: set[str] = set()
    for a in ALPHABET:
        if counts[a] <= 0 and counts[BLANK] <= 0:
            continue
        for b in ALPHABET:
            pair = a + b
            if can_form_from_counts(counts, pair) and pair in prefixes:
                openings.add(pair)
    return openings


def dictionary_words(
    counts: Counter[str],
    dictionary: Dictionary,
    deadline: Deadline | None = None,
    poll_interval: int = 250,
) -> list[str]:
    """Every dictionary word spellable from *counts*, longest first.

    Words whose opening pair the tiles cannot spell are skipped before the
    full formability test. The deadline is polled every *poll_interval*
    entries; on expiry the words found so far are returned.
    """
    total = sum(n for n in counts.values() if n > 0)
    if total < 2:
        return []
    openings = two_letter_openings(counts, dictionary.prefixes)
    if not openings:
        return []

    found: list[str] = []
    for i, word in enumerate(dictionary.by_length()):
        if deadline is not None and i % poll_interval == 0 and deadline.expired():
            break
        if len(word) > total or len(word) < 2:
            continue
        if word[:2] not in openings:
            continue
        if can_form_from_counts(counts, word):
            found.append(word)
    return found


# ── Hooks ────────────────────────────────────────────────────────────────

def board_words(board: Board) -> list[str]:
    """Words of two or more letters on the board, rows first, without repeats."""
    words: list[str] = []
    for direction in ("H", "V"):
        for line in range(BOARD_SIZE):
            run: list[str] = []
            for i in range(BOARD_SIZE + 1):
                r, c = (line, i) if direction == "H" else (i, line)
                letter = board.letter_at(r, c)
                if letter is not None:
                    run.append(letter)
                    continue
                if len(run) > 1:
                    word = "".join(run)
                    if word not in words:
                        words.append(word)
                run = []
    return words


def hook_words(rack: Rack, board: Board, dictionary: Dictionary) -> list[str]:
    """One-letter front and back extensions of the words on the board.

    The plural ``+S`` is tried first for each word; the added letter has to
    come from the rack or a blank.
    """
    has_blank = rack.blanks > 0
    available = [ch for ch in ALPHABET if has_blank or rack.counts[ch] > 0]
    found: list[str] = []
    for word in board_words(board):
        if "S" in available:
            plural = word + "S"
            if plural in dictionary and plural not in found:
                found.append(plural)
        for ch in available:
            for hooked in (ch + word, word + ch):
                if len(hooked) <= BOARD_SIZE and hooked in dictionary and hooked not in found:
                    found.append(hooked)
    return found


def borrowed_letters(board: Board, row: int, col: int, direction: str) -> list[str]:
    """Letters in the contiguous runs just before and after (row, col)."""
    dr, dc = step(direction)
    letters: list[str] = []
    r, c = row - dr, col - dc
    while board.is_occupied(r, c):
        letters.append(board.cells[r][c].letter)
        r -= dr
        c -= dc
    letters.reverse()
    r, c = row + dr, col + dc
    while board.is_occupied(r, c):
        letters.append(board.cells[r][c].letter)
        r += dr
        c += dc
    return letters


# ── Estimates ────────────────────────────────────────────────────────────

def estimate_word_value(word: str) -> int:
    """Cheap pre-placement value: tile values + 2 per letter + bingo for 7 letters."""
    value = sum(TILE_VALUES.get(ch, 0) for ch in word) + 2 * len(word)
    if len(word) == RACK_SIZE:
        value += BINGO_BONUS
    return value


def rank_candidates(words: Iterable[str], cap: int | None = None) -> list[str]:
    """Words by descending estimate (stable), at most *cap* of them."""
    ranked = sorted(words, key=estimate_word_value, reverse=True)
    return ranked if cap is None else ranked[:cap]
