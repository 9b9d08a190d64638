import pytest

from scrabblebot.dictionary import Dictionary, normalize_word
from scrabblebot.errors import MalformedDictionaryError
from scrabblebot.trie import Trie


def test_from_file_normalizes_and_skips(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_text("cat\n\nDog\n   \nhello world\nCAT\n", encoding="utf-8")

    with caplog.at_level("WARNING"):
        dictionary = Dictionary.from_file(path)

    assert len(dictionary) == 2
    assert "CAT" in dictionary
    assert "dog" in dictionary
    assert "HELLO" not in dictionary
    assert "Skipped 1 malformed lines" in caplog.text


def test_from_file_errors(tmp_path):
    with pytest.raises(MalformedDictionaryError):
        Dictionary.from_file(tmp_path / "missing.txt")

    empty = tmp_path / "empty.txt"
    empty.write_text("\n\n", encoding="utf-8")
    with pytest.raises(MalformedDictionaryError):
        Dictionary.from_file(empty)

    binary = tmp_path / "binary.txt"
    binary.write_bytes(b"\xff\xfe\xfa\n")
    with pytest.raises(MalformedDictionaryError):
        Dictionary.from_file(binary)


def test_normalize_word():
    assert normalize_word("  quiz \n") == "QUIZ"
    assert normalize_word("don't") is None
    assert normalize_word("café") is None
    assert normalize_word("A" * 16) is None


def test_permissive_mode_accepts_anything():
    dictionary = Dictionary.permissive(["CAT"])
    assert "XYZZY" in dictionary
    assert list(dictionary) == ["CAT"]


def test_prefix_set():
    dictionary = Dictionary(["CAT", "CATS", "DOG"])
    prefixes = dictionary.prefixes
    assert "CA" in prefixes
    assert "cats" in prefixes
    assert "CX" not in prefixes
    # Built with the dictionary, not on first search
    assert dictionary.prefixes is prefixes


def test_scan_order_is_longest_first():
    dictionary = Dictionary(["AT", "CAT", "ACT", "CATS"])
    assert list(dictionary) == ["CATS", "ACT", "CAT", "AT"]


def test_trie():
    trie = Trie(["CAT", "CAR", "DOG"])
    assert len(trie) == 3
    assert not trie.insert("CAT")
    assert trie.is_word("CAR")
    assert not trie.is_word("CA")
    assert trie.is_prefix("CA")
    assert not trie.is_prefix("CX")
