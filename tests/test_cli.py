import pytest

from scrabblebot.cli import load_dictionary, main


BOARD_WITH_CAT = "\n".join([
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    ".......CAT.....",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
])


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\ncats\nscat\n", encoding="utf-8")
    return str(path)


def test_opening_move(dict_file, capsys):
    code = main(["--dict", dict_file, "--rack", "CAT__", "--first-move", "--seed", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert "BEST MOVE: Play 'CAT' at (7,7)" in out
    assert "for 10 points!" in out


def test_move_on_loaded_board(dict_file, tmp_path, capsys):
    board_path = tmp_path / "board.txt"
    board_path.write_text(BOARD_WITH_CAT, encoding="utf-8")
    code = main(["--dict", dict_file, "--board", str(board_path), "--rack", "S", "--difficulty", "hard"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Found 2 moves" in out
    assert "for 6 points!" in out


def test_no_move_means_pass(dict_file, capsys):
    assert main(["--dict", dict_file, "--rack", "BDF", "--first-move"]) == 0
    assert "No valid moves found" in capsys.readouterr().out


def test_calibrate_only(dict_file, capsys):
    assert main(["--dict", dict_file, "--calibrate"]) == 0
    assert "time multiplier" in capsys.readouterr().out


def test_rack_is_required(dict_file):
    with pytest.raises(SystemExit) as exc:
        main(["--dict", dict_file])
    assert exc.value.code == 2


def test_bad_inputs_exit_with_error(dict_file, tmp_path):
    assert main(["--dict", str(tmp_path / "missing.txt"), "--rack", "CAT"]) == 2
    assert main(["--dict", dict_file, "--rack", "TOOMANYTILES"]) == 2
    bad_board = tmp_path / "bad.txt"
    bad_board.write_text("...\n", encoding="utf-8")
    assert main(["--dict", dict_file, "--board", str(bad_board), "--rack", "S"]) == 2


def test_missing_word_list_disables_validation(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("scrabblebot.cli.DEFAULT_DICTIONARY_PATHS", ())
    dictionary = load_dictionary(None)
    assert not dictionary.validate
    assert "CAT" in dictionary.words
