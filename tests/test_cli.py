import pytest

from solong.checker import MapError
from solong.cli import main, prepare_game

VALID_MAP = "111111\n1PC0E1\n111111\n"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write(directory, name, text):
    (directory / name).write_text(text, encoding="utf-8")
    return name


def test_prepare_game_returns_game(workdir):
    name = write(workdir, "map.ber", VALID_MAP)
    game = prepare_game(name)
    assert game.player == (1, 1)
    assert game.total == 1
    assert game.rows == VALID_MAP.split()


def test_prepare_game_rejects_unplayable(workdir):
    name = write(workdir, "map.ber", "1111111\n1PC01E1\n1111111\n")
    with pytest.raises(MapError) as info:
        prepare_game(name)
    assert info.value.message == "The map is not possible to play."


def test_prepare_game_reports_failed_check(workdir):
    name = write(workdir, "map.ber", "111111\n1PC0E0\n111111\n")
    with pytest.raises(MapError) as info:
        prepare_game(name)
    assert info.value.message == "Wall issue."


def test_no_argument_is_bad_file_name(workdir, capsys):
    assert main([]) == 2
    assert capsys.readouterr().err == "Error\nBad file name.\n"


def test_missing_file_is_bad_file_name(workdir, capsys):
    assert main(["absent.ber"]) == 2
    assert capsys.readouterr().err == "Error\nBad file name.\n"


def test_too_many_arguments(workdir, capsys):
    name = write(workdir, "map.ber", VALID_MAP)
    assert main([name, name]) == 2
    assert capsys.readouterr().err == "Error\nNumber of argument(s) invalid.\n"


def test_bad_extension(workdir, capsys):
    name = write(workdir, "map.txt", VALID_MAP)
    assert main([name]) == 2
    assert capsys.readouterr().err == "Error\nBad extension.\n"


def test_invalid_map_reports_check(workdir, capsys):
    name = write(workdir, "map.ber", "1111\n1PE1\n1111\n")
    assert main([name]) == 1
    assert capsys.readouterr().err == "Error\nComponent issue.\n"


def test_unplayable_map(workdir, capsys):
    name = write(workdir, "map.ber", "1111111\n1PC01E1\n1111111\n")
    assert main([name]) == 1
    assert capsys.readouterr().err == "Error\nThe map is not possible to play.\n"


def test_missing_textures_end_with_status_two(workdir, capsys):
    name = write(workdir, "map.ber", VALID_MAP)
    assert main([name]) == 2
    assert capsys.readouterr().err == ""