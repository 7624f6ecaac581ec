import io

import pytest

from solongmaze.errors import MapError, SoLongError, report

PLAYER_MSG = "Error\n > Map must contain one and only one player\n"


def test_default_exit_code_is_one():
    error = SoLongError("Error\n > Where is the map ?\n")
    assert error.exit_code == 1
    assert error.message == "Error\n > Where is the map ?\n"


def test_str_is_message():
    error = SoLongError(PLAYER_MSG, 1)
    assert str(error) == PLAYER_MSG


def test_map_error_is_catchable_as_base():
    with pytest.raises(SoLongError) as info:
        raise MapError(PLAYER_MSG)
    assert info.value.message == PLAYER_MSG
    assert isinstance(info.value, MapError)


def test_report_writes_message_and_returns_code():
    stream = io.StringIO()
    code = report(SoLongError("Error\n > Only the map please.\n", 7), stream)
    assert code == 7
    assert stream.getvalue() == "Error\n > Only the map please.\n"


def test_report_without_error_returns_one():
    stream = io.StringIO()
    assert report(None, stream) == 1
    assert stream.getvalue() == ""


def test_report_defaults_to_stdout(capsys):
    code = report(MapError(PLAYER_MSG))
    assert code == 1
    assert capsys.readouterr().out == PLAYER_MSG


def test_report_empty_message(capsys):
    assert report(SoLongError("", 1)) == 1
    assert capsys.readouterr().out == ""