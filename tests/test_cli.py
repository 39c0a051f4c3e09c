import pytest

from assethttpd.cli import _parse_args, main


def test_defaults_match_source():
    args = _parse_args([])
    assert args.root == "./assets"
    assert args.port == 3050


def test_arguments_are_read():
    args = _parse_args(["/srv/www", "--port", "8080"])
    assert (args.root, args.port) == ("/srv/www", 8080)


def test_port_out_of_range_fails(capsys):
    status = main(["--port", "70000"])
    assert status == 1
    assert "Failed to create server" in capsys.readouterr().err


def test_non_numeric_port_is_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["--port", "abc"])
    assert info.value.code == 2