import pytest

from houdini.cli import parse_args
from houdini.errors import UsageError


def test_defaults():
    options = parse_args([])
    assert options.pretend is False
    assert options.skip is False
    assert options.nolog is False
    assert options.disk is None
    assert options.level is None


def test_long_and_short_options():
    options = parse_args(["-p", "-s", "-nl", "-d", "/dev/disk4", "-lv", "1",
                          "-la", "spare", "-m", "WD Blue", "-sn", "ABC123"])
    assert options.pretend and options.skip and options.nolog
    assert options.disk == "/dev/disk4"
    assert options.level == "1"
    assert options.label == "spare"
    assert options.model == "WD Blue"
    assert options.serial == "ABC123"

    options = parse_args(["--pretend", "--skip", "--nolog", "--disk", "/dev/disk9",
                          "--level", "2", "--label", "x", "--model", "M", "--serial", "S"])
    assert options.disk == "/dev/disk9"
    assert options.level == "2"


@pytest.mark.parametrize("argv", [
    ["-d", "/dev/disk4", "-d", "/dev/disk5"],
    ["--level", "1", "-lv", "2"],
    ["-p", "--pretend"],
    ["-s", "-o"],
])
def test_duplicate_option_is_rejected(argv):
    with pytest.raises(UsageError, match="more than once"):
        parse_args(argv)


@pytest.mark.parametrize("argv,flag", [
    (["--disk"], "-d/--disk"),
    (["-lv"], "-lv/--level"),
    (["-d", "/dev/disk4", "--serial"], "-sn/--serial"),
])
def test_missing_value(argv, flag):
    with pytest.raises(UsageError) as excinfo:
        parse_args(argv)
    assert str(excinfo.value) == f"Missing value for option {flag}"


@pytest.mark.parametrize("argv", [
    ["--force"],
    ["-x"],
    ["--pre"],
    ["stray"],
])
def test_unknown_option(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_deprecated_skip_alias(capsys):
    options = parse_args(["-o"])
    assert options.skip is True
    assert "deprecated" in capsys.readouterr().out


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--help"])
    assert excinfo.value.code == 0
    assert "--level" in capsys.readouterr().out


def test_values_starting_with_dash_are_kept():
    options = parse_args(["-d", "/dev/disk4", "--label", "-spare", "-sn", "-A1B2", "--model", "-X"])
    assert options.label == "-spare"
    assert options.serial == "-A1B2"
    assert options.model == "-X"
    assert options.disk == "/dev/disk4"


def test_dash_value_does_not_hide_duplicates():
    with pytest.raises(UsageError, match="more than once"):
        parse_args(["--label", "-a", "-la", "-b"])
