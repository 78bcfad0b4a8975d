import pytest

from data.models.commands import ExitCommand, HelpCommand, SphereCommand, UnknownCommand
from data.models.system import Point
from policy.dispatcher import dispatch


@pytest.mark.parametrize(
    "line, center",
    [
        ("sphere 0 0 0", Point(0, 0, 0)),
        ("sphere -12 35 7", Point(-12, 35, 7)),
        ("sphere 1000 -2000 +30", Point(1000, -2000, 30)),
    ],
)
def test_sphere_defaults_radius(line, center):
    command = dispatch(line)
    assert command == SphereCommand(valid=True, center=center, radius=100)


def test_sphere_with_radius():
    command = dispatch("sphere 1 2 3 50")
    assert command.valid
    assert command.center == Point(1, 2, 3)
    assert command.radius == 50


def test_sphere_tolerates_extra_whitespace():
    command = dispatch("  sphere   1  2   3  ")
    assert command == SphereCommand(valid=True, center=Point(1, 2, 3), radius=100)


@pytest.mark.parametrize(
    "line",
    [
        "sphere",
        "sphere abc 1 2",
        "sphere 1 2",
        "sphere 1 2 3 -5",
        "sphere 1 2 3 4 5",
        "sphere 1.5 2 3",
    ],
)
def test_malformed_sphere_is_invalid(line):
    command = dispatch(line)
    assert isinstance(command, SphereCommand)
    assert not command.valid
    assert command.center is None


def test_help_and_exit():
    assert dispatch("help") == HelpCommand()
    assert dispatch("exit") == ExitCommand()
    assert dispatch("help me please") == HelpCommand()


def test_command_names_are_case_sensitive():
    assert dispatch("EXIT") == UnknownCommand("EXIT")
    assert dispatch("Sphere 1 2 3") == UnknownCommand("Sphere")


def test_unknown_and_blank():
    assert dispatch("foobar 1 2") == UnknownCommand("foobar")
    assert dispatch("") == UnknownCommand("")
    assert dispatch("   ") == UnknownCommand("")
