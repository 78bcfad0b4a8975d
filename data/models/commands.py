from dataclasses import dataclass

from data.models.system import Point

DEFAULT_RADIUS = 100


@dataclass(frozen=True)
class SphereCommand:
    valid: bool
    center: Point | None = None
    radius: int = DEFAULT_RADIUS

    @staticmethod
    def short_help() -> str:
        return (
            "sphere <x> <y> <z> [<radius>] - get all stars in the specified sphere.\n"
            "* <x>, <y>, <z> - integers - Coordinates of the sphere center.\n"
            f"* <radius> - integer in range [0 to 200], {DEFAULT_RADIUS} by default - Radius of the sphere."
        )


@dataclass(frozen=True)
class HelpCommand:
    @staticmethod
    def short_help() -> str:
        return "help - show this help"


@dataclass(frozen=True)
class ExitCommand:
    @staticmethod
    def short_help() -> str:
        return "exit - close application"


@dataclass(frozen=True)
class UnknownCommand:
    name: str

    @staticmethod
    def short_help() -> str:
        return ""


Command = SphereCommand | HelpCommand | ExitCommand | UnknownCommand

# Commands listed by `help`, in display order.
HELP_LISTING: tuple[type, ...] = (ExitCommand, HelpCommand)
