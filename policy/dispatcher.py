import logging
import re

from data.models.commands import (
    DEFAULT_RADIUS,
    Command,
    ExitCommand,
    HelpCommand,
    SphereCommand,
    UnknownCommand,
)
from data.models.system import Point

SPHERE_PATTERN = re.compile(
    r"(?P<command>\w+)\s+(?P<x>[-+]?\d+)\s+(?P<y>[-+]?\d+)\s+(?P<z>[-+]?\d+)(?:\s+(?P<radius>\d+))?"
)


def parse_sphere(line: str) -> SphereCommand:
    match = SPHERE_PATTERN.fullmatch(line.strip())
    if not match:
        logging.debug(f"parse_sphere: no match for {line!r}")
        return SphereCommand(valid=False)
    center = Point(int(match["x"]), int(match["y"]), int(match["z"]))
    radius = int(match["radius"]) if match["radius"] else DEFAULT_RADIUS
    return SphereCommand(valid=True, center=center, radius=radius)


def dispatch(line: str) -> Command:
    parts = line.split()
    name = parts[0] if parts else ""
    if name == "sphere":
        return parse_sphere(line)
    if name == "help":
        return HelpCommand()
    if name == "exit":
        return ExitCommand()
    return UnknownCommand(name)
