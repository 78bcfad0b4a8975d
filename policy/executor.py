import logging
from collections.abc import Callable, Iterable

from api.handle_requests import EdsmError
from data.config import DezhnevConfig
from data.import_file import write_import_stars
from data.models.commands import (
    HELP_LISTING,
    Command,
    ExitCommand,
    HelpCommand,
    SphereCommand,
    UnknownCommand,
)
from data.models.system import Point

FetchSystems = Callable[[Point, int], list[str]]
WriteImport = Callable[[str, Iterable[str]], str]


class CommandExecutor:
    def __init__(
        self,
        config: DezhnevConfig,
        fetch_systems: FetchSystems,
        write_import: WriteImport = write_import_stars,
    ) -> None:
        self.config = config
        self.fetch_systems = fetch_systems
        self.write_import = write_import

    def execute(self, command: Command) -> bool:
        """Run one command. Returns True when the session should end."""
        if isinstance(command, SphereCommand):
            self._sphere(command)
        elif isinstance(command, HelpCommand):
            self._help()
        elif isinstance(command, ExitCommand):
            return True
        elif isinstance(command, UnknownCommand):
            print(f"Unknown command {command.name}. Please use 'help'.")
        else:
            raise TypeError(f"Unsupported command: {command!r}")
        return False

    # Internal command handlers
    def _sphere(self, command: SphereCommand) -> None:
        if not command.valid:
            print("There is an error in the input. Please try 'help' command for more information")
            return
        print("Sphere: Getting stars from EDSM... ", end="", flush=True)
        try:
            names = self.fetch_systems(command.center, command.radius)
        except EdsmError as e:
            print()
            logging.error(f"Sphere query around {command.center} failed: {e}")
            print(f"Sphere: Failed to get stars from EDSM: {e}")
            return
        print("Sphere: Done!")
        print("Sphere: Creating file for import... ", end="", flush=True)
        try:
            self.write_import(self.config.output_dir, names)
        except OSError as e:
            print()
            logging.error(f"Writing import file to {self.config.output_dir!r} failed: {e}")
            print(f"Sphere: Failed to write import file: {e}")
            return
        print("Done!")

    def _help(self) -> None:
        for command_type in HELP_LISTING:
            print(command_type.short_help())
