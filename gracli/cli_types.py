"""Parsed command-line structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CliParam:
    """A named parameter value taken from the command line."""

    name: str
    value: str


@dataclass
class CliFlag:
    """A flag given on the command line, with its parameter values."""

    name: str
    params: list[CliParam] = field(default_factory=list)

    def add_param(self, param: CliParam) -> None:
        self.params.append(param)

    def __str__(self) -> str:
        return self.name


@dataclass
class CliCommand:
    """A parsed command and, through ``subcommand``, the chain below it."""

    name: str
    subcommand: Optional["CliCommand"] = None
    flags: list[CliFlag] = field(default_factory=list)
    params: list[CliParam] = field(default_factory=list)

    def set_subcommand(self, subcommand: "CliCommand") -> None:
        self.subcommand = subcommand

    def add_flag(self, flag: CliFlag) -> None:
        self.flags.append(flag)

    def add_param(self, param: CliParam) -> None:
        self.params.append(param)

    def chain(self):
        """Yield this command and every subcommand below it."""
        command: Optional[CliCommand] = self
        while command is not None:
            yield command
            command = command.subcommand

    def path(self) -> str:
        """The names of the command chain, separated by spaces."""
        return " ".join(command.name for command in self.chain())

    def __str__(self) -> str:
        return self.path()


@dataclass
class CliBuild:
    """A command being assembled from flag names and a subcommand chain."""

    name: str
    flags: list[CliFlag] = field(default_factory=list)
    subcommand: Optional["CliBuild"] = None

    def insert_flag(self, flag: str) -> None:
        self.flags.append(CliFlag(flag))

    def set_subcommand(self, subcommand: str) -> None:
        self.subcommand = CliBuild(subcommand)

    def _render(self, indent: int) -> str:
        pad = " " * indent
        flags = ", ".join(f'"{flag}"' for flag in self.flags)
        text = f'Command{{\n\n{pad}name: "{self.name}"\n{pad}flags: [{flags}]\n'
        if self.subcommand is not None:
            text += f"{pad}subcommand: " + self.subcommand._render(indent + 2)
        else:
            text += f"{pad}subcommand: None\n"
        return text + f"{pad}}}\n"

    def __str__(self) -> str:
        return self._render(2)


def is_flag(value: str) -> bool:
    """Tell whether a command-line word is a flag."""
    return value.startswith("-")