"""Command configuration: the commands, flags and parameters a CLI accepts."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml


class ConfigError(ValueError):
    """Raised when a configuration document cannot be turned into commands."""


class FlagType(enum.Enum):
    """How a flag acts on the command it belongs to."""

    MODIFY = "Modify"
    OVERWRITE = "Overwrite"


class ParamType(enum.Enum):
    """The kind of value a parameter accepts."""

    INT = "Int"
    STRING = "String"
    BOOL = "Bool"
    FLOAT = "Float"


_MISSING = object()


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigError(f"{what}: expected a mapping, got {type(data).__name__}")
    return data


def _field(data: Mapping[str, Any], key: str, kind: type, what: str, default: Any = _MISSING) -> Any:
    if key not in data:
        if default is _MISSING:
            raise ConfigError(f"{what}: missing field `{key}`")
        return default
    value = data[key]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise ConfigError(f"{what}: field `{key}` must be of type {kind.__name__}")
    return value


def _variant(enum_cls: type[enum.Enum], value: Any, what: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        options = ", ".join(member.value for member in enum_cls)
        raise ConfigError(f"{what}: unknown variant {value!r}, expected one of {options}") from None


@dataclass
class ConfParam:
    """A positional parameter of a command or flag."""

    name: str
    param_type: ParamType = ParamType.STRING

    @classmethod
    def from_dict(cls, data: Any) -> "ConfParam":
        data = _mapping(data, "param")
        name = _field(data, "name", str, "param")
        param_type = ParamType.STRING
        if "param_type" in data:
            param_type = _variant(ParamType, data["param_type"], f"param {name!r}")
        return cls(name=name, param_type=param_type)


def _params(data: Mapping[str, Any], what: str) -> list[ConfParam]:
    return [ConfParam.from_dict(item) for item in _field(data, "params", list, what, [])]


@dataclass
class ConfFlag:
    """A flag, known by one or more names, with its own parameters."""

    names: list[str]
    description: str
    flag_type: FlagType = FlagType.MODIFY
    params: list[ConfParam] = field(default_factory=list)
    run: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ConfFlag":
        data = _mapping(data, "flag")
        names = _field(data, "names", list, "flag")
        if not all(isinstance(name, str) for name in names):
            raise ConfigError("flag: every entry of `names` must be a string")
        what = f"flag {names!r}"
        flag_type = FlagType.MODIFY
        if "flag_type" in data:
            flag_type = _variant(FlagType, data["flag_type"], what)
        return cls(
            names=list(names),
            description=_field(data, "description", str, what),
            flag_type=flag_type,
            params=_params(data, what),
            run=_field(data, "run", str, what, ""),
        )


@dataclass
class ConfCommand:
    """A command with its subcommands, flags and parameters."""

    name: str
    description: str
    subcommands: dict[str, "ConfCommand"] = field(default_factory=dict)
    flags: list[ConfFlag] = field(default_factory=list)
    params: list[ConfParam] = field(default_factory=list)
    run: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ConfCommand":
        data = _mapping(data, "command")
        name = _field(data, "name", str, "command")
        what = f"command {name!r}"
        subcommands = _mapping(_field(data, "subcommands", Mapping, what, {}), what)
        parsed_subcommands = {}
        for key, value in subcommands.items():
            if not isinstance(key, str):
                raise ConfigError(f"{what}: subcommand keys must be strings")
            parsed_subcommands[key] = cls.from_dict(value)
        return cls(
            name=name,
            description=_field(data, "description", str, what),
            subcommands=parsed_subcommands,
            flags=[ConfFlag.from_dict(item) for item in _field(data, "flags", list, what, [])],
            params=_params(data, what),
            run=_field(data, "run", str, what, ""),
        )

    def get_flag(self, flag: str) -> Optional[ConfFlag]:
        """Return the first flag known by the name ``flag``."""
        return next((conf_flag for conf_flag in self.flags if flag in conf_flag.names), None)

    def get_subcommand(self, command: str) -> Optional["ConfCommand"]:
        return self.subcommands.get(command)

    @classmethod
    def placeholder(cls) -> "ConfCommand":
        """A stand-in command used before any real command is selected."""
        return cls(name="placeholder", description="placeholder command")


@dataclass
class Config:
    """The top-level configuration: a table of commands."""

    commands: dict[str, ConfCommand] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        data = _mapping(data, "config")
        commands = _mapping(_field(data, "commands", Mapping, "config"), "config")
        parsed = {}
        for key, value in commands.items():
            if not isinstance(key, str):
                raise ConfigError("config: command keys must be strings")
            parsed[key] = ConfCommand.from_dict(value)
        return cls(commands=parsed)

    @classmethod
    def from_yaml(cls, text: str) -> "Config":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Parse error: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Config":
        return cls.from_yaml(Path(path).read_text(encoding="utf-8"))

    def get_command(self, command: str) -> Optional[ConfCommand]:
        return self.commands.get(command)


_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def is_type(value: str, param_type: ParamType) -> bool:
    """Tell whether ``value`` is acceptable for a parameter of ``param_type``."""
    if param_type is ParamType.INT:
        return bool(_INT_RE.fullmatch(value)) and _INT32_MIN <= int(value) <= _INT32_MAX
    if param_type is ParamType.FLOAT:
        return bool(_FLOAT_RE.fullmatch(value))
    if param_type is ParamType.BOOL:
        return value in ("true", "false", "0", "1")
    return True