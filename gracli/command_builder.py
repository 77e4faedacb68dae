"""Turn a command line into a parsed command according to a configuration."""

from __future__ import annotations

from typing import Optional

from .cli_types import CliCommand, CliFlag, CliParam, is_flag
from .conf import ConfCommand, Config, is_type


class CommandParseError(ValueError):
    """Raised when a command line does not fit the configuration."""


class CommandBuilder:
    """Parses command lines against a :class:`Config`."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config

    def set_config(self, config: Config) -> None:
        self.config = config

    def parse_command(self, command: str) -> CliCommand:
        """Parse ``command`` and return the root ``default`` command of the chain."""
        if self.config is None:
            raise CommandParseError("No configuration set")
        config = self.config

        tokens = iter(command.split())
        base = CliCommand("default")
        current = base
        current_conf = ConfCommand.placeholder()

        token = next(tokens, None)
        while token is not None:
            if current.name == "default":
                if is_flag(token):
                    token = next(tokens, None)
                    continue
                conf = config.get_command(token)
                if conf is None:
                    raise CommandParseError(f'No command "{token}" in "{base.path()}"')
                sub = CliCommand(token)
                current.set_subcommand(sub)
                current, current_conf = sub, conf
                token = next(tokens, None)
            elif current_conf.name == "placeholder":
                raise CommandParseError("Error while parsing command. Config placeholder found")
            elif is_flag(token):
                conf_flag = current_conf.get_flag(token)
                if conf_flag is None:
                    raise CommandParseError(
                        f'Command "{base.path()}" does not contain flag "{token}"'
                    )
                flag = CliFlag(token)
                for conf_param in conf_flag.params:
                    token = next(tokens, None)
                    if token is None:
                        raise CommandParseError(
                            f'No param "{conf_param.name}" for flag "{", ".join(conf_flag.names)}" '
                            f'in command "{base.path()}"'
                        )
                    if not is_type(token, conf_param.param_type):
                        raise CommandParseError(
                            f'Wrong type for param "{conf_param.name}". '
                            f"Expected type: {conf_param.param_type.value}"
                        )
                    flag.add_param(CliParam(conf_param.name, token))
                current.add_flag(flag)

            for conf_param in current_conf.params:
                if token is None:
                    raise CommandParseError(
                        f'No param "{conf_param.name}" for command "{base.path()}"'
                    )
                if not is_type(token, conf_param.param_type):
                    raise CommandParseError(
                        f'Wrong type for param "{conf_param.name}". '
                        f"Expected type: {conf_param.param_type.value}"
                    )
                current.add_param(CliParam(conf_param.name, token))
                token = next(tokens, None)

            if token is not None:
                sub_conf = current_conf.get_subcommand(token)
                if sub_conf is None:
                    raise CommandParseError(
                        f'No subcommand "{token}" for command "{base.path()}"'
                    )
                sub = CliCommand(token)
                current.set_subcommand(sub)
                current, current_conf = sub, sub_conf

            token = next(tokens, None)

        return base