"""Command entry point: parse a command line against a configuration file."""

from __future__ import annotations

import pprint
import sys
from typing import Optional, Sequence

from .command_builder import CommandBuilder, CommandParseError
from .conf import Config, ConfigError

DEFAULT_CONFIG = "debug_data/config.yaml"
DEFAULT_COMMAND = "--debug set wallpaper /path/to/file.png"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the given words (or the example command) and print the result.

    A leading ``--config PATH`` selects the configuration file.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    config_path = DEFAULT_CONFIG
    if args[:1] == ["--config"]:
        if len(args) < 2:
            print("--config needs a path", file=sys.stderr)
            return 2
        config_path = args[1]
        args = args[2:]
    command = " ".join(args) or DEFAULT_COMMAND

    try:
        config = Config.from_file(config_path)
    except (ConfigError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        parsed = CommandBuilder(config).parse_command(command)
    except CommandParseError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(pprint.pformat(parsed))
    return 0


if __name__ == "__main__":
    sys.exit(main())