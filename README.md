# gracli

gracli turns a command line such as `set wallpaper /path/to/file.png` into a
chain of commands and subcommands, each with its own flags and typed
parameters. A YAML configuration file describes the commands that gracli
accepts. gracli does not hard-code them.

## Installation

```
pip install .
```

## Describing commands

The top-level `commands` mapping maps each command name to a command. Each
command needs a `name` and a `description`. It may also have:

- `subcommands`: a mapping of the same shape,
- `flags`,
- `params`,
- `run`: a string, stored but not used.

Each parameter has a `name` and a `param_type`. The `param_type` is one of
`Int`, `Float`, `Bool` or `String`, and `String` is the default.

A flag lists every spelling it accepts under `names` and needs a
`description`. Its `flag_type` is `Modify` (the default) or `Overwrite`. A
flag may take parameters of its own.

```yaml
commands:
  set:
    name: set
    description: Change a setting
    subcommands:
      wallpaper:
        name: wallpaper
        description: Set the desktop wallpaper
        params:
          - name: path
            param_type: String
        flags:
          - names: ["-b", "--blur"]
            description: Blur the image
            params:
              - name: radius
                param_type: Int
```

The following are available in `gracli.conf`:

- `Config.from_file(path)`, `Config.from_yaml(text)` and `Config.from_dict(data)` build a configuration.
- `Config.get_command(name)` looks up a top-level command.
- `ConfCommand.get_flag(name)` and `ConfCommand.get_subcommand(name)` look up a flag or subcommand of a command.

A document that is not valid YAML or does not have the expected shape raises
`ConfigError`. This covers a missing field, a value of the wrong type and an
unknown `param_type` or `flag_type`. A file that cannot be read raises the
usual `OSError`.

## Parsing a command line

```python
from gracli.conf import Config
from gracli.command_builder import CommandBuilder, CommandParseError

config = Config.from_file("config.yaml")
builder = CommandBuilder(config)

try:
    command = builder.parse_command("--debug set wallpaper /path/to/file.png")
except CommandParseError as err:
    print(f"invalid command: {err}")
else:
    print(command.path())  # "default set wallpaper"
```

`parse_command` returns a `CliCommand` named `default`. The parsed commands
hang below it through `subcommand`. Each command carries its `flags`
(`CliFlag` objects, with their own `params`) and its `params` (`CliParam`
objects with `name` and `value`). `CliCommand.chain()` yields every command in
the chain, and `path()` joins their names with spaces.

Flags that come before the first command are skipped. The rest of the line is
checked against the configuration. `CommandParseError` is raised in these
cases:

- no configuration is set,
- a command, subcommand or flag is unknown,
- a parameter is missing,
- a value does not match its declared type.

You can set or change the configuration later with
`CommandBuilder.set_config(config)`.

You can also check a single value directly:

```python
from gracli.conf import ParamType, is_type

is_type("42", ParamType.INT)      # True
is_type("yes", ParamType.BOOL)    # False
```

The rules for each type are:

- `Int` accepts a decimal integer in the signed 32-bit range.
- `Float` accepts a decimal number, including `inf` and `nan`.
- `Bool` accepts `true`, `false`, `0` and `1`.
- `String` accepts anything.

`gracli.cli_types` also provides `CliBuild`. It is a simple command builder made of flag names and a subcommand chain, and its `str()` gives an indented text rendering. The same module has `is_flag(word)`, which is true for words that start with `-`.

## Command line

```
gracli [--config PATH] [WORD ...]
```

The command reads the configuration from `PATH`. Without `--config` it reads
`debug_data/config.yaml`. It then parses the given words as one command line.
If you give no words, it parses the example line
`--debug set wallpaper /path/to/file.png`. It prints the resulting command
tree.

The exit status is:

- 0 on success,
- 1 when the configuration cannot be loaded or the command line does not fit it,
- 2 when `--config` has no path.

## What it does not do

gracli only parses and checks command lines. It never runs anything: the
`run` fields of commands and flags are read but not acted on. It also does not
use `flag_type` when parsing.

## Running the tests

```
pip install .[test]
pytest
```