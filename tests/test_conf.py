import pytest

from gracli.conf import (
    ConfCommand,
    ConfFlag,
    ConfParam,
    Config,
    ConfigError,
    FlagType,
    ParamType,
    is_type,
)

SAMPLE = """
commands:
  set:
    name: set
    description: Set a value
    subcommands:
      wallpaper:
        name: wallpaper
        description: Set the wallpaper
        params:
          - name: path
        flags:
          - names: ["-m", "--mode"]
            description: Display mode
            flag_type: Overwrite
            params:
              - name: mode
      volume:
        name: volume
        description: Set the volume
        run: echo
        params:
          - name: level
            param_type: Int
"""


@pytest.fixture
def config():
    return Config.from_yaml(SAMPLE)


def test_get_command_and_defaults(config):
    command = config.get_command("set")
    assert command.name == "set"
    assert command.flags == []
    assert command.params == []
    assert command.run == ""
    assert set(command.subcommands) == {"wallpaper", "volume"}


def test_missing_command(config):
    assert config.get_command("nope") is None


def test_param_types(config):
    wallpaper = config.get_command("set").get_subcommand("wallpaper")
    volume = config.get_command("set").get_subcommand("volume")
    assert wallpaper.params == [ConfParam("path", ParamType.STRING)]
    assert volume.params == [ConfParam("level", ParamType.INT)]
    assert volume.run == "echo"


def test_get_flag_by_any_name(config):
    wallpaper = config.get_command("set").get_subcommand("wallpaper")
    short = wallpaper.get_flag("-m")
    long = wallpaper.get_flag("--mode")
    assert short is long
    assert short.flag_type is FlagType.OVERWRITE
    assert short.params[0].name == "mode"
    assert wallpaper.get_flag("-x") is None


def test_flag_defaults():
    flag = ConfFlag.from_dict({"names": ["-v"], "description": "verbose"})
    assert flag.flag_type is FlagType.MODIFY
    assert flag.params == []
    assert flag.run == ""


def test_placeholder():
    placeholder = ConfCommand.placeholder()
    assert placeholder.name == "placeholder"
    assert placeholder.description == "placeholder command"
    assert placeholder.subcommands == {}


def test_missing_required_field():
    with pytest.raises(ConfigError, match="description"):
        ConfCommand.from_dict({"name": "x"})


def test_unknown_param_type():
    with pytest.raises(ConfigError):
        ConfParam.from_dict({"name": "p", "param_type": "Complex"})


def test_missing_commands_key():
    with pytest.raises(ConfigError):
        Config.from_yaml("other: 1\n")


def test_invalid_yaml():
    with pytest.raises(ConfigError, match="Parse error"):
        Config.from_yaml("commands: [unclosed\n")


def test_from_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(SAMPLE, encoding="utf-8")
    assert Config.from_file(path) == Config.from_yaml(SAMPLE)


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.from_file(tmp_path / "absent.yaml")


@pytest.mark.parametrize("value", ["42", "-7", "+3", "2147483647", "-2147483648"])
def test_int_accepted(value):
    assert is_type(value, ParamType.INT)


@pytest.mark.parametrize("value", ["4.2", "2147483648", " 1", "1_000", "", "abc"])
def test_int_rejected(value):
    assert not is_type(value, ParamType.INT)


@pytest.mark.parametrize("value", ["3.14", "1e5", ".5", "7", "inf", "NaN", "-1."])
def test_float_accepted(value):
    assert is_type(value, ParamType.FLOAT)


@pytest.mark.parametrize("value", ["abc", "", ".", "e5", "0x10"])
def test_float_rejected(value):
    assert not is_type(value, ParamType.FLOAT)


@pytest.mark.parametrize("value", ["true", "false", "0", "1"])
def test_bool_accepted(value):
    assert is_type(value, ParamType.BOOL)


@pytest.mark.parametrize("value", ["True", "yes", "2", ""])
def test_bool_rejected(value):
    assert not is_type(value, ParamType.BOOL)


def test_string_accepts_anything():
    assert all(is_type(v, ParamType.STRING) for v in ["", "x", "-1", "a b"])