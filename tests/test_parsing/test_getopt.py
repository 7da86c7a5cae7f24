import logging

import pytest

from argwalk import Arity, Getopt, Operand, Option
from argwalk.exceptions import (
    ConfigurationError,
    InvalidOperandValueError,
    OperandRequiredError,
    ParseError,
)
from argwalk.settings import GetoptSettings


def test_end_to_end():
    getopt = Getopt(
        [
            Option("v", "verbose", Arity.NO_ARGUMENT),
            Option("o", "output", Arity.REQUIRED),
        ],
        operands=[Operand("input", required=True)],
    )
    getopt.process(["--output=out.txt", "-v", "file.txt"])
    assert getopt.option_value("output") == "out.txt"
    assert getopt.option_value("verbose") == 1
    assert getopt.operand_value(0) == "file.txt"
    assert getopt.all_operand_values() == ["file.txt"]
    assert getopt.selected_command() is None
    assert getopt.all_set_options()["o"] == "out.txt"


def test_str():
    getopt = Getopt("ab:")
    assert str(getopt) == "Getopt(options=2, operands=0, commands=0)"
    getopt.add_operand(Operand("file"))
    assert repr(getopt) == "Getopt(options=2, operands=1, commands=0)"


def test_settings_defaults():
    getopt = Getopt()
    assert getopt.get("default_arity") == Arity.NO_ARGUMENT
    assert getopt.get("script_name") is None
    assert getopt.get("unknown") is None


def test_settings_from_mapping():
    getopt = Getopt(settings={"default_arity": "required", "script_name": "tool"})
    assert getopt.get(Getopt.SETTING_DEFAULT_ARITY) == Arity.REQUIRED
    assert getopt.get(Getopt.SETTING_SCRIPT_NAME) == "tool"


def test_settings_model_is_copied():
    settings = GetoptSettings(script_name="tool")
    getopt = Getopt(settings=settings)
    getopt.set("script_name", "other")
    assert settings.script_name == "tool"


def test_invalid_settings():
    with pytest.raises(ConfigurationError):
        Getopt(settings={"default_arity": "sometimes"})
    with pytest.raises(ConfigurationError):
        Getopt(settings={"colour": "red"})
    with pytest.raises(ConfigurationError):
        Getopt().set("colour", "red")
    with pytest.raises(ConfigurationError):
        Getopt().set("default_arity", "sometimes")


def test_default_arity_applies_to_later_options():
    getopt = Getopt([Option("a")])
    getopt.set("default_arity", "required")
    getopt.add_option(Option("b"))
    assert getopt.get_option("a").arity == Arity.NO_ARGUMENT
    assert getopt.get_option("b").arity == Arity.REQUIRED
    result = getopt.process(["-a", "-b", "value"])
    assert result["b"] == "value"


def test_default_arity_applies_to_rows():
    getopt = Getopt(settings={"default_arity": Arity.MULTIPLE})
    getopt.add_options([["t", "tag"]])
    assert getopt.process(["-t", "a", "-t", "b"])["tag"] == ["a", "b"]


def test_add_options_from_shorthand():
    getopt = Getopt("ab:c::")
    result = getopt.process(["-a", "-b", "value", "-cx"])
    assert result["a"] == 1
    assert result["b"] == "value"
    assert result["c"] == "x"


def test_add_option_from_shorthand_uses_first():
    getopt = Getopt()
    getopt.add_option("o:v")
    assert [option.short for option in getopt.options] == ["o"]
    assert getopt.get_option("o").arity == Arity.REQUIRED


def test_add_options_mixed():
    getopt = Getopt(
        [
            Option("v", "verbose"),
            ["o", "output", Arity.REQUIRED, "Write to file", "out.txt"],
            {"long": "level", "arity": "optional", "default": "info"},
        ]
    )
    assert getopt.has_options()
    assert getopt.option_value("output") == "out.txt"
    assert getopt.option_value("level") == "info"
    assert getopt.get_option("o").description == "Write to file"


def test_add_options_rejects_other_types():
    with pytest.raises(ConfigurationError):
        Getopt(42)


def test_process_command_line_string():
    getopt = Getopt([Option("m", "message", Arity.REQUIRED)])
    result = getopt.process("-m 'hello world' file")
    assert result["message"] == "hello world"
    assert result.all_operand_values() == ["file"]


def test_process_unbalanced_quotes():
    with pytest.raises(ParseError):
        Getopt().process("-m 'hello")


def test_process_rejects_non_string_tokens():
    with pytest.raises(ConfigurationError):
        Getopt().process(["a", 1])
    with pytest.raises(ConfigurationError):
        Getopt().process(None)


def test_required_operand_missing():
    getopt = Getopt(operands=[Operand("file", required=True)])
    with pytest.raises(OperandRequiredError) as error:
        getopt.process([])
    assert error.value.name == "file"
    assert str(error.value) == "Operand 'file' is required"


def test_operand_default():
    getopt = Getopt(operands=[Operand("mode", default="dev")])
    getopt.process([])
    assert getopt.operand_value("mode") == "dev"
    assert getopt.operand_value(0) is None


def test_operand_validation():
    getopt = Getopt(operands=[Operand("count", validator=str.isdigit)])
    with pytest.raises(InvalidOperandValueError) as error:
        getopt.process(["many"])
    assert error.value.name == "count"


def test_second_process_accumulates_and_warns(caplog):
    getopt = Getopt([Option("v", "verbose")])
    getopt.process(["-v"])
    with caplog.at_level(logging.WARNING, logger="argwalk"):
        getopt.process(["-v"])
    assert getopt.option_value("verbose") == 2
    assert "accumulate" in caplog.text


def test_result_is_live_view():
    getopt = Getopt([Option("v", "verbose")])
    view = getopt.result
    result = getopt.process(["-v"])
    assert result is view
    assert view["verbose"] == 1


def test_parse_failure_is_logged(caplog):
    getopt = Getopt([Option("v", "verbose")])
    with caplog.at_level(logging.DEBUG, logger="argwalk"):
        with pytest.raises(ParseError):
            getopt.process(["--nope"])
    assert "Option 'nope' is unknown" in caplog.text
