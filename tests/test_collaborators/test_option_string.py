import pytest

from argwalk.arity import Arity
from argwalk.exceptions import ConfigurationError
from argwalk.option import Option
from argwalk.option_string import (
    format_long_options,
    options_from_mapping,
    parse_option_list,
    parse_option_row,
    parse_option_string,
)


def test_parse_option_string():
    options = parse_option_string("ab:c::9")
    assert [(option.short, option.arity) for option in options] == [
        ("a", Arity.NO_ARGUMENT),
        ("b", Arity.REQUIRED),
        ("c", Arity.OPTIONAL),
        ("9", Arity.NO_ARGUMENT),
    ]
    assert all(option.long is None for option in options)
    assert all(option.has_explicit_arity() for option in options)


@pytest.mark.parametrize("optstring", ["", ":a", "a:::", "a-b", "a b", "é"])
def test_parse_option_string_rejects_malformed(optstring):
    with pytest.raises(ConfigurationError):
        parse_option_string(optstring)


def test_parse_option_string_error_names_position():
    with pytest.raises(ConfigurationError) as error:
        parse_option_string("ab:-")
    assert "position 4" in str(error.value)


@pytest.mark.parametrize(
    "row, short, long, arity",
    [
        (["v"], "v", None, None),
        (["verbose"], None, "verbose", None),
        (["o", ":"], "o", None, Arity.REQUIRED),
        (["output", "::"], None, "output", Arity.OPTIONAL),
        (["o", "output"], "o", "output", None),
        (["o", "output", "required"], "o", "output", Arity.REQUIRED),
        ([None, "output", Arity.MULTIPLE], None, "output", Arity.MULTIPLE),
    ],
)
def test_parse_option_row(row, short, long, arity):
    option = parse_option_row(row)
    assert option.short == short
    assert option.long == long
    if arity is None:
        assert not option.has_explicit_arity()
    else:
        assert option.arity == arity


def test_parse_option_row_description_and_default():
    option = parse_option_row(["l", "level", Arity.REQUIRED, "Log level", "info"])
    assert option.description == "Log level"
    assert option.value == "info"


def test_parse_option_row_drops_default_for_flags():
    option = parse_option_row(["v", "verbose", Arity.NO_ARGUMENT, "", "yes"])
    assert option.argument.default is None
    assert option.value is None


@pytest.mark.parametrize(
    "row",
    [
        [],
        "v",
        42,
        ["out", "put"],
        ["o", ":::"],
        ["o", "output", "sometimes"],
        ["o", "output", Arity.REQUIRED, "", None, "extra"],
    ],
)
def test_parse_option_row_rejects_malformed(row):
    with pytest.raises(ConfigurationError):
        parse_option_row(row)


def test_parse_option_row_from_mapping():
    option = parse_option_row(
        {
            "short": "n",
            "long": "number",
            "arity": "required",
            "description": "A number",
            "default": "3",
            "validator": str.isdigit,
        }
    )
    assert option.flags == ("-n", "--number")
    assert option.arity == Arity.REQUIRED
    assert option.value == "3"
    assert option.argument.validates("12")
    assert not option.argument.validates("twelve")


def test_parse_option_row_mapping_unknown_keys():
    with pytest.raises(ConfigurationError) as error:
        parse_option_row({"short": "n", "nargs": 2})
    assert "nargs" in str(error.value)


def test_parse_option_list_keeps_instances():
    verbose = Option("v", "verbose")
    options = parse_option_list([verbose, ["q", "quiet"], {"long": "dry-run"}])
    assert options[0] is verbose
    assert [option.name for option in options] == ["verbose", "quiet", "dry-run"]


def test_options_from_mapping():
    options = options_from_mapping({"output": "x", "level": "y"})
    assert [option.long for option in options] == ["output", "level"]
    assert all(option.arity == Arity.REQUIRED for option in options)
    assert all(option.short is None for option in options)


def test_format_long_options():
    assert format_long_options({"output": "out.txt", "empty": ""}) == [
        "--output=out.txt",
        "--empty=",
    ]
