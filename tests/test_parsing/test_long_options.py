import pytest

from argwalk import Arity, Getopt, Operand, Option
from argwalk.exceptions import (
    InvalidOptionValueError,
    UnexpectedValueError,
    UnknownOptionError,
    ValueMissingError,
)


def make_getopt() -> Getopt:
    return Getopt(
        [
            Option("v", "verbose", Arity.NO_ARGUMENT),
            Option("o", "output", Arity.REQUIRED),
            Option("c", "color", Arity.OPTIONAL, default="auto"),
            Option("t", "tag", Arity.MULTIPLE),
        ]
    )


def test_long_flag_counts():
    result = make_getopt().process(["--verbose", "--verbose"])
    assert result["verbose"] == 2
    assert result["v"] == 2


def test_long_required_inline_and_separate():
    assert make_getopt().process(["--output=out.txt"])["output"] == "out.txt"
    assert make_getopt().process(["--output", "out.txt"])["output"] == "out.txt"


def test_long_inline_value_splits_on_first_equals():
    result = make_getopt().process(["--output=a=b"])
    assert result["output"] == "a=b"


def test_long_inline_empty_value():
    result = make_getopt().process(["--output="])
    assert result["output"] == ""


def test_long_required_missing_at_end():
    with pytest.raises(ValueMissingError) as error:
        make_getopt().process(["--output"])
    assert error.value.name == "output"


def test_long_required_does_not_take_option_token():
    with pytest.raises(ValueMissingError):
        make_getopt().process(["--output", "--verbose"])
    with pytest.raises(ValueMissingError):
        make_getopt().process(["--output", "-v"])


def test_long_required_takes_single_dash():
    result = make_getopt().process(["--output", "-"])
    assert result["output"] == "-"


def test_long_optional_never_consumes_next_token():
    getopt = make_getopt()
    getopt.add_operand(Operand("input"))
    result = getopt.process(["--color", "never"])
    assert result["color"] == "auto"
    assert result.operand_value("input") == "never"


def test_long_optional_inline():
    result = make_getopt().process(["--color=never"])
    assert result["color"] == "never"


def test_long_flag_rejects_inline_value():
    with pytest.raises(UnexpectedValueError) as error:
        make_getopt().process(["--verbose=yes"])
    assert error.value.name == "verbose"


def test_long_multiple_appends():
    result = make_getopt().process(["--tag", "a", "--tag=b", "--tag", "c"])
    assert result["tag"] == ["a", "b", "c"]


def test_long_multiple_missing_value():
    with pytest.raises(ValueMissingError):
        make_getopt().process(["--tag"])


def test_unknown_long_option():
    with pytest.raises(UnknownOptionError) as error:
        make_getopt().process(["--verbos"])
    assert error.value.name == "verbos"


def test_unknown_long_option_with_value():
    with pytest.raises(UnknownOptionError) as error:
        make_getopt().process(["--nope=1"])
    assert error.value.name == "nope"


def test_long_option_validator():
    getopt = Getopt([Option("p", "port", Arity.REQUIRED, validator=str.isdigit)])
    with pytest.raises(InvalidOptionValueError) as error:
        getopt.process(["--port=http"])
    assert error.value.name == "port"
