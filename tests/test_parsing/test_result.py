import pytest

from argwalk import Arity, Getopt, Operand, Option, ParseResult
from argwalk.exceptions import ImmutableAccessError


def make_result() -> ParseResult:
    getopt = Getopt(
        [
            Option("v", "verbose"),
            Option("q", "quiet"),
            Option("o", "output", Arity.REQUIRED),
            Option(None, "level", Arity.REQUIRED, default="info"),
            Option("t", "tag", Arity.MULTIPLE),
        ],
        operands=[Operand("input", required=True), Operand("mode", default="dev")],
    )
    return getopt.process(["-v", "--output=out.txt", "file.txt"])


def test_lookup_by_short_and_long():
    result = make_result()
    assert result["v"] == result["verbose"] == 1
    assert result["o"] == result["output"] == "out.txt"
    assert result.option_value("output") == "out.txt"


def test_unknown_name():
    result = make_result()
    with pytest.raises(KeyError):
        result["missing"]
    assert result.get("missing") is None
    assert result.option_value("missing") is None


def test_contains():
    result = make_result()
    assert "verbose" in result
    assert "level" in result
    assert "quiet" not in result
    assert "missing" not in result
    assert 1 not in result


def test_iteration_skips_unset_options():
    result = make_result()
    assert list(result) == ["v", "o", "level"]
    assert len(result) == 3
    assert dict(result) == {"v": 1, "o": "out.txt", "level": "info"}


def test_all_set_options_uses_both_names():
    assert make_result().all_set_options() == {
        "v": 1,
        "verbose": 1,
        "o": "out.txt",
        "output": "out.txt",
        "level": "info",
    }


def test_is_set_and_count():
    result = make_result()
    assert result.is_set("verbose")
    assert not result.is_set("quiet")
    assert not result.is_set("tag")
    assert not result.is_set("missing")
    assert result.count("v") == 1
    assert result.count("tag") == 0
    assert result.count("missing") == 0
    assert result["tag"] == []


def test_operand_queries():
    result = make_result()
    assert result.operand_value(0) == "file.txt"
    assert result.operand_value("input") == "file.txt"
    assert result.operand_value(1) is None
    assert result.operand_value("mode") == "dev"
    assert result.all_operand_values() == ["file.txt"]


def test_writes_are_rejected():
    result = make_result()
    with pytest.raises(ImmutableAccessError):
        result["verbose"] = 3
    with pytest.raises(ImmutableAccessError):
        del result["verbose"]
    with pytest.raises(ImmutableAccessError):
        result.extra = 1
    with pytest.raises(ImmutableAccessError):
        del result._registry
    with pytest.raises(TypeError):
        result["output"] = "other.txt"
    assert result["verbose"] == 1


def test_repr():
    assert repr(make_result()) == (
        "ParseResult(options={'v': 1, 'o': 'out.txt', 'level': 'info'}, "
        "command=None, operands=['file.txt'])"
    )


def test_untouched_multiple_option_is_not_a_member():
    result = Getopt([Option("t", "tag", Arity.MULTIPLE)]).process([])
    assert result["tag"] == []
    assert "tag" not in result
    assert "t" not in result
    assert list(result) == []
    assert dict(result) == {}
    assert list(result.keys()) == []


def test_empty_inline_value_is_not_listed():
    result = Getopt([Option("n", "name", Arity.REQUIRED)]).process(["--name="])
    assert result["name"] == ""
    assert result.is_set("name")
    assert "name" not in result
    assert list(result) == []
    assert len(result) == 0
    assert result.all_set_options() == {"n": "", "name": ""}


def test_membership_agrees_with_iteration():
    result = make_result()
    for name in ["v", "q", "o", "level", "t"]:
        assert (name in result) == (name in list(result))
