import copy
import dataclasses
import pickle

import pytest

from argx.exceptions import (
    ArgumentIndexError,
    ArgxError,
    OptionKeyError,
    OptionValueError,
)
from argx.parser import ParseResult, classify


@pytest.fixture
def result():
    return classify(
        ["in.txt", "out.txt", "-o", "a", "-o", "b", "-output", "c", "-v", "--force"]
    )


def test_sizes(result):
    assert result.arg_size() == 2
    assert result.option_size() == 3
    assert result.flag_size() == 1


def test_argument(result):
    assert result.argument(0) == "in.txt"
    assert result.argument(1) == "out.txt"


def test_argument_out_of_range(result):
    with pytest.raises(ArgumentIndexError) as exc_info:
        result.argument(2)
    assert exc_info.value.index == 2
    assert exc_info.value.size == 2


def test_argument_negative_index_is_out_of_range(result):
    with pytest.raises(ArgumentIndexError):
        result.argument(-1)
    assert result.arg_or_default(-1, "x") == "x"


def test_strict_lookup_on_empty_result():
    empty = classify([])
    with pytest.raises(ArgumentIndexError):
        empty.argument(0)
    assert empty.arg_or_default(0, "x") == "x"


def test_argument_index_error_is_index_error():
    with pytest.raises(IndexError):
        ParseResult().argument(0)


def test_arg_or_default(result):
    assert result.arg_or_default(1, "x") == "out.txt"
    assert result.arg_or_default(5, "x") == "x"
    assert result.arg_or_default(5) is None


def test_option_single_key(result):
    assert result.option("o") == "a"
    assert result.option("output") == "c"


def test_option_aliases_first_present_wins(result):
    assert result.option(["output", "o"]) == "c"
    assert result.option(["missing", "o"]) == "a"


def test_option_multi_key_against_single_present_key():
    result = classify(["-b", "x"])
    assert result.option(["a", "b"]) == "x"


def test_option_missing_key_raises(result):
    with pytest.raises(OptionKeyError) as exc_info:
        result.option("missing")
    assert exc_info.value.keys == ("missing",)
    assert str(exc_info.value) == "Option key not found: missing"

    with pytest.raises(KeyError):
        result.option(["x", "y"])


def test_option_valueless_raises_value_error(result):
    with pytest.raises(OptionValueError) as exc_info:
        result.option("v")
    assert exc_info.value.key == "v"
    assert isinstance(exc_info.value, ArgxError)


def test_option_valueless_alias_still_wins(result):
    with pytest.raises(OptionValueError):
        result.option(["v", "o"])


def test_option_or_default(result):
    assert result.option_or_default("o", "z") == "a"
    assert result.option_or_default(["missing", "output"], "z") == "c"
    assert result.option_or_default("missing", "z") == "z"
    assert result.option_or_default("v", "z") == "z"
    assert result.option_or_default("missing") is None


def test_option_values(result):
    assert result.option_values("o") == ("a", "b")
    assert result.option_values(["o", "output"]) == ("a", "b", "c")
    assert result.option_values(["output", "o"]) == ("c", "a", "b")
    assert result.option_values("v") == ()
    assert result.option_values("missing") == ()
    assert result.option_values([]) == ()


def test_has_option(result):
    assert result.has_option("v")
    assert result.has_option(["missing", "o"])
    assert not result.has_option("missing")


def test_flag(result):
    assert result.flag("force")
    assert not result.flag("v")


def test_flag_count():
    result = classify(["--v", "--v", "x"])
    assert result.flag("v")
    assert result.flag_count("v") == 2
    assert result.flag_count("w") == 0


def test_collections_are_immutable(result):
    assert isinstance(result.args, tuple)
    assert isinstance(result.flags, tuple)
    with pytest.raises(TypeError):
        result.options["new"] = ("x",)
    with pytest.raises(AttributeError):
        result.args = ()
    assert result.options["o"] == ("a", "b")


def test_constructor_copies_inputs():
    args = ["a"]
    options = {"k": ["v"]}
    result = ParseResult(args=args, options=options, flags=["f"])
    args.append("b")
    options["k"].append("w")
    options["new"] = []
    assert result.args == ("a",)
    assert dict(result.options) == {"k": ("v",)}
    assert result.flags == ("f",)


def test_equality_and_hash():
    first = ParseResult(args=("a",), options={"k": ("v",)}, flags=("f",))
    second = classify(["a", "-k", "v", "--f"])
    assert first == second
    assert hash(first) == hash(second)
    assert first != classify(["a", "-k", "w", "--f"])


def test_to_dict(result):
    assert result.to_dict() == {
        "args": ["in.txt", "out.txt"],
        "options": {"o": ["a", "b"], "output": ["c"], "v": []},
        "flags": ["force"],
    }


def test_str(result):
    assert str(result) == "ParseResult(args=2, options=3, flags=1)"


def test_deepcopy_and_pickle_preserve_result():
    result = classify(["a", "-k", "v", "--f", "-", "-k", "-k", "w"])
    assert dict(result.options) == {"k": ("v", "w")}

    duplicate = copy.deepcopy(result)
    restored = pickle.loads(pickle.dumps(result))
    for other in (duplicate, restored, copy.copy(result)):
        assert other == result
        assert hash(other) == hash(result)
        with pytest.raises(TypeError):
            other.options["k"] = ()


def test_asdict():
    result = classify(["a", "-k", "v", "--f"])
    assert dataclasses.asdict(result) == {
        "args": ("a",),
        "options": {"k": ("v",)},
        "flags": ("f",),
    }


@pytest.mark.parametrize(
    "method, args",
    [
        ("pop", ("o",)),
        ("popitem", ()),
        ("clear", ()),
        ("setdefault", ("x", ())),
        ("update", ({"x": ()},)),
    ],
)
def test_options_reject_mutation(result, method, args):
    with pytest.raises(TypeError):
        getattr(result.options, method)(*args)
    with pytest.raises(TypeError):
        del result.options["o"]
    assert result.options["o"] == ("a", "b")
