import pytest
from json2env.flattener import (
    EnvVar,
    NumberLiteral,
    ParseOptions,
    build_key,
    flatten_json,
    has_complex_items,
    render_scalar,
)


@pytest.fixture
def enumerated():
    return ParseOptions(key_separator="__", array_separator=",", enumerate_array=True)


class TestBuildKey:

    @pytest.mark.parametrize("segment, separator", [
        ("key", ""),
        ('"key"', "_"),
        ("0", "__"),
        ("", "."),
    ])
    def test_build_key_empty_prefix_returns_segment(self, segment, separator):
        assert build_key("", segment, separator) == segment

    def test_build_key_prepends_prefix_with_separator(self):
        assert build_key("prefix", '"key"', "_") == 'prefix_"key"'

    def test_build_key_default_separator(self):
        assert build_key("db", "host") == "db__host"

    def test_build_key_multichar_separator(self):
        assert build_key("a", "b", "::") == "a::b"


class TestFlattenJson:

    @pytest.mark.parametrize("value", [None, True, False, 0, 1.5, "text", NumberLiteral("1e5")])
    def test_flatten_scalar_root(self, value):
        # Scalar roots produce one entry with an empty key
        assert flatten_json(value) == [EnvVar("", value)]

    def test_flatten_preserves_field_order(self):
        data = {"b": 2, "a": 1}
        result = flatten_json(data)
        assert result == [EnvVar("b", 2), EnvVar("a", 1)]

    def test_flatten_deep_nesting(self):
        data = {'level1': {'level2': {'level3': {'level4': 'value'}}}}
        result = flatten_json(data)
        assert result == [EnvVar('level1__level2__level3__level4', 'value')]

    def test_flatten_custom_key_separator(self):
        data = {"db": {"host": "localhost"}}
        result = flatten_json(data, ParseOptions(key_separator="_"))
        assert result == [EnvVar("db_host", "localhost")]

    def test_flatten_array_not_enumerated(self):
        data = {"array": [1, 2, 3]}
        result = flatten_json(data, ParseOptions("__", ",", False))
        assert result == [EnvVar("array", "1,2,3")]

    def test_flatten_array_enumerated(self, enumerated):
        data = {"array": [1, 2, 3]}
        result = flatten_json(data, enumerated)
        assert result == [
            EnvVar("array__0", 1),
            EnvVar("array__1", 2),
            EnvVar("array__2", 3),
        ]

    def test_flatten_array_with_complex_item_is_always_enumerated(self):
        data = {"array": [1, {"x": 2}]}
        result = flatten_json(data)
        assert result == [EnvVar("array__0", 1), EnvVar("array__1__x", 2)]

    def test_flatten_nested_arrays_are_enumerated(self):
        data = {"matrix": [[1, 2], [3]]}
        result = flatten_json(data)
        # Inner arrays hold only scalars, so they collapse
        assert result == [EnvVar("matrix__0", "1,2"), EnvVar("matrix__1", "3")]

    def test_flatten_custom_array_separator(self):
        data = {"ports": [80, 443]}
        result = flatten_json(data, ParseOptions(array_separator=" "))
        assert result == [EnvVar("ports", "80 443")]

    def test_flatten_collapsed_array_renders_scalars(self):
        data = {"mixed": ["text", None, True, False, 2.0, NumberLiteral("1e5")]}
        result = flatten_json(data)
        assert result == [EnvVar("mixed", "text,null,true,false,2.0,1e5")]

    def test_flatten_collapsed_array_strips_quotes_and_backslashes(self):
        data = {"tags": ['a"b', "c\\d", "plain"]}
        result = flatten_json(data)
        assert result == [EnvVar("tags", "ab,cd,plain")]

    def test_flatten_collapsed_array_keeps_other_characters(self):
        data = {"lines": ["one\ntwo", "it's"]}
        result = flatten_json(data)
        assert result == [EnvVar("lines", "one\ntwo,it's")]

    def test_flatten_root_array(self):
        assert flatten_json([1, 2]) == [EnvVar("", "1,2")]
        assert flatten_json([{"a": 1}]) == [EnvVar("0__a", 1)]

    def test_flatten_empty_objects(self):
        # Empty structures produce no entries
        data = {'empty_obj': {}, 'nested': {'inner': {}}}
        assert flatten_json(data) == []

    def test_flatten_empty_array_enumerated(self, enumerated):
        assert flatten_json({"empty": []}, enumerated) == []

    def test_flatten_trims_key_whitespace(self):
        data = {" padded ": 1, "inner": {"b ": 2}}
        result = flatten_json(data)
        assert result == [EnvVar("padded", 1), EnvVar("inner__b", 2)]

    def test_flatten_does_not_sanitize_names(self):
        data = {"my-key": {"with.dot": "x"}}
        assert flatten_json(data) == [EnvVar("my-key__with.dot", "x")]

    def test_flatten_is_idempotent(self, enumerated):
        data = {"a": [1, {"b": [True, None]}], "c": "d"}
        first = flatten_json(data, enumerated)
        second = flatten_json(data, enumerated)
        assert first == second

    def test_flatten_does_not_mutate_input(self):
        data = {"a": [1, 2], "b": {"c": 3}}
        flatten_json(data)
        assert data == {"a": [1, 2], "b": {"c": 3}}


class TestHelpers:

    def test_has_complex_items(self):
        assert has_complex_items([1, {"a": 1}])
        assert has_complex_items([[1]])
        assert not has_complex_items([1, "a", None, True])
        assert not has_complex_items([])

    def test_render_scalar(self):
        assert render_scalar(None) == "null"
        assert render_scalar(True) == "true"
        assert render_scalar(False) == "false"
        assert render_scalar(42) == "42"
        assert render_scalar(1.0) == "1.0"
        assert render_scalar("raw \"text\"") == 'raw "text"'
        assert render_scalar(NumberLiteral("-0.50")) == "-0.50"

    def test_number_literal_equality(self):
        assert NumberLiteral("1.0") == NumberLiteral("1.0")
        assert NumberLiteral("1.0") != NumberLiteral("1")
        assert NumberLiteral("1") != "1"
