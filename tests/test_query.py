"""Tests for hyperbridge.http.query: bracket-notation query codec."""

import datetime

import pytest

from hyperbridge.http.query import (
    build_query_string,
    decode_component,
    encode_component,
    parse_query_string,
    stringify,
)

RESERVED = ";:@&=+$,/?%#"
RESERVED_ENCODED = "%3B%3A%40%26%3D%2B%24%2C%2F%3F%25%23"


class TestComponentCodec:
    def test_encode_keeps_uri_component_safe_set(self) -> None:
        assert encode_component("azAZ09-_.!~*'()") == "azAZ09-_.!~*'()"

    def test_encode_reserved(self) -> None:
        assert encode_component(RESERVED) == RESERVED_ENCODED

    def test_encode_space_and_unicode(self) -> None:
        assert encode_component("a b") == "a%20b"
        assert encode_component("ö") == "%C3%B6"

    def test_decode(self) -> None:
        assert decode_component("%C3%B6") == "ö"
        assert decode_component("a%20b") == "a b"

    def test_decode_keeps_plus(self) -> None:
        assert decode_component("a+b") == "a+b"

    def test_decode_malformed_escape_is_kept(self) -> None:
        assert decode_component("100%") == "100%"
        assert decode_component("%zz") == "%zz"

    def test_decode_invalid_utf8_is_kept(self) -> None:
        assert decode_component("%c5%a1%e8ZM%80%82H") == "%c5%a1%e8ZM%80%82H"


class TestStringify:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "true"),
            (False, "false"),
            (0, "0"),
            (2.0, "2"),
            (2.5, "2.5"),
            ("x", "x"),
        ],
    )
    def test_scalars(self, value: object, expected: str) -> None:
        assert stringify(value) == expected


class TestBuildQueryString:
    @pytest.mark.parametrize("value", [123, None, "abc", [1, 2, 3], (1,)])
    def test_non_mapping_is_empty(self, value: object) -> None:
        assert build_query_string(value) == ""

    def test_flat(self) -> None:
        assert build_query_string({"a": "b", "c": 1}) == "a=b&c=1"

    def test_escaped_key_and_value(self) -> None:
        assert build_query_string({RESERVED: RESERVED}) == f"{RESERVED_ENCODED}={RESERVED_ENCODED}"

    def test_unicode(self) -> None:
        assert build_query_string({"ö": "ö"}) == "%C3%B6=%C3%B6"

    def test_nested_mapping(self) -> None:
        assert build_query_string({"a": {"b": 1, "c": 2}}) == "a%5Bb%5D=1&a%5Bc%5D=2"

    def test_deep_nested_mapping(self) -> None:
        assert build_query_string({"a": {"b": {"c": 1, "d": 2}}}) == "a%5Bb%5D%5Bc%5D=1&a%5Bb%5D%5Bd%5D=2"

    def test_list(self) -> None:
        assert build_query_string({"a": ["x", "y"]}) == "a%5B0%5D=x&a%5B1%5D=y"

    def test_list_with_duplicates(self) -> None:
        assert build_query_string({"a": ["x", "x"]}) == "a%5B0%5D=x&a%5B1%5D=x"

    def test_nested_list(self) -> None:
        assert build_query_string({"a": [["x", "y"]]}) == "a%5B0%5D%5B0%5D=x&a%5B0%5D%5B1%5D=y"

    def test_mapping_in_list(self) -> None:
        assert build_query_string({"a": [{"b": 1, "c": 2}]}) == "a%5B0%5D%5Bb%5D=1&a%5B0%5D%5Bc%5D=2"

    def test_date_uses_str(self) -> None:
        date = datetime.date(1970, 1, 1)
        assert build_query_string({"a": date}) == "a=1970-01-01"

    def test_none_and_empty_are_bare_keys(self) -> None:
        assert build_query_string({"a": None}) == "a"
        assert build_query_string({"a": ""}) == "a"
        assert build_query_string({"a": None, "b": "c"}) == "a&b=c"

    def test_zero_and_false_keep_value(self) -> None:
        assert build_query_string({"a": 0}) == "a=0"
        assert build_query_string({"a": False}) == "a=false"


class TestParseQueryString:
    def test_empty(self) -> None:
        assert parse_query_string("") == {}
        assert parse_query_string(None) == {}
        assert parse_query_string("?") == {}

    def test_leading_question_mark(self) -> None:
        assert parse_query_string("?aaa=bbb") == {"aaa": "bbb"}

    def test_flat(self) -> None:
        assert parse_query_string("a=b&c=d") == {"a": "b", "c": "d"}

    def test_escaped_values(self) -> None:
        assert parse_query_string(f"?{RESERVED_ENCODED}={RESERVED_ENCODED}") == {RESERVED: RESERVED}

    def test_wrongly_escaped_value_is_kept(self) -> None:
        assert parse_query_string("?test=%c5%a1%e8ZM%80%82H") == {"test": "%c5%a1%e8ZM%80%82H"}

    def test_escaped_slash_followed_by_number(self) -> None:
        assert parse_query_string("?hello=%2Fen%2F1")["hello"] == "/en/1"

    def test_escaped_brackets(self) -> None:
        assert parse_query_string("?a%5B%5D=b") == {"a": ["b"]}

    def test_unicode(self) -> None:
        assert parse_query_string("?%C3%B6=%C3%B6") == {"ö": "ö"}
        assert parse_query_string("?ö=ö") == {"ö": "ö"}

    def test_nested_mapping(self) -> None:
        assert parse_query_string("a[b]=x&a[c]=y") == {"a": {"b": "x", "c": "y"}}

    def test_deep_nested_mapping(self) -> None:
        assert parse_query_string("a[b][c]=x&a[b][d]=y") == {"a": {"b": {"c": "x", "d": "y"}}}

    def test_indexed_list(self) -> None:
        assert parse_query_string("a[0]=x&a[1]=y") == {"a": ["x", "y"]}

    def test_nested_list(self) -> None:
        assert parse_query_string("a[0][0]=x&a[0][1]=y") == {"a": [["x", "y"]]}

    def test_mapping_in_list(self) -> None:
        assert parse_query_string("a[0][c]=x&a[0][d]=y") == {"a": [{"c": "x", "d": "y"}]}

    def test_list_in_mapping(self) -> None:
        assert parse_query_string("a[b][0]=x&a[b][1]=y") == {"a": {"b": ["x", "y"]}}

    def test_append_without_index(self) -> None:
        result = parse_query_string("a[]=x&a[]=y&b[]=w&b[]=z")
        assert result == {"a": ["x", "y"], "b": ["w", "z"]}

    def test_named_key_turns_list_into_mapping(self) -> None:
        assert parse_query_string("a[0]=x&a[b]=y") == {"a": {"0": "x", "b": "y"}}

    def test_casts_only_booleans(self) -> None:
        assert parse_query_string("a=true&b=false&c=TRUE") == {"a": True, "b": False, "c": "TRUE"}

    def test_does_not_cast_numbers(self) -> None:
        result = parse_query_string("a=1&b=-2.3&c=0x10&d=1e2&e=Infinity&f=NaN&g=1970-01-01")
        assert result == {
            "a": "1",
            "b": "-2.3",
            "c": "0x10",
            "d": "1e2",
            "e": "Infinity",
            "f": "NaN",
            "g": "1970-01-01",
        }

    def test_empty_and_void_values(self) -> None:
        assert parse_query_string("a=") == {"a": ""}
        assert parse_query_string("a") == {"a": ""}

    def test_value_keeps_later_equals_signs(self) -> None:
        assert parse_query_string("a=1=2") == {"a": "1=2"}

    def test_skips_empty_entries(self) -> None:
        assert parse_query_string("a=1&&b=2&") == {"a": "1", "b": "2"}

    def test_later_values_win(self) -> None:
        assert parse_query_string("a=1&b=2&a=3") == {"a": "3", "b": "2"}

    def test_proto_entry_dropped(self) -> None:
        assert parse_query_string("a=b&__proto__%5BtoString%5D=123") == {"a": "b"}

    def test_constructor_is_an_ordinary_key(self) -> None:
        result = parse_query_string("a=b&constructor%5Bprototype%5D%5BtoString%5D=123")
        assert list(result) == ["a", "constructor"]
        assert result["constructor"] == {"prototype": {"toString": "123"}}


class TestRoundTrip:
    @pytest.mark.parametrize(
        "value",
        [
            {"a": "b", "c": "d"},
            {"a": {"b": ["x", "y"], "c": {"d": "e"}}},
            {"flag": True, "off": False},
            {"ö": "a b&c=d"},
        ],
    )
    def test_string_leaves_survive(self, value: dict) -> None:
        assert parse_query_string(build_query_string(value)) == value

    def test_none_comes_back_empty(self) -> None:
        assert parse_query_string(build_query_string({"a": None})) == {"a": ""}
