"""Tests for query string helpers."""

import pytest

from tweet_search.errors import MalformedQueryStringError
from tweet_search.utils.query_string import (
    parse_query_string,
    query_string_to_dict,
    strip_first_character,
    symbolize_keys,
)


def test_strip_first_character_drops_question_mark():
    assert strip_first_character("?foo=bar&baz=qux") == "foo=bar&baz=qux"


def test_strip_first_character_does_not_check_the_character():
    assert strip_first_character("foo=bar") == "oo=bar"
    assert strip_first_character("") == ""


def test_strip_first_character_leaves_input_untouched():
    value = "?a=1"
    strip_first_character(value)
    assert value == "?a=1"


def test_parse_single_values_as_strings():
    assert parse_query_string("count=10&max_id=42") == {"count": "10", "max_id": "42"}


def test_parse_repeated_keys_collapse_in_order():
    assert parse_query_string("foo=1&foo=2&bar=x&foo=3") == {
        "foo": ["1", "2", "3"],
        "bar": "x",
    }


def test_parse_percent_decodes_keys_and_values():
    params = parse_query_string("q=%23cats%20and+dogs&include%5Fentities=1")
    assert params == {"q": "#cats and dogs", "include_entities": "1"}


def test_parse_keeps_blank_values_and_case():
    assert parse_query_string("Q=&flag") == {"Q": "", "flag": ""}


def test_parse_empty_string():
    assert parse_query_string("") == {}


def test_parse_rejects_nested_keys():
    with pytest.raises(MalformedQueryStringError) as exc_info:
        parse_query_string("user[name]=bob")
    assert exc_info.value.code == "malformed_query_string"
    assert exc_info.value.detail["key"] == "user[name]"


def test_parse_rejects_undecodable_bytes():
    with pytest.raises(MalformedQueryStringError):
        parse_query_string("q=%ff%fe")


def test_symbolize_keys_converts_keys_to_strings():
    assert symbolize_keys({1: "a", "B": ["x", "y"]}) == {"1": "a", "B": ["x", "y"]}


def test_symbolize_keys_rejects_nested_mappings():
    with pytest.raises(MalformedQueryStringError):
        symbolize_keys({"user": {"name": "bob"}})


def test_query_string_to_dict():
    assert query_string_to_dict("foo=bar&baz=qux") == {"foo": "bar", "baz": "qux"}
