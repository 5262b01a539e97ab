"""Helpers that turn pagination cursors into request parameters."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl

from ..errors import MalformedQueryStringError

QueryParams = dict[str, str | list[str]]


def strip_first_character(value: str) -> str:
    """Return a copy of value without its first character.

    The search API prefixes cursors with ``?``; the character is dropped
    without checking what it is.

    Example:
        strip_first_character("?foo=bar&baz=qux") -> "foo=bar&baz=qux"
    """
    return value[1:]


def parse_query_string(query_string: str) -> QueryParams:
    """Parse a URL query string into a parameter mapping.

    Keys and values are percent-decoded. A key seen once maps to its string
    value; a repeated key maps to a list of its values in order of
    appearance. Values are never coerced to numbers.

    Args:
        query_string: Query string without the leading ``?``

    Returns:
        Mapping of parameter name to value(s)

    Raises:
        MalformedQueryStringError: If the string cannot be decoded or uses
            bracketed nested keys such as ``a[b]=1``
    """
    try:
        pairs = parse_qsl(query_string, keep_blank_values=True, errors="strict")
    except (UnicodeDecodeError, ValueError) as e:
        raise MalformedQueryStringError(
            f"Cannot decode query string: {e}",
            detail={"query_string": query_string},
        ) from e

    params: QueryParams = {}
    for key, value in pairs:
        if "[" in key or "]" in key:
            raise MalformedQueryStringError(
                f"Nested query parameter {key!r} is not supported",
                detail={"query_string": query_string, "key": key},
            )

        existing = params.get(key)
        if existing is None:
            params[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            params[key] = [existing, value]

    return params


def symbolize_keys(mapping: Mapping[Any, Any]) -> QueryParams:
    """Return a copy of a flat mapping with canonical string keys.

    Keys keep their case. Nested mappings are not supported.
    """
    result: QueryParams = {}
    for key, value in mapping.items():
        if isinstance(value, Mapping):
            raise MalformedQueryStringError(
                f"Nested value for {key!r} is not supported",
                detail={"key": str(key)},
            )
        result[str(key)] = list(value) if isinstance(value, list) else value
    return result


def query_string_to_dict(query_string: str) -> QueryParams:
    """Convert a query string to a parameter dict with canonical keys.

    Example:
        query_string_to_dict("foo=bar&baz=qux") -> {"foo": "bar", "baz": "qux"}
    """
    return symbolize_keys(parse_query_string(query_string))
