"""Utility modules for Tweet Search."""

from .logging import setup_logging
from .query_string import (
    parse_query_string,
    query_string_to_dict,
    strip_first_character,
    symbolize_keys,
)

__all__ = [
    "setup_logging",
    "parse_query_string",
    "query_string_to_dict",
    "strip_first_character",
    "symbolize_keys",
]
