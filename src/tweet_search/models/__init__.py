"""Pydantic models for search API data structures."""

from .search_result import SearchMetadata, SearchResults
from .tweet import Tweet
from .user import TweetEntities, TweetUser

__all__ = [
    "SearchMetadata",
    "SearchResults",
    "Tweet",
    "TweetEntities",
    "TweetUser",
]
