"""Typed access to social-media search API result pages."""

__version__ = "0.1.0"

from .errors import (
    InvalidResponseError,
    MalformedQueryStringError,
    MissingMetadataError,
    ResponseLoadError,
    TweetSearchError,
)
from .models import SearchMetadata, SearchResults, Tweet

__all__ = [
    "__version__",
    "SearchMetadata",
    "SearchResults",
    "Tweet",
    "TweetSearchError",
    "InvalidResponseError",
    "MissingMetadataError",
    "MalformedQueryStringError",
    "ResponseLoadError",
]
