"""Exception hierarchy for Tweet Search."""

from typing import Any


class TweetSearchError(Exception):
    """Base error for this package.

    Args:
        message: Human-readable description
        code: Machine-readable slug
        detail: Extra context for logs and HTTP responses
    """

    default_code: str = "tweet_search_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict."""
        return {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }


class MissingMetadataError(TweetSearchError):
    """A page without search metadata was asked for a refresh cursor."""

    default_code = "missing_metadata"


class MalformedQueryStringError(TweetSearchError):
    """A pagination cursor could not be parsed into flat parameters."""

    default_code = "malformed_query_string"


class ResponseLoadError(TweetSearchError):
    """A stored response body could not be read or decoded."""

    default_code = "response_load_error"


class InvalidResponseError(TweetSearchError):
    """A response body does not have the shape of a search result page."""

    default_code = "invalid_response"
