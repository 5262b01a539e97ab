"""Tweet model built from a raw search result record."""

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError

from .user import TweetEntities, TweetUser

logger = structlog.get_logger()


class Tweet(BaseModel):
    """A single status returned by the search API."""

    model_config = ConfigDict(extra="allow")

    # Identifiers
    id: int | None = None
    id_str: str | None = None

    # Content
    text: str | None = None
    full_text: str | None = None
    lang: str | None = None
    source: str | None = None
    truncated: bool | None = None

    # Dates
    created_at: str | None = None

    # Threading
    in_reply_to_status_id: int | None = None
    in_reply_to_user_id: int | None = None
    in_reply_to_screen_name: str | None = None

    # Engagement metrics
    retweet_count: int | None = None
    favorite_count: int | None = None
    retweeted: bool | None = None
    favorited: bool | None = None

    # Related data
    user: TweetUser | None = None
    entities: TweetEntities | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_raw(cls, record: Mapping[str, Any]) -> "Tweet":
        """Build a Tweet from a decoded status record.

        Known fields whose values do not match their type are dropped so
        that one odd field does not discard the whole status.

        Args:
            record: Raw status record

        Returns:
            Tweet for the record

        Raises:
            ValidationError: If the record is not a mapping
        """
        try:
            return cls.model_validate(record)
        except ValidationError as e:
            if not isinstance(record, Mapping):
                raise
            invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
            logger.warning(
                "tweet_fields_dropped",
                tweet_id=record.get("id_str") or record.get("id"),
                fields=sorted(str(name) for name in invalid),
            )
            return cls.model_validate(
                {key: value for key, value in record.items() if key not in invalid}
            )

    @property
    def display_text(self) -> str | None:
        """Extended text when the API returned it, plain text otherwise."""
        return self.full_text if self.full_text is not None else self.text
