"""User and entity models attached to a tweet."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class TweetUser(BaseModel):
    """Author of a tweet."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    id_str: str | None = None
    name: str | None = None
    screen_name: str | None = None
    description: str | None = None
    location: str | None = None
    followers_count: int | None = None
    friends_count: int | None = None
    statuses_count: int | None = None
    verified: bool | None = None
    protected: bool | None = None
    profile_image_url_https: str | None = None
    created_at: str | None = None


class TweetEntities(BaseModel):
    """Hashtags, links and mentions found in a tweet."""

    model_config = ConfigDict(extra="allow")

    hashtags: list[dict[str, Any]] | None = None
    urls: list[dict[str, Any]] | None = None
    user_mentions: list[dict[str, Any]] | None = None
    symbols: list[dict[str, Any]] | None = None
    media: list[dict[str, Any]] | None = None
