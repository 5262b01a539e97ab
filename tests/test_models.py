"""Tests for Pydantic models."""


def test_tweet_from_raw(sample_status_data):
    """Test creating a Tweet from a raw status record."""
    from tweet_search.models.tweet import Tweet

    tweet = Tweet.from_raw(sample_status_data)

    assert tweet.id == 1
    assert tweet.text == "I love cats"
    assert tweet.user.screen_name == "catfan"
    assert tweet.entities.hashtags[0]["text"] == "cats"


def test_tweet_accepts_minimal_and_unknown_fields():
    """Test Tweet with an empty record and extra keys."""
    from tweet_search.models.tweet import Tweet

    tweet = Tweet.from_raw({"possibly_sensitive": False})

    assert tweet.id is None
    assert tweet.retweet_count is None  # default
    assert tweet.user is None
    assert tweet.model_extra == {"possibly_sensitive": False}


def test_tweet_display_text_prefers_full_text():
    """Test display_text with and without extended text."""
    from tweet_search.models.tweet import Tweet

    assert Tweet(text="short", full_text="long version").display_text == "long version"
    assert Tweet(text="short").display_text == "short"


def test_search_metadata_is_frozen():
    """Test that SearchMetadata cannot be modified."""
    import pytest
    from pydantic import ValidationError

    from tweet_search.models.search_result import SearchMetadata

    metadata = SearchMetadata(query="cats", max_id=100)

    with pytest.raises(ValidationError):
        metadata.query = "dogs"


def test_tweet_json_serialization(sample_status_data):
    """Test Tweet JSON serialization keeps extra fields."""
    from tweet_search.models.tweet import Tweet

    sample_status_data["place"] = None
    json_data = Tweet.from_raw(sample_status_data).model_dump(mode="json")

    assert json_data["id"] == 1
    assert json_data["user"]["screen_name"] == "catfan"
    assert "place" in json_data


def test_tweet_accepts_null_counts_and_flags():
    """Test a status whose counters and flags are null."""
    from tweet_search.models.tweet import Tweet

    tweet = Tweet.from_raw(
        {
            "id": 1,
            "favorite_count": None,
            "favorited": None,
            "retweeted": None,
            "truncated": None,
            "user": {"id": 2, "followers_count": None, "verified": None},
            "entities": {"hashtags": None},
        }
    )

    assert tweet.id == 1
    assert tweet.favorite_count is None
    assert tweet.favorited is None
    assert tweet.user.followers_count is None
    assert tweet.entities.hashtags is None


def test_tweet_drops_mistyped_fields():
    """Test that a wrongly typed field is dropped instead of failing."""
    from tweet_search.models.tweet import Tweet

    tweet = Tweet.from_raw({"id": "abc", "text": "hello", "retweet_count": [1], "user": 5})

    assert tweet.id is None
    assert tweet.retweet_count is None
    assert tweet.user is None
    assert tweet.text == "hello"


def test_tweet_rejects_non_mapping_record():
    """Test that a record which is not a mapping still fails."""
    import pytest
    from pydantic import ValidationError

    from tweet_search.models.tweet import Tweet

    with pytest.raises(ValidationError):
        Tweet.from_raw(42)
