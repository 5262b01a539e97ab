"""Pytest fixtures for Tweet Search tests."""

import json

import pytest


@pytest.fixture
def sample_status_data():
    """Sample raw status record."""
    return {
        "id": 1,
        "id_str": "1",
        "text": "I love cats",
        "created_at": "Mon Sep 24 03:35:21 +0000 2012",
        "lang": "en",
        "retweet_count": 3,
        "favorite_count": 7,
        "user": {
            "id": 42,
            "screen_name": "catfan",
            "name": "Cat Fan",
            "followers_count": 120,
        },
        "entities": {
            "hashtags": [{"text": "cats", "indices": [7, 12]}],
            "urls": [],
            "user_mentions": [],
        },
    }


@pytest.fixture
def sample_response_body():
    """Sample search response body with metadata and two statuses."""
    return {
        "statuses": [{"id": 1, "text": "first"}, {"id": 2, "text": "second"}],
        "search_metadata": {
            "completed_in": 0.02,
            "max_id": 100,
            "page": 1,
            "query": "cats",
            "count": 2,
            "since_id": 50,
            "next_results": "?max_id=99&q=cats",
            "refresh_url": "?since_id=100&q=cats",
        },
    }


@pytest.fixture
def sample_search_results(sample_response_body):
    """SearchResults built from the sample body."""
    from tweet_search.models.search_result import SearchResults

    return SearchResults(sample_response_body)


@pytest.fixture
def stored_response(tmp_path, sample_response_body):
    """Sample response body written to a data directory."""
    path = tmp_path / "cats.json"
    path.write_text(json.dumps(sample_response_body), encoding="utf-8")
    return path
