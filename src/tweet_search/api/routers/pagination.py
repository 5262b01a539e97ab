"""Search result inspection endpoints."""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ...errors import MissingMetadataError, TweetSearchError
from ...models.search_result import SearchResults
from ...storage.json_store import JsonStore
from ..dependencies import get_json_store

logger = structlog.get_logger()

router = APIRouter(prefix="/search-results", tags=["Search Results"])


class PageSummary(BaseModel):
    """Metadata and pagination parameters of one result page."""

    query: str | None = None
    completed_in: float | None = None
    max_id: int | None = None
    since_id: int | None = None
    page: int | None = None
    results_per_page: int | None = None
    item_count: int
    has_next_results: bool
    next_results: dict[str, str | list[str]] | None = None
    refresh_results: dict[str, str | list[str]] | None = None


def summarize(page: SearchResults) -> PageSummary:
    """Build a PageSummary for a result page.

    Args:
        page: Result page to describe

    Returns:
        PageSummary; refresh_results is None when the page has no refresh cursor
    """
    try:
        refresh = page.refresh_results()
    except MissingMetadataError:
        refresh = None

    return PageSummary(
        query=page.query,
        completed_in=page.completed_in,
        max_id=page.max_id,
        since_id=page.since_id,
        page=page.page,
        results_per_page=page.results_per_page,
        item_count=len(page),
        has_next_results=page.has_next_results,
        next_results=page.next_results(),
        refresh_results=refresh,
    )


@router.post("/inspect", response_model=PageSummary)
async def inspect_body(body: dict[str, Any]) -> PageSummary:
    """Summarize a raw search response body.

    Args:
        body: Decoded response body with statuses and search_metadata

    Returns:
        PageSummary for the body
    """
    try:
        return summarize(SearchResults(body))
    except TweetSearchError as e:
        logger.warning("inspect_failed", code=e.code, error=e.message)
        raise HTTPException(status_code=422, detail=e.to_dict())


@router.get("/files/{name}", response_model=PageSummary)
async def inspect_file(
    name: str,
    store: JsonStore = Depends(get_json_store),
) -> PageSummary:
    """Summarize a response body stored in the data directory.

    Args:
        name: File name relative to the data directory
        store: Injected JSON store

    Returns:
        PageSummary for the stored body
    """
    try:
        page = store.load_page(name)
    except TweetSearchError as e:
        logger.warning("load_failed", code=e.code, error=e.message, file=name)
        status = 404 if e.code == "response_not_found" else 422
        raise HTTPException(status_code=status, detail=e.to_dict())

    try:
        return summarize(page)
    except TweetSearchError as e:
        logger.warning("inspect_failed", code=e.code, error=e.message, file=name)
        raise HTTPException(status_code=422, detail=e.to_dict())
