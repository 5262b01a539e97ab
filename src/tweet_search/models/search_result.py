"""Search result page model."""

import copy
from collections.abc import Iterator, Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import InvalidResponseError, MissingMetadataError
from ..utils.query_string import QueryParams, query_string_to_dict, strip_first_character
from .tweet import Tweet

logger = structlog.get_logger()


class SearchMetadata(BaseModel):
    """Pagination and query context returned alongside a page of statuses."""

    model_config = ConfigDict(extra="allow", frozen=True)

    completed_in: float | None = None
    max_id: int | None = None
    page: int | None = None
    query: str | None = None
    count: int | None = None
    since_id: int | None = None
    next_results: str | None = None
    refresh_url: str | None = None


class SearchResults:
    """One page of search results.

    Wraps the decoded response body. Statuses are converted to Tweet models
    once, in response order, and the page is read-only afterwards.
    """

    def __init__(self, attrs: Mapping[str, Any] | None = None):
        """Initialize a page from a decoded response body.

        Args:
            attrs: Response body with optional ``statuses`` and
                ``search_metadata`` keys

        Raises:
            InvalidResponseError: If statuses or search_metadata do not have
                the expected shape
        """
        self._attrs: dict[str, Any] = copy.deepcopy(dict(attrs or {}))

        try:
            self.items: tuple[Tweet, ...] = tuple(
                Tweet.from_raw(status) for status in self._attrs.get("statuses") or []
            )

            raw_metadata = self._attrs.get("search_metadata")
            self.metadata: SearchMetadata | None = (
                SearchMetadata.model_validate(raw_metadata) if raw_metadata is not None else None
            )
        except ValidationError as e:
            raise InvalidResponseError(
                "Response body is not a search result page",
                detail={
                    "errors": [
                        {"loc": list(error["loc"]), "msg": error["msg"]} for error in e.errors()
                    ]
                },
            ) from e
        except TypeError as e:
            raise InvalidResponseError(
                f"Response body is not a search result page: {e}",
            ) from e

        logger.debug(
            "search_results_loaded",
            items=len(self.items),
            has_metadata=self.metadata is not None,
            has_next_results=self.has_next_results,
        )

    @classmethod
    def from_response(cls, response: Any = None) -> "SearchResults":
        """Construct a page from a response envelope.

        Args:
            response: Mapping with a ``body`` key, or an object with a
                ``body`` attribute

        Returns:
            SearchResults built from the body, empty if there is none
        """
        if response is None:
            body = None
        elif isinstance(response, Mapping):
            body = response.get("body")
        else:
            body = getattr(response, "body", None)
        return cls(body)

    @property
    def attrs(self) -> dict[str, Any]:
        return self.to_dict()

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the raw response body this page was built from."""
        return copy.deepcopy(self._attrs)

    # Metadata accessors

    @property
    def completed_in(self) -> float | None:
        return self.metadata.completed_in if self.metadata else None

    @property
    def max_id(self) -> int | None:
        return self.metadata.max_id if self.metadata else None

    @property
    def page(self) -> int | None:
        return self.metadata.page if self.metadata else None

    @property
    def query(self) -> str | None:
        return self.metadata.query if self.metadata else None

    @property
    def results_per_page(self) -> int | None:
        return self.metadata.count if self.metadata else None

    rpp = results_per_page
    count = results_per_page

    @property
    def since_id(self) -> int | None:
        return self.metadata.since_id if self.metadata else None

    @property
    def has_next_results(self) -> bool:
        """Whether the API returned a cursor for the next page."""
        return bool(self.metadata and self.metadata.next_results)

    has_next_page = has_next_results

    # Pagination

    def next_results(self) -> QueryParams | None:
        """Return the query parameters for the next page.

        The result can be merged into the options of the original search
        call to fetch the next page.

        Returns:
            Parameter dict, or None when there is no next page
        """
        if not self.has_next_results:
            return None
        return query_string_to_dict(strip_first_character(self.metadata.next_results))

    next_page = next_results

    def refresh_results(self) -> QueryParams:
        """Return the query parameters for refreshing this search window.

        Returns:
            Parameter dict

        Raises:
            MissingMetadataError: If the page has no search metadata or no
                refresh URL
        """
        if self.metadata is None:
            raise MissingMetadataError("Search results have no search_metadata")
        if self.metadata.refresh_url is None:
            raise MissingMetadataError(
                "Search metadata has no refresh_url",
                detail={"query": self.metadata.query},
            )
        return query_string_to_dict(strip_first_character(self.metadata.refresh_url))

    refresh_page = refresh_results

    def next_request_params(self, options: Mapping[str, Any]) -> dict[str, Any] | None:
        """Merge next-page parameters over the original search options."""
        params = self.next_results()
        if params is None:
            return None
        return {**options, **params}

    def refresh_request_params(self, options: Mapping[str, Any]) -> dict[str, Any]:
        """Merge refresh parameters over the original search options."""
        return {**options, **self.refresh_results()}

    # Sequence behaviour over items

    def __iter__(self) -> Iterator[Tweet]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __contains__(self, item: object) -> bool:
        return item in self.items

    def __reversed__(self) -> Iterator[Tweet]:
        return reversed(self.items)

    def index(self, item: Tweet) -> int:
        return self.items.index(item)

    def __repr__(self) -> str:
        return (
            f"SearchResults(query={self.query!r}, items={len(self.items)}, "
            f"has_next_results={self.has_next_results})"
        )
