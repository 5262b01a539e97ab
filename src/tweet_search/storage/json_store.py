"""JSON file storage for search response bodies."""

import json
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import aiofiles
import structlog

from ..errors import ResponseLoadError
from ..models.search_result import SearchResults

logger = structlog.get_logger()


class JsonStore:
    """Reads and writes raw search response bodies as JSON files."""

    def __init__(self, data_dir: str = "./output"):
        """Initialize JSON store.

        Args:
            data_dir: Directory for JSON files
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _sanitize_filename(self, text: str) -> str:
        """Sanitize text for use in filename.

        Args:
            text: Text to sanitize

        Returns:
            Sanitized filename-safe string
        """
        sanitized = re.sub(r"[^\w\-]", "_", text)
        sanitized = re.sub(r"_+", "_", sanitized)
        sanitized = sanitized.strip("_")
        return sanitized[:50] or "search"

    def _generate_filename(self, query: str | None) -> str:
        """Generate unique filename for a result page.

        Args:
            query: Search query of the page, if known

        Returns:
            Filename with timestamp
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
        safe_query = self._sanitize_filename(query or "search")
        return f"{safe_query}_{timestamp}.json"

    def resolve(self, path: str | Path) -> Path:
        """Resolve a relative path against the data directory."""
        path = Path(path)
        return path if path.is_absolute() else self.data_dir / path

    def load_response_body(self, path: str | Path) -> dict[str, Any]:
        """Read a stored response body.

        Args:
            path: File path, absolute or relative to the data directory

        Returns:
            Decoded response body

        Raises:
            ResponseLoadError: If the file is missing or not a JSON object
        """
        filepath = self.resolve(path)
        try:
            with open(filepath, encoding="utf-8") as f:
                body = json.load(f)
        except FileNotFoundError as e:
            raise ResponseLoadError(
                f"Response file not found: {filepath}",
                code="response_not_found",
                detail={"path": str(filepath)},
            ) from e
        except (OSError, json.JSONDecodeError) as e:
            raise ResponseLoadError(
                f"Cannot read response file {filepath}: {e}",
                detail={"path": str(filepath)},
            ) from e

        if not isinstance(body, dict):
            raise ResponseLoadError(
                f"Response file {filepath} does not contain a JSON object",
                detail={"path": str(filepath)},
            )

        logger.debug("loaded_response_body", filepath=str(filepath))
        return body

    def load_page(self, path: str | Path) -> SearchResults:
        """Read a stored response body as a SearchResults page."""
        return SearchResults(self.load_response_body(path))

    async def write_page(self, page: SearchResults) -> str:
        """Write a result page to a JSON file.

        Args:
            page: SearchResults to save

        Returns:
            Path to the saved file
        """
        filepath = self.data_dir / self._generate_filename(page.query)

        async with aiofiles.open(filepath, "w", encoding="utf-8") as f:
            await f.write(json.dumps(page.to_dict(), indent=2, ensure_ascii=False))

        logger.info("saved_search_results", filepath=str(filepath), items=len(page))
        return str(filepath)

    def write_page_sync(self, page: SearchResults) -> str:
        """Synchronously write a result page to a JSON file.

        Args:
            page: SearchResults to save

        Returns:
            Path to the saved file
        """
        filepath = self.data_dir / self._generate_filename(page.query)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(page.to_dict(), f, indent=2, ensure_ascii=False)

        logger.info("saved_search_results", filepath=str(filepath), items=len(page))
        return str(filepath)
