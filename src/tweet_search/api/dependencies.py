"""Dependency injection for FastAPI."""

from ..config import settings
from ..storage.json_store import JsonStore

_json_store: JsonStore | None = None


async def get_json_store() -> JsonStore:
    """Get the shared JSON store instance.

    Returns:
        JsonStore rooted at the configured data directory
    """
    global _json_store
    if _json_store is None:
        _json_store = JsonStore(settings.data_dir)
    return _json_store
