"""Helpers shared by the Supabase repositories."""

from datetime import datetime
from typing import Any

from meal_tracker.errors import StorageError


def execute(query: Any) -> Any:  # noqa: ANN401
    """Run a Supabase query, raising StorageError on client failures."""
    try:
        return query.execute()
    except Exception as exc:
        raise StorageError(str(exc)) from exc


def parse_timestamp(raw: object) -> datetime:
    """Parse an ISO timestamp column."""
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    raise StorageError(f"Invalid timestamp value: {raw!r}")


def escape_like(value: str) -> str:
    """Escape LIKE wildcards in user input.

    PostgREST reads `*` as `%`, so it is widened to a single-character
    wildcard and callers must re-check the rows they get back.
    """
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped.replace("*", "_")
