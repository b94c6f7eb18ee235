"""
Query helpers shared by the Supabase repositories.
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple

from domain.models import PageRequest


def is_valid_id(value: Any) -> bool:
    """Primary keys are UUIDs; anything else cannot match a row."""
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def serialize(values: Dict[str, Any]) -> Dict[str, Any]:
    """Convert datetimes to ISO strings so the payload is JSON-safe."""
    return {
        key: value.isoformat() if isinstance(value, datetime) else value
        for key, value in values.items()
    }


def fetch_page(client, table: str, filters: Dict[str, Any], order_by: str, page: PageRequest) -> Tuple[List[Dict[str, Any]], int]:
    """
    Run a filtered, sorted, offset/limit query.

    Counts first, then skips the row query entirely when the requested
    page lies past the end (PostgREST rejects out-of-range offsets).

    Returns:
        Tuple of (rows for this page, total matching rows)
    """
    count_query = client.table(table).select("id", count="exact")
    for column, value in filters.items():
        count_query = count_query.eq(column, value)
    total = count_query.execute().count or 0

    if total == 0 or page.skip >= total:
        return [], total

    query = client.table(table).select("*")
    for column, value in filters.items():
        query = query.eq(column, value)
    result = query \
        .order(order_by, desc=True) \
        .range(page.skip, page.skip + page.limit - 1) \
        .execute()
    return result.data or [], total
