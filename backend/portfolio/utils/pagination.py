# portfolio/utils/pagination.py
from __future__ import annotations

from datetime import datetime
from typing import Optional, Tuple, TypedDict, Type, Any

from dateutil.parser import isoparse
from sqlalchemy.orm import Query
from sqlalchemy.sql import or_, and_
from werkzeug.exceptions import BadRequest

MAX_PAGE_SIZE = 100


class CursorMeta(TypedDict):
    has_more: bool
    next_cursor: Optional[str]
    prev_cursor: Optional[str]


def encode_cursor(created_at: datetime, row_id: Any) -> str:
    """
    Encode a cursor from the boundary row of a page.

    Format: ISO8601|<id>
    """
    if not isinstance(created_at, datetime) or row_id is None:
        raise ValueError("created_at and row_id are required to encode cursor")

    return f"{created_at.isoformat()}|{row_id}"


def decode_cursor(cursor: str) -> Tuple[datetime, str]:
    if not cursor or "|" not in cursor:
        raise BadRequest("Invalid cursor format")

    try:
        ts_str, row_id = cursor.split("|", 1)
        return isoparse(ts_str), row_id
    except ValueError as exc:
        raise BadRequest("Invalid cursor format") from exc


def parse_limit(raw: Optional[str], default: int = 20) -> int:
    try:
        limit = int(raw) if raw is not None else default
    except ValueError as exc:
        raise BadRequest("Limit must be an integer") from exc

    if limit <= 0:
        raise BadRequest("Limit must be greater than zero")

    return min(limit, MAX_PAGE_SIZE)


def paginate_cursor(
    query: Query,
    *,
    model: Type[Any],
    limit: int,
    cursor: Optional[str] = None,
) -> tuple[list[Any], CursorMeta]:
    """
    Newest-first keyset pagination over (created_at, id).

    Fetches limit + 1 rows to detect continuation; next_cursor points at
    the last returned row and selects strictly older rows.
    """
    if cursor:
        cursor_ts, cursor_id = decode_cursor(cursor)
        query = query.filter(
            or_(
                model.created_at < cursor_ts,
                and_(
                    model.created_at == cursor_ts,
                    model.id < cursor_id,
                ),
            )
        )

    rows = (
        query.order_by(model.created_at.desc(), model.id.desc())
        .limit(limit + 1)
        .all()
    )

    has_more = len(rows) > limit
    items = rows[:limit]

    next_cursor: Optional[str] = None
    if has_more and items:
        last = items[-1]
        next_cursor = encode_cursor(last.created_at, last.id)

    return items, {
        "has_more": has_more,
        "next_cursor": next_cursor,
        "prev_cursor": cursor,
    }
