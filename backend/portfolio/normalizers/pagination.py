# portfolio/normalizers/pagination.py
from typing import Callable, Any, List, Dict

from portfolio.utils.pagination import CursorMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    cursor: CursorMeta,
) -> Dict[str, Any]:
    """
    Normalize a cursor-paginated API response.

    Shape:
    {"items": [...], "pagination": {"has_more", "next_cursor", "prev_cursor"}}
    """

    # Normalize ORM objects → dicts
    return {
        "items": [normalize_fn(item) for item in items],
        "pagination": {
            "has_more": cursor["has_more"],
            "next_cursor": cursor["next_cursor"],
            "prev_cursor": cursor["prev_cursor"],
        },
    }
