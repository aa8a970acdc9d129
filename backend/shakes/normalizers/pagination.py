# shakes/normalizers/pagination.py
from typing import Callable, Any, List, Optional, Dict

from flask_sqlalchemy.pagination import Pagination

from shakes.utils.pagination import CursorMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    cursor: Optional[CursorMeta] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
    total: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Normalize paginated API responses.

    Supports:
    - Offset pagination (submission listings)
    - Cursor pagination (audit trail)

    Exactly ONE pagination strategy should be used per response.
    """
    response: Dict[str, Any] = {
        "items": [normalize_fn(item) for item in items],
    }

    if cursor is not None:
        response["pagination"] = dict(cursor)
        return response

    if page is not None and per_page is not None:
        pagination: Dict[str, Any] = {"page": page, "per_page": per_page}

        if total is not None:
            pagination["total"] = total
            pagination["total_pages"] = (total + per_page - 1) // per_page

        response["pagination"] = pagination

    return response


def normalize_page_of(
    pagination: Pagination,
    normalize_fn: Callable[[Any], Dict[str, Any]],
) -> Dict[str, Any]:
    """Shortcut for Flask-SQLAlchemy Pagination results."""
    return normalize_pagination(
        pagination.items,
        normalize_fn,
        page=pagination.page,
        per_page=pagination.per_page,
        total=pagination.total,
    )
