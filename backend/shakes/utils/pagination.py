# shakes/utils/pagination.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Tuple, TypedDict, Type

from sqlalchemy import Select, and_, or_

from shakes.extensions import db
from shakes.domain.exceptions import ValidationError


class CursorMeta(TypedDict):
    """
    Cursor pagination metadata.

    Explicit keys prevent contract drift across cursor-paginated endpoints.
    """
    has_more: bool
    next_cursor: Optional[str]


def encode_cursor(created_at: datetime, row_id: Any) -> str:
    """
    Encode a cursor using a stable, deterministic sort key.

    Format: ISO8601|<id>
    """
    if not isinstance(created_at, datetime) or row_id is None:
        raise ValueError("created_at and row_id are required to encode cursor")

    return f"{created_at.isoformat()}|{row_id}"


def decode_cursor(cursor: str) -> Tuple[datetime, str]:
    """
    Decode a cursor into (created_at, id).
    """
    if not cursor or "|" not in cursor:
        raise ValidationError("cursor", "format", "Invalid cursor format")

    ts_str, row_id = cursor.split("|", 1)
    try:
        return datetime.fromisoformat(ts_str), row_id
    except ValueError as exc:
        raise ValidationError("cursor", "format", "Invalid cursor format") from exc


def paginate_cursor(
    stmt: Select,
    *,
    model: Type[Any],
    cursor: Optional[str],
    limit: int,
) -> tuple[list[Any], CursorMeta]:
    """
    Execute a cursor-paginated select, newest first.

    Ordering contract:
      ORDER BY created_at DESC, id DESC

    Strategy:
    - Fetch limit + 1 rows to detect continuation
    - Trim extra row from result set
    - Next cursor comes from the last returned row
    """
    if limit <= 0:
        raise ValidationError("limit", "min", "Limit must be greater than zero")

    if cursor:
        cursor_ts, cursor_id = decode_cursor(cursor)
        stmt = stmt.where(
            or_(
                model.created_at < cursor_ts,
                and_(model.created_at == cursor_ts, model.id < cursor_id),
            )
        )

    rows = (
        db.session.execute(
            stmt.order_by(model.created_at.desc(), model.id.desc()).limit(limit + 1)
        )
        .scalars()
        .all()
    )

    has_more = len(rows) > limit
    items = rows[:limit]

    next_cursor = None
    if has_more and items:
        last = items[-1]
        next_cursor = encode_cursor(last.created_at, last.id)

    return items, {"has_more": has_more, "next_cursor": next_cursor}
