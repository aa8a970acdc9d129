"""
Read paths over user submissions.

Every function here is read-only. List functions return a
Flask-SQLAlchemy Pagination ordered newest first
(created_at DESC, id DESC).
"""
import math
from typing import Any, Dict, List, Optional, Type

from flask import current_app
from sqlalchemy import String, cast, func, or_, select
from sqlalchemy.orm import joinedload

from shakes.extensions import db
from shakes.domain.exceptions import NotFoundError, ValidationError
from shakes.domain.invariants.accommodation import AMENITIES
from shakes.domain.lifecycle.submission import STATUS_VALUES, ModerationStatus
from shakes.models.user import User
from .common import require_identifier
from .kinds import SUBMISSION_MODELS

TRUE_VALUES = {"true", "1", "yes"}
FALSE_VALUES = {"false", "0", "no"}

# Integer columns are 32-bit on PostgreSQL
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def _page_args(page: Optional[int], per_page: Optional[int]) -> Dict[str, int]:
    default_size = current_app.config.get("DEFAULT_PAGE_SIZE", 20)
    max_size = current_app.config.get("MAX_PAGE_SIZE", 100)

    page = 1 if page is None else page
    per_page = default_size if per_page is None else per_page

    if page < 1:
        raise ValidationError("page", "min", "page must be at least 1")
    if page > INT_MAX:
        raise ValidationError("page", "max", "page is out of range")
    if per_page < 1:
        raise ValidationError("per_page", "min", "per_page must be at least 1")

    return {"page": page, "per_page": min(per_page, max_size)}


def _paginate(model: Type, stmt, page: Optional[int], per_page: Optional[int]):
    stmt = stmt.order_by(model.created_at.desc(), model.id.desc())
    return db.paginate(stmt, error_out=False, count=True, **_page_args(page, per_page))



def _parse_int(field: str, value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise ValidationError(field, "type", f"{field} must be a number") from exc

    if number < INT_MIN:
        raise ValidationError(field, "min", f"{field} is out of range")
    if number > INT_MAX:
        raise ValidationError(field, "max", f"{field} is out of range")
    return number


def _parse_float(field: str, value: str) -> float:
    try:
        number = float(value)
    except ValueError as exc:
        raise ValidationError(field, "type", f"{field} must be a number") from exc

    if not math.isfinite(number):
        raise ValidationError(field, "type", f"{field} must be a finite number")
    return number


def _active_status(status: Optional[str]) -> Optional[str]:
    if status and status not in STATUS_VALUES:
        raise ValidationError("status", "enum", f"{status} is not a valid status")
    return status or None


def coerce_filter_value(model: Type, field: str, value: Any) -> Any:
    """
    Convert query-string values to the column's python type.
    Non-string values are passed through unchanged.
    """
    if not isinstance(value, str):
        return value

    python_type = model.__table__.columns[field].type.python_type

    if python_type is bool:
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        raise ValidationError(field, "type", f"{field} must be true or false")

    if python_type is int:
        return _parse_int(field, value)

    if python_type is float:
        return _parse_float(field, value)

    return value


def _amenity_filter(model: Type, value: Any) -> List:
    if not hasattr(model, "amenities"):
        raise ValidationError("amenities", "filterable", f"Cannot filter {model.KIND} by amenities")

    wanted = value if isinstance(value, list) else str(value).split(",")
    clauses = []

    for amenity in (item.strip() for item in wanted):
        if not amenity:
            continue
        if amenity not in AMENITIES:
            raise ValidationError("amenities", "enum", f"{amenity} is not a valid amenity")
        # JSON list serialised as text contains each member quoted
        clauses.append(cast(model.amenities, String).contains(f'"{amenity}"', autoescape=True))

    return clauses


def list_pending(model: Type, *, page: Optional[int] = None, per_page: Optional[int] = None):
    stmt = (
        select(model)
        .options(joinedload(model.owner))
        .where(
            model.status == ModerationStatus.PENDING.value,
            model.is_active.is_(True),
        )
    )
    return _paginate(model, stmt, page, per_page)


def list_approved(
    model: Type,
    filters: Optional[Dict[str, Any]] = None,
    *,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
):
    """
    Public feed of approved, active records.

    Filters:
    - min_price / max_price: inclusive range on the kind's price column
    - amenities: comma separated, every listed amenity must be present
    - location: case-insensitive substring match
    - any other FILTERABLE_FIELDS key: equality
    """
    stmt = (
        select(model)
        .options(joinedload(model.owner))
        .where(
            model.status == ModerationStatus.APPROVED.value,
            model.is_active.is_(True),
        )
    )

    price = getattr(model, model.PRICE_FIELD)

    for field, value in (filters or {}).items():
        if field == "min_price":
            stmt = stmt.where(price >= _parse_float(field, str(value)))
        elif field == "max_price":
            stmt = stmt.where(price <= _parse_float(field, str(value)))
        elif field == "amenities":
            stmt = stmt.where(*_amenity_filter(model, value))
        elif field == "location":
            needle = str(value).strip().lower()
            stmt = stmt.where(func.lower(model.location, type_=String).contains(needle, autoescape=True))
        elif field in model.FILTERABLE_FIELDS:
            stmt = stmt.where(getattr(model, field) == coerce_filter_value(model, field, value))
        else:
            raise ValidationError(field, "filterable", f"Cannot filter {model.KIND} by {field}")

    return _paginate(model, stmt, page, per_page)


def list_by_owner(
    model: Type,
    owner_id: str,
    *,
    status: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
):
    owner_id = require_identifier("owner_id", owner_id)
    status = _active_status(status)

    stmt = select(model).where(
        model.owner_id == owner_id,
        model.is_active.is_(True),
    )
    if status:
        stmt = stmt.where(model.status == status)

    return _paginate(model, stmt, page, per_page)


def list_for_review(
    model: Type,
    *,
    status: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
):
    """Admin listing across all statuses, optionally narrowed to one."""
    status = _active_status(status)

    stmt = (
        select(model)
        .options(joinedload(model.owner))
        .where(model.is_active.is_(True))
    )
    if status:
        stmt = stmt.where(model.status == status)

    return _paginate(model, stmt, page, per_page)


def list_user_content(user_id: str) -> Dict[str, Any]:
    """
    Everything one user has submitted, every kind and status,
    deactivated records included. Admin only.
    """
    user_id = require_identifier("user_id", user_id)

    user = db.session.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")

    content: Dict[str, Any] = {"user": user}
    summary: Dict[str, int] = {}

    for segment, model in SUBMISSION_MODELS.items():
        records = db.session.execute(
            select(model)
            .where(model.owner_id == user_id)
            .order_by(model.created_at.desc(), model.id.desc())
        ).scalars().all()

        content[segment] = records
        summary[f"total_{segment}"] = len(records)

    summary["total"] = sum(summary.values())
    content["summary"] = summary
    return content


def get_public(model: Type, identifier: str):
    """
    Fetch one approved, active record by public id or internal id.
    Only plain ASCII digits are tried as a public id.
    """
    identifier = str(identifier)
    matches = [model.id == identifier]
    if identifier.isascii() and identifier.isdigit():
        public_id = int(identifier)
        if public_id <= INT_MAX:
            matches.append(model.public_id == public_id)

    record = db.session.execute(
        select(model)
        .options(joinedload(model.owner))
        .where(
            or_(*matches),
            model.status == ModerationStatus.APPROVED.value,
            model.is_active.is_(True),
        )
    ).scalar_one_or_none()

    if record is None:
        raise NotFoundError(f"{model.KIND.capitalize()} not found")

    return record


def moderation_stats() -> Dict[str, Any]:
    """Active submission counts per status for every kind."""
    stats: Dict[str, Any] = {}
    summary = {f"total_{status}": 0 for status in STATUS_VALUES}

    for segment, model in SUBMISSION_MODELS.items():
        rows = db.session.execute(
            select(model.status, func.count(model.id))
            .where(model.is_active.is_(True))
            .group_by(model.status)
        ).all()

        counts = {status: 0 for status in STATUS_VALUES}
        counts.update({status: count for status, count in rows})
        counts["total"] = sum(counts[status] for status in STATUS_VALUES)

        for status in STATUS_VALUES:
            summary[f"total_{status}"] += counts[status]

        stats[segment] = counts

    stats["summary"] = summary
    return stats
