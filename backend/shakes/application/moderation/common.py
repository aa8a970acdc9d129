from typing import Any, Callable, Dict, List, Optional, Type

from flask import current_app
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from shakes.extensions import db
from shakes.domain.exceptions import NotFoundError, UniquenessConflict, ValidationError
from shakes.domain.invariants.fields import is_blank
from shakes.models.submission_mixin import PROTECTED_FIELDS
from shakes.utils.audit import log_action
from shakes.utils.slug import is_slug_conflict, unique_slug
from shakes.utils.transaction import transactional


def require_identifier(field: str, value: Optional[str]) -> str:
    if is_blank(value):
        raise ValidationError(field, "required", f"{field} is required")
    return str(value)


def optional_text(field: str, value: Any) -> Optional[str]:
    """None or a stripped string; anything else is a type error."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(field, "type", f"{field} must be a string")
    return value.strip()


def get_locked_submission(model: Type, record_id: str):
    """Fetch an active submission with a row-level lock."""
    record = (
        db.session.execute(
            select(model)
            .where(model.id == record_id, model.is_active.is_(True))
            .with_for_update()
        )
        .scalar_one_or_none()
    )

    if record is None:
        raise NotFoundError(f"{model.KIND.capitalize()} not found")

    return record


def get_owned_submission(model: Type, record_id: str, owner_id: str):
    record = db.session.execute(
        select(model).where(
            model.id == record_id,
            model.owner_id == owner_id,
            model.is_active.is_(True),
        )
    ).scalar_one_or_none()

    if record is None:
        # Foreign records are indistinguishable from missing ones
        raise NotFoundError(f"{model.KIND.capitalize()} not found")

    return record


def apply_owner_fields(record, data: Dict[str, Any]) -> List[str]:
    """
    Copy owner-editable fields from data onto record.

    Design rules:
    - moderation metadata, slug, public id and ownership are read-only
    - keys outside EDITABLE_FIELDS are rejected
    - null is rejected for non-nullable columns
    Returns the names of fields whose value changed.
    """
    model = type(record)

    for field in data:
        if field in PROTECTED_FIELDS:
            raise ValidationError(field, "read_only", f"{field} cannot be set by the owner")
        if field not in model.EDITABLE_FIELDS:
            raise ValidationError(field, "unknown", f"{field} is not a {model.KIND} field")

    columns = model.__table__.columns
    changed: List[str] = []

    for field in model.EDITABLE_FIELDS:
        if field not in data:
            continue

        value = data[field]
        if value is None and not columns[field].nullable:
            raise ValidationError(field, "required", f"{field} is required")

        if getattr(record, field) != value:
            setattr(record, field, value)
            changed.append(field)

    return changed


def save_submission(
    record,
    *,
    actor_id: str,
    action: str,
    prepare: Optional[Callable[[], Dict[str, Any]]] = None,
):
    """
    Persist a submission, assigning its slug on first save.

    The slug pre-check and the INSERT/UPDATE are not atomic, so a unique
    constraint failure on slug rolls back and retries with the next free
    suffix, up to SLUG_MAX_ATTEMPTS. prepare runs inside every attempt
    (a rollback expires pending changes on persistent records) and returns
    the audit payload.
    """
    model = type(record)
    max_attempts = current_app.config.get("SLUG_MAX_ATTEMPTS", 5)

    for attempt in range(1, max_attempts + 1):
        try:
            with transactional():
                payload = prepare() if prepare else {}

                if record.slug is None and not is_blank(record.title_value):
                    record.slug = unique_slug(model, record.title_value, exclude_id=record.id)

                db.session.add(record)
                db.session.flush()

                log_action(
                    actor_id=actor_id,
                    action=action,
                    entity_type=model.KIND,
                    entity_id=record.id,
                    payload={**payload, "slug": record.slug},
                )
            return record

        except IntegrityError as exc:
            if not is_slug_conflict(exc):
                raise

            current_app.logger.warning(
                "Slug collision for %s %s (attempt %d/%d)",
                model.KIND,
                record.id,
                attempt,
                max_attempts,
            )
            if record in db.session:
                db.session.expire(record)
            else:
                record.slug = None

    raise UniquenessConflict("slug")
