from typing import Type

from flask import current_app
from sqlalchemy import func, select, update
from sqlalchemy.dialects import postgresql, sqlite

from shakes.extensions import db
from shakes.domain.exceptions import UniquenessConflict
from shakes.models.public_id_counter import PublicIdCounter

DEFAULT_MAX_ATTEMPTS = 5


def _insert_ignoring_conflicts(values: dict):
    dialect = db.session.get_bind().dialect.name

    if dialect == "postgresql":
        return postgresql.insert(PublicIdCounter).values(**values).on_conflict_do_nothing()
    if dialect == "sqlite":
        return sqlite.insert(PublicIdCounter).values(**values).on_conflict_do_nothing()

    raise NotImplementedError(f"Public id counters are not supported on {dialect}")


def ensure_counter(model: Type) -> None:
    """
    Seed the kind's counter row if missing.

    Seed value is the highest public id already assigned in the kind,
    or PUBLIC_ID_BASE - 1 so the first allocation yields the base.
    """
    exists = db.session.execute(
        select(PublicIdCounter.kind).where(PublicIdCounter.kind == model.KIND)
    ).scalar_one_or_none()

    if exists is not None:
        return

    highest = db.session.execute(select(func.max(model.public_id))).scalar()
    seed = highest if highest is not None else model.PUBLIC_ID_BASE - 1

    db.session.execute(_insert_ignoring_conflicts({"kind": model.KIND, "last_value": seed}))


def read_counter(kind: str) -> int:
    return db.session.execute(
        select(PublicIdCounter.last_value)
        .where(PublicIdCounter.kind == kind)
        .with_for_update()
    ).scalar_one()


def compare_and_swap(kind: str, expected: int, new_value: int) -> bool:
    result = db.session.execute(
        update(PublicIdCounter)
        .where(PublicIdCounter.kind == kind, PublicIdCounter.last_value == expected)
        .values(last_value=new_value)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


def next_public_id(model: Type) -> int:
    """
    Allocate the next public id for a content kind.

    Must run inside the caller's transaction so the counter bump commits
    (or rolls back) together with the approval that consumes it.
    """
    max_attempts = current_app.config.get("PUBLIC_ID_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)

    ensure_counter(model)

    for attempt in range(1, max_attempts + 1):
        current = read_counter(model.KIND)
        candidate = current + 1

        if compare_and_swap(model.KIND, current, candidate):
            return candidate

        current_app.logger.warning(
            "Public id counter for %s moved during allocation (attempt %d/%d)",
            model.KIND,
            attempt,
            max_attempts,
        )

    raise UniquenessConflict("public_id")
