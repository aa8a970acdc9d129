from typing import Any, Dict, Type

from flask import current_app

from shakes.domain.lifecycle.submission import ModerationStatus
from .common import apply_owner_fields, require_identifier, save_submission


def create_submission(
    *,
    model: Type,
    owner_id: str,
    data: Dict[str, Any],
):
    """
    Create a new user submission in PENDING state.

    Edge cases handled:
    - Missing owner
    - Attempts to set moderation metadata, slug or public id
    - Field constraint violations
    - Concurrent slug collisions (bounded retry)
    """
    owner_id = require_identifier("owner_id", owner_id)

    record = model()
    record.owner_id = owner_id
    record.status = ModerationStatus.PENDING.value
    record.is_active = True

    apply_owner_fields(record, data)
    record.assert_valid()

    save_submission(
        record,
        actor_id=owner_id,
        action=f"{model.KIND}.create",
        prepare=lambda: {"status": record.status},
    )

    current_app.logger.info(
        "%s %s submitted by %s (slug=%s)", model.KIND, record.id, owner_id, record.slug
    )
    return record
