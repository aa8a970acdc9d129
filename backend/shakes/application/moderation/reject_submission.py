from typing import Type

from flask import current_app

from shakes.domain.exceptions import ValidationError
from shakes.domain.invariants.fields import is_blank
from shakes.domain.lifecycle.submission import ModerationAction, assert_submission_transition
from shakes.models.base import utcnow
from shakes.utils.audit import log_action
from shakes.utils.transaction import transactional
from .common import get_locked_submission, require_identifier


def reject_submission(
    *,
    model: Type,
    record_id: str,
    actor_id: str,
    reason: str,
):
    """
    Rejects a pending (or revision-requested) submission.
    A non-empty reason is mandatory; the public id stays unset.
    """
    actor_id = require_identifier("actor_id", actor_id)

    if not isinstance(reason, str) or is_blank(reason):
        raise ValidationError("reason", "required", "Rejection reason is required")

    with transactional():
        record = get_locked_submission(model, record_id)

        target = assert_submission_transition(
            from_status=record.status, action=ModerationAction.REJECT
        )

        record.status = target.value
        record.reviewed_by = actor_id
        record.reviewed_at = utcnow()
        record.rejection_reason = reason.strip()

        log_action(
            actor_id=actor_id,
            action=f"{model.KIND}.reject",
            entity_type=model.KIND,
            entity_id=record.id,
            payload={"reason": record.rejection_reason},
        )

    current_app.logger.info("%s %s rejected by %s", model.KIND, record.id, actor_id)
    return record
