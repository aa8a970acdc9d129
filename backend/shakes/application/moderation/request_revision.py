from typing import Optional, Type

from flask import current_app

from shakes.domain.lifecycle.submission import ModerationAction, assert_submission_transition
from shakes.models.base import utcnow
from shakes.utils.audit import log_action
from shakes.utils.transaction import transactional
from .common import get_locked_submission, optional_text, require_identifier


def request_revision(
    *,
    model: Type,
    record_id: str,
    actor_id: str,
    notes: Optional[str] = None,
):
    """Sends a pending submission back to its owner for changes."""
    actor_id = require_identifier("actor_id", actor_id)
    notes = optional_text("notes", notes)

    with transactional():
        record = get_locked_submission(model, record_id)

        target = assert_submission_transition(
            from_status=record.status, action=ModerationAction.REQUEST_REVISION
        )

        record.status = target.value
        record.reviewed_by = actor_id
        record.reviewed_at = utcnow()
        record.revision_notes = notes

        log_action(
            actor_id=actor_id,
            action=f"{model.KIND}.request_revision",
            entity_type=model.KIND,
            entity_id=record.id,
            payload={"notes": record.revision_notes},
        )

    current_app.logger.info("%s %s sent back for revision by %s", model.KIND, record.id, actor_id)
    return record
