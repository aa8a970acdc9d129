# shakes/application/moderation/approve_submission.py
from typing import Optional, Type

from flask import current_app
from sqlalchemy.exc import IntegrityError

from shakes.domain.exceptions import UniquenessConflict
from shakes.domain.lifecycle.submission import ModerationAction, assert_submission_transition
from shakes.models.base import utcnow
from shakes.utils.audit import log_action
from shakes.utils.public_id import next_public_id
from shakes.utils.transaction import transactional
from .common import get_locked_submission, optional_text, require_identifier


def approve_submission(
    *,
    model: Type,
    record_id: str,
    actor_id: str,
    notes: Optional[str] = "",
):
    """
    Approves a submission and assigns its public id.

    Responsibilities:
    - transactional boundary spanning the lock, id allocation and update
    - lifecycle transition enforcement
    - public id allocation (at most once per record)
    - audit logging
    """
    actor_id = require_identifier("actor_id", actor_id)
    notes = optional_text("notes", notes)

    try:
        with transactional():
            # 1️⃣ Fetch submission with row-level lock
            record = get_locked_submission(model, record_id)

            # 2️⃣ Lifecycle transition enforcement
            target = assert_submission_transition(
                from_status=record.status, action=ModerationAction.APPROVE
            )

            # 3️⃣ Apply state change and review metadata
            record.status = target.value
            record.reviewed_by = actor_id
            record.reviewed_at = utcnow()
            record.admin_notes = notes or ""

            # 4️⃣ Allocate public id on first approval only
            if record.public_id is None:
                record.public_id = next_public_id(model)

            # 5️⃣ Audit logging
            log_action(
                actor_id=actor_id,
                action=f"{model.KIND}.approve",
                entity_type=model.KIND,
                entity_id=record.id,
                payload={"public_id": record.public_id},
            )
    except IntegrityError as exc:
        raise UniquenessConflict("public_id") from exc

    current_app.logger.info(
        "%s %s approved by %s (public_id=%s)", model.KIND, record.id, actor_id, record.public_id
    )
    return record
