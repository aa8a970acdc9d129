from typing import Type

from flask import current_app

from shakes.utils.audit import log_action
from shakes.utils.transaction import transactional
from .common import get_owned_submission, require_identifier


def delete_submission(
    *,
    model: Type,
    record_id: str,
    owner_id: str,
) -> None:
    """
    Soft-delete a submission by flipping is_active.
    Hard deletes are not supported.
    """
    owner_id = require_identifier("owner_id", owner_id)

    with transactional():
        record = get_owned_submission(model, record_id, owner_id)
        record.soft_delete()

        log_action(
            actor_id=owner_id,
            action=f"{model.KIND}.delete",
            entity_type=model.KIND,
            entity_id=record.id,
            payload={"status": record.status},
        )

    current_app.logger.info("%s %s deactivated by owner %s", model.KIND, record_id, owner_id)
