from typing import Any, Dict, Type

from shakes.domain.exceptions import ValidationError
from .common import apply_owner_fields, get_owned_submission, require_identifier, save_submission


def update_submission(
    *,
    model: Type,
    record_id: str,
    owner_id: str,
    data: Dict[str, Any],
):
    """
    Update owner-editable fields on a submission.

    Design rules:
    - Only the owner's active records are reachable
    - Only EDITABLE_FIELDS are mutable; protected fields are rejected
    - No silent no-op updates
    - The slug is never regenerated once assigned
    - Invariants always revalidated
    """
    owner_id = require_identifier("owner_id", owner_id)
    record = get_owned_submission(model, record_id, owner_id)

    def prepare():
        changed_fields = apply_owner_fields(record, data)

        if not changed_fields:
            # Explicitly fail instead of silently succeeding
            raise ValidationError("data", "no_changes", "No valid fields provided for update")

        record.assert_valid()
        return {"fields": changed_fields}

    return save_submission(
        record,
        actor_id=owner_id,
        action=f"{model.KIND}.update",
        prepare=prepare,
    )
