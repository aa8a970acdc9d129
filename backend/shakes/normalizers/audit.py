# shakes/normalizers/audit.py
from typing import Any, Dict

from shakes.models.audit_log import AuditLog


def normalize_audit_log(log: AuditLog) -> Dict[str, Any]:
    """
    Audit entry as returned by GET /admin/audit.

    The action is "<kind>.<verb>" (e.g. "experience.approve"); it is
    split so clients can filter on the verb without parsing.
    """
    kind, _, verb = log.action.partition(".")

    return {
        "id": log.id,
        "actor_id": log.actor_id,
        "action": log.action,
        "verb": verb or kind,
        "entity_type": log.entity_type,
        "entity_id": log.entity_id,
        "payload": log.payload or {},
        "created_at": log.created_at.isoformat() if log.created_at else None,
    }
