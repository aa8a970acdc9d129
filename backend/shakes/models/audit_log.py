# shakes/models/audit_log.py
from shakes.extensions import db
from .base import BaseModel
from sqlalchemy import event


class AuditLog(BaseModel):
    __tablename__ = "audit_logs"

    __table_args__ = (
        db.Index("ix_audit_cursor", "created_at", "id"),
        db.Index("ix_audit_actor_action", "actor_id", "action"),
    )

    actor_id = db.Column(db.String(36), nullable=False, index=True)
    action = db.Column(db.String(50), nullable=False, index=True)

    entity_type = db.Column(db.String(50), nullable=False, index=True)
    entity_id = db.Column(db.String(36), nullable=False, index=True)

    payload = db.Column(db.JSON, nullable=False, default=dict)

@event.listens_for(AuditLog, 'before_update')
@event.listens_for(AuditLog, 'before_delete')
def prevent_audit_mutation(mapper, connection, target):
    raise RuntimeError("Audit logs are immutable")
