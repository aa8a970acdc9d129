from flask import request, jsonify
from flask_jwt_extended import jwt_required
from sqlalchemy import select
from shakes.utils.decorators import roles_required, active_user_required
from shakes.utils.pagination import paginate_cursor
from shakes.models.audit_log import AuditLog
from shakes.normalizers.audit import normalize_audit_log
from shakes.normalizers.pagination import normalize_pagination
from . import v1_bp

AUDIT_FILTERS = ("action", "actor_id", "entity_type", "entity_id")

@v1_bp.route("/admin/audit", methods=["GET"])
@jwt_required()
@active_user_required
@roles_required("admin")
def list_audit_logs():
    # Cursor Pagination
    limit = min(request.args.get("limit", 20, type=int), 100)

    stmt = select(AuditLog)

    # Optional filters
    for field in AUDIT_FILTERS:
        if value := request.args.get(field):
            stmt = stmt.where(getattr(AuditLog, field) == value)

    logs, cursor = paginate_cursor(
        stmt,
        model=AuditLog,
        cursor=request.args.get("cursor"),
        limit=limit,
    )

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=cursor))
