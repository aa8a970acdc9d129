# shakes/api/v1/moderation.py
from flask import jsonify, request
from flask_jwt_extended import jwt_required, get_jwt_identity
from shakes.utils.decorators import roles_required, active_user_required
from shakes.application.moderation.kinds import resolve_kind
from shakes.application.moderation.approve_submission import approve_submission
from shakes.application.moderation.reject_submission import reject_submission
from shakes.application.moderation.request_revision import request_revision
from shakes.application.moderation.queries import (
    list_pending,
    list_for_review,
    list_user_content,
    moderation_stats,
)
from shakes.normalizers.owner import normalize_owner
from shakes.normalizers.submission import normalize_submission
from shakes.normalizers.pagination import normalize_page_of
from ._helpers import json_body, paging_args
from . import v1_bp


def _admin_view(record):
    return normalize_submission(record, admin=True, include_owner=True)

# ------------------------
# Review queues
# ------------------------

@v1_bp.route("/admin/moderation/stats", methods=["GET"])
@jwt_required()
@active_user_required
@roles_required("admin")
def get_moderation_stats():
    return jsonify({"data": moderation_stats()})

@v1_bp.route("/admin/moderation/<kind>/pending", methods=["GET"])
@jwt_required()
@active_user_required
@roles_required("admin")
def list_pending_content(kind):
    model = resolve_kind(kind)
    pagination = list_pending(model, **paging_args())

    return jsonify(normalize_page_of(pagination, _admin_view))

@v1_bp.route("/admin/moderation/<kind>", methods=["GET"])
@jwt_required()
@active_user_required
@roles_required("admin")
def list_content_for_review(kind):
    model = resolve_kind(kind)
    pagination = list_for_review(model, status=request.args.get("status"), **paging_args())

    return jsonify(normalize_page_of(pagination, _admin_view))

@v1_bp.route("/admin/moderation/user/<user_id>/content", methods=["GET"])
@jwt_required()
@active_user_required
@roles_required("admin")
def list_user_content_for_admin(user_id):
    content = list_user_content(user_id)

    return jsonify({
        "data": {
            "user": normalize_owner(content["user"], include_email=True),
            "accommodations": [
                normalize_submission(record, admin=True) for record in content["accommodations"]
            ],
            "experiences": [
                normalize_submission(record, admin=True) for record in content["experiences"]
            ],
            "summary": content["summary"],
        }
    })

# ------------------------
# Moderation actions
# ------------------------

@v1_bp.route("/admin/moderation/<kind>/<record_id>/approve", methods=["PUT"])
@jwt_required()
@active_user_required
@roles_required("admin")
def approve_content(kind, record_id):
    model = resolve_kind(kind)
    data = json_body()

    record = approve_submission(
        model=model,
        record_id=record_id,
        actor_id=get_jwt_identity(),
        notes=data.get("notes", ""),
    )

    return jsonify({
        "message": f"{model.KIND.capitalize()} approved successfully",
        "data": _admin_view(record),
    }), 200

@v1_bp.route("/admin/moderation/<kind>/<record_id>/reject", methods=["PUT"])
@jwt_required()
@active_user_required
@roles_required("admin")
def reject_content(kind, record_id):
    model = resolve_kind(kind)
    data = json_body()

    record = reject_submission(
        model=model,
        record_id=record_id,
        actor_id=get_jwt_identity(),
        reason=data.get("reason"),
    )

    return jsonify({
        "message": f"{model.KIND.capitalize()} rejected",
        "data": _admin_view(record),
    }), 200

@v1_bp.route("/admin/moderation/<kind>/<record_id>/request-revision", methods=["PUT"])
@jwt_required()
@active_user_required
@roles_required("admin")
def request_content_revision(kind, record_id):
    model = resolve_kind(kind)
    data = json_body()

    record = request_revision(
        model=model,
        record_id=record_id,
        actor_id=get_jwt_identity(),
        notes=data.get("notes"),
    )

    return jsonify({
        "message": "Revision requested",
        "data": _admin_view(record),
    }), 200
