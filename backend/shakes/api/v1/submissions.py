# shakes/api/v1/submissions.py
from flask import jsonify, request
from flask_jwt_extended import jwt_required, get_jwt_identity
from shakes.utils.decorators import active_user_required
from shakes.utils.optimistic_lock import enforce_optimistic_lock
from shakes.application.moderation.kinds import resolve_kind
from shakes.application.moderation.common import get_owned_submission
from shakes.application.moderation.create_submission import create_submission
from shakes.application.moderation.update_submission import update_submission
from shakes.application.moderation.delete_submission import delete_submission
from shakes.application.moderation.queries import list_by_owner
from shakes.normalizers.submission import normalize_submission
from shakes.normalizers.pagination import normalize_page_of
from ._helpers import json_body, paging_args
from . import v1_bp

# ------------------------
# Owner submissions
# ------------------------

@v1_bp.route("/user-content/<kind>", methods=["POST"])
@jwt_required()
@active_user_required
def create_user_content(kind):
    model = resolve_kind(kind)

    record = create_submission(
        model=model,
        owner_id=get_jwt_identity(),
        data=json_body(),
    )

    return jsonify({
        "message": "Submission received and awaiting review",
        "data": normalize_submission(record),
    }), 201

@v1_bp.route("/user-content/<kind>/my", methods=["GET"])
@jwt_required()
@active_user_required
def list_my_content(kind):
    model = resolve_kind(kind)
    pagination = list_by_owner(
        model,
        get_jwt_identity(),
        status=request.args.get("status"),
        **paging_args(),
    )

    return jsonify(normalize_page_of(pagination, normalize_submission))

@v1_bp.route("/user-content/<kind>/<record_id>", methods=["PUT"])
@jwt_required()
@active_user_required
def update_user_content(kind, record_id):
    model = resolve_kind(kind)
    owner_id = get_jwt_identity()

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(get_owned_submission(model, record_id, owner_id))

    record = update_submission(
        model=model,
        record_id=record_id,
        owner_id=owner_id,
        data=json_body(),
    )

    return jsonify({
        "message": "Submission updated successfully",
        "data": normalize_submission(record),
    }), 200

@v1_bp.route("/user-content/<kind>/<record_id>", methods=["DELETE"])
@jwt_required()
@active_user_required
def delete_user_content(kind, record_id):
    model = resolve_kind(kind)
    delete_submission(model=model, record_id=record_id, owner_id=get_jwt_identity())

    return jsonify({"message": "Submission deleted successfully"}), 200
