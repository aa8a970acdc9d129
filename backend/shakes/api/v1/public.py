from flask import jsonify
from shakes.application.moderation.kinds import resolve_kind
from shakes.application.moderation.queries import list_approved, get_public
from shakes.normalizers.submission import normalize_public_submission
from shakes.normalizers.pagination import normalize_page_of
from ._helpers import filter_args, paging_args
from . import v1_bp


@v1_bp.route("/public/<kind>", methods=["GET"])
def list_public_content(kind):
    model = resolve_kind(kind)
    pagination = list_approved(model, filter_args(), **paging_args())

    return jsonify(normalize_page_of(pagination, normalize_public_submission))

@v1_bp.route("/public/<kind>/<identifier>", methods=["GET"])
def get_public_content(kind, identifier):
    model = resolve_kind(kind)
    record = get_public(model, identifier)

    return jsonify({"data": normalize_public_submission(record)})
