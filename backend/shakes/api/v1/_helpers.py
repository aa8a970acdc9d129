from flask import request
from shakes.domain.exceptions import ValidationError

PAGING_ARGS = ("page", "per_page")


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("body", "type", "Request body must be a JSON object")
    return data


def paging_args() -> dict:
    return {
        "page": request.args.get("page", type=int),
        "per_page": request.args.get("per_page", type=int),
    }


def filter_args() -> dict:
    return {key: value for key, value in request.args.items() if key not in PAGING_ARGS}
