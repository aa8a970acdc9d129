from .owner import normalize_owner

REVIEW_FIELDS = ("admin_notes", "rejection_reason", "revision_notes")


def _isoformat(value):
    return value.isoformat() if value is not None else None


def normalize_submission(record, admin=False, include_owner=False):
    """
    Persisted shape of a submission.

    Public views hide reviewer notes and embed the owner as
    `host` (accommodations) or `creator` (experiences).
    """
    data = {
        "id": record.id,
        "kind": record.KIND,
        "owner_id": record.owner_id,
        "status": record.status,
        "slug": record.slug,
        "public_id": record.public_id,
    }

    for field in record.EDITABLE_FIELDS:
        data[field] = getattr(record, field)

    data.update({
        "rating": record.rating,
        "review_count": record.review_count,
        "reviewed_by": record.reviewed_by,
        "reviewed_at": _isoformat(record.reviewed_at),
        "is_active": record.is_active,
        "created_at": _isoformat(record.created_at),
        "updated_at": _isoformat(record.updated_at),
    })

    if admin:
        for field in REVIEW_FIELDS:
            data[field] = getattr(record, field)
    else:
        # Owners still need to see why their submission came back
        data["rejection_reason"] = record.rejection_reason
        data["revision_notes"] = record.revision_notes

    if include_owner:
        data["owner"] = normalize_owner(record.owner, include_email=admin)

    return data


def normalize_public_submission(record):
    data = normalize_submission(record)

    for field in REVIEW_FIELDS + ("reviewed_by", "reviewed_at", "is_active"):
        data.pop(field, None)

    owner_key = "host" if record.KIND == "accommodation" else "creator"
    data[owner_key] = normalize_owner(record.owner)
    data["user_generated"] = True
    return data
