from flask import request
from datetime import timezone
from dateutil.parser import parse
from shakes.domain.exceptions import StaleRecordError, ValidationError


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def enforce_optimistic_lock(entity):
    """
    Enforces optimistic locking using the If-Unmodified-Since header.
    Raises StaleRecordError if the entity has been modified since.
    """
    client_ts = request.headers.get("If-Unmodified-Since")
    if not client_ts:
        return  # No optimistic lock requested

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ValueError, OverflowError) as exc:
        raise ValidationError(
            "If-Unmodified-Since", "format", "Invalid If-Unmodified-Since header"
        ) from exc

    server_ts = normalize_ts(entity.updated_at)

    if server_ts > client_ts:
        raise StaleRecordError("Conflict detected. Resource has been modified.")
