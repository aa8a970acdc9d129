import re
from typing import Optional, Type

from shakes.extensions import db

NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """
    Lowercase, collapse every run of non-alphanumerics into one hyphen,
    trim leading/trailing hyphens.

    >>> slugify("  Lake View Cottage! ")
    'lake-view-cottage'
    """
    return NON_ALPHANUMERIC.sub("-", (text or "").lower()).strip("-")


def slug_exists(model: Type, slug: str, exclude_id: Optional[str] = None) -> bool:
    query = db.session.query(model.id).filter(model.slug == slug)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    return db.session.query(query.exists()).scalar()


def candidate_slugs(base: str):
    yield base
    counter = 1
    while True:
        yield f"{base}-{counter}"
        counter += 1


def unique_slug(model: Type, text: str, *, exclude_id: Optional[str] = None) -> str:
    """
    First free slug among base, base-1, base-2, ... in the model's table.
    """
    base = slugify(text) or model.KIND

    for candidate in candidate_slugs(base):
        if not slug_exists(model, candidate, exclude_id):
            return candidate


def is_slug_conflict(exc) -> bool:
    """True when an IntegrityError came from a unique slug constraint."""
    return "slug" in str(getattr(exc, "orig", exc)).lower()
