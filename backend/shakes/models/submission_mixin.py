# shakes/models/submission_mixin.py
from sqlalchemy import inspect, select
from sqlalchemy.orm import declared_attr
from shakes.extensions import db
from shakes.domain.exceptions import ImmutableFieldError
from shakes.domain.lifecycle.submission import ModerationStatus

# Columns an owner may never write through the submission endpoints
PROTECTED_FIELDS = frozenset({
    "id",
    "owner_id",
    "status",
    "slug",
    "public_id",
    "reviewed_by",
    "reviewed_at",
    "admin_notes",
    "rejection_reason",
    "revision_notes",
    "is_active",
    "rating",
    "review_count",
    "created_at",
    "updated_at",
})


class ModerationMixin:
    """
    Columns and behaviour shared by every user-submitted content kind.

    Concrete models must define:
    - KIND: singular name used for counters and audit entity types
    - TITLE_FIELD: attribute the slug is derived from
    - PUBLIC_ID_BASE: first public id handed out for the kind
    - PRICE_FIELD: column the public min/max price filters apply to
    - EDITABLE_FIELDS: attributes the owner may set
    - FILTERABLE_FIELDS: attributes usable as public equality filters
    """

    KIND: str
    TITLE_FIELD: str
    PUBLIC_ID_BASE: int
    PRICE_FIELD: str
    EDITABLE_FIELDS: tuple = ()
    FILTERABLE_FIELDS: tuple = ()

    status = db.Column(
        db.String(32),
        nullable=False,
        default=ModerationStatus.PENDING.value,
        index=True,
    )
    slug = db.Column(db.String(220), unique=True, nullable=True, index=True)
    public_id = db.Column(db.Integer, unique=True, nullable=True, index=True)

    reviewed_by = db.Column(db.String(36), nullable=True)
    reviewed_at = db.Column(db.DateTime, nullable=True)
    admin_notes = db.Column(db.Text, nullable=True)
    rejection_reason = db.Column(db.Text, nullable=True)
    revision_notes = db.Column(db.Text, nullable=True)

    rating = db.Column(db.Float, nullable=False, default=0)
    review_count = db.Column(db.Integer, nullable=False, default=0)

    @declared_attr
    def owner_id(cls):
        return db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)

    @declared_attr
    def owner(cls):
        return db.relationship("User")

    @property
    def title_value(self):
        return getattr(self, self.TITLE_FIELD)

    def assert_valid(self):
        raise NotImplementedError


def guard_immutable_fields(mapper, connection, target):
    """
    owner_id never changes; slug and public_id never change once set.
    """
    state = inspect(target)
    table = mapper.local_table

    for field in ("owner_id", "slug", "public_id"):
        history = state.attrs[field].history
        if not history.has_changes():
            continue

        previous = list(history.deleted)
        if not previous:
            # Old value was never loaded (expired, or None); ask the row
            previous = [
                connection.execute(
                    select(table.c[field]).where(table.c.id == target.id)
                ).scalar()
            ]

        if any(value is not None for value in previous):
            raise ImmutableFieldError(field)
