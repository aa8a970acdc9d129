from sqlalchemy import event
from sqlalchemy.orm import validates
from shakes.extensions import db
from shakes.domain.invariants.experience import assert_experience
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin
from .submission_mixin import ModerationMixin, guard_immutable_fields


class UserExperience(BaseModel, ModerationMixin, SoftDeleteMixin):
    __tablename__ = "user_experiences"

    KIND = "experience"
    TITLE_FIELD = "title"
    PUBLIC_ID_BASE = 1000
    PRICE_FIELD = "price"

    EDITABLE_FIELDS = (
        "title",
        "location",
        "region",
        "category",
        "duration",
        "difficulty",
        "price",
        "original_price",
        "description",
        "overview",
        "highlights",
        "included",
        "images",
        "itinerary",
        "additional_info",
        "availability",
        "eco_friendly",
        "instant_booking",
        "free_cancel",
        "pickup_included",
        "contact_info",
    )
    FILTERABLE_FIELDS = (
        "region",
        "category",
        "difficulty",
        "location",
        "eco_friendly",
        "instant_booking",
        "free_cancel",
        "pickup_included",
    )

    title = db.Column(db.String(200), nullable=False)
    location = db.Column(db.String(200), nullable=False, index=True)
    region = db.Column(db.String(50), nullable=False, index=True)
    category = db.Column(db.String(50), nullable=False, index=True)
    duration = db.Column(db.String(100), nullable=False)
    difficulty = db.Column(db.String(20), nullable=False)

    price = db.Column(db.Float, nullable=False)
    original_price = db.Column(db.Float, nullable=True)

    # Rich content
    description = db.Column(db.Text, nullable=False)
    overview = db.Column(db.Text, nullable=False)
    highlights = db.Column(db.JSON, nullable=False, default=list)
    included = db.Column(db.JSON, nullable=False, default=list)
    images = db.Column(db.JSON, nullable=False, default=list)  # opaque media URLs
    itinerary = db.Column(db.JSON, nullable=False, default=list)  # [{time, title, description}]

    additional_info = db.Column(db.JSON, nullable=False, default=dict)
    availability = db.Column(db.JSON, nullable=True)

    eco_friendly = db.Column(db.Boolean, nullable=False, default=False)
    instant_booking = db.Column(db.Boolean, nullable=False, default=False)
    free_cancel = db.Column(db.Boolean, nullable=False, default=False)
    pickup_included = db.Column(db.Boolean, nullable=False, default=False)

    contact_info = db.Column(db.JSON, nullable=True)

    __table_args__ = (
        db.Index("ix_user_experiences_owner_status", "owner_id", "status"),
        db.Index("ix_user_experiences_status_created", "status", "created_at"),
        db.Index("ix_user_experiences_region_category", "region", "category"),
    )

    @validates("title", "location", "duration")
    def _strip(self, key, value):
        return value.strip() if isinstance(value, str) else value

    @validates("contact_info")
    def _lowercase_email(self, key, value):
        if isinstance(value, dict) and isinstance(value.get("email"), str):
            value = {**value, "email": value["email"].strip().lower()}
        return value

    def assert_valid(self):
        assert_experience(self)


event.listen(UserExperience, "before_update", guard_immutable_fields)
