from sqlalchemy import event
from sqlalchemy.orm import validates
from shakes.extensions import db
from shakes.domain.invariants.accommodation import assert_accommodation
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin
from .submission_mixin import ModerationMixin, guard_immutable_fields


class UserAccommodation(BaseModel, ModerationMixin, SoftDeleteMixin):
    __tablename__ = "user_accommodations"

    KIND = "accommodation"
    TITLE_FIELD = "name"
    PUBLIC_ID_BASE = 2000
    PRICE_FIELD = "price_per_night"

    EDITABLE_FIELDS = (
        "name",
        "type",
        "description",
        "location",
        "region",
        "address",
        "latitude",
        "longitude",
        "price_per_night",
        "currency",
        "max_guests",
        "bedrooms",
        "bathrooms",
        "beds",
        "amenities",
        "images",
        "house_rules",
        "cancellation_policy",
        "check_in_time",
        "check_out_time",
        "min_night_stay",
        "features",
        "contact_info",
        "business_info",
    )
    FILTERABLE_FIELDS = (
        "type",
        "region",
        "location",
        "currency",
        "cancellation_policy",
        "max_guests",
    )

    # Basic information
    name = db.Column(db.String(200), nullable=False)
    type = db.Column(db.String(50), nullable=False)
    description = db.Column(db.Text, nullable=False)

    # Location
    location = db.Column(db.String(200), nullable=False, index=True)
    region = db.Column(db.String(50), nullable=False, index=True)
    address = db.Column(db.JSON, nullable=False, default=dict)
    latitude = db.Column(db.Float, nullable=True)
    longitude = db.Column(db.Float, nullable=True)

    # Pricing & capacity
    price_per_night = db.Column(db.Float, nullable=False)
    currency = db.Column(db.String(3), nullable=False, default="USD")
    max_guests = db.Column(db.Integer, nullable=False)
    bedrooms = db.Column(db.Integer, nullable=True)
    bathrooms = db.Column(db.Integer, nullable=True)
    beds = db.Column(db.Integer, nullable=True)

    amenities = db.Column(db.JSON, nullable=False, default=list)
    images = db.Column(db.JSON, nullable=False, default=list)  # [{url, caption, is_primary}]

    # Rules & policies
    house_rules = db.Column(db.JSON, nullable=False, default=list)
    cancellation_policy = db.Column(db.String(20), nullable=False)
    check_in_time = db.Column(db.String(5), nullable=False, default="14:00")
    check_out_time = db.Column(db.String(5), nullable=False, default="11:00")
    min_night_stay = db.Column(db.Integer, nullable=False, default=1)

    features = db.Column(db.JSON, nullable=False, default=dict)
    contact_info = db.Column(db.JSON, nullable=False, default=dict)
    business_info = db.Column(db.JSON, nullable=True)

    __table_args__ = (
        db.Index("ix_user_accommodations_owner_status", "owner_id", "status"),
        db.Index("ix_user_accommodations_status_created", "status", "created_at"),
        db.Index("ix_user_accommodations_region_type", "region", "type"),
    )

    @validates("name", "location")
    def _strip(self, key, value):
        return value.strip() if isinstance(value, str) else value

    @validates("contact_info")
    def _lowercase_email(self, key, value):
        if isinstance(value, dict) and isinstance(value.get("email"), str):
            value = {**value, "email": value["email"].strip().lower()}
        return value

    def assert_valid(self):
        assert_accommodation(self)


event.listen(UserAccommodation, "before_update", guard_immutable_fields)
