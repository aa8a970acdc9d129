"""Shared pytest fixtures for the moderation test suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest
from flask_jwt_extended import create_access_token

from shakes import create_app
from shakes.extensions import db as _db
from shakes.application.moderation.create_submission import create_submission
from shakes.models.user import User
from shakes.models.user_accommodation import UserAccommodation
from shakes.models.user_experience import UserExperience

LONG_DESCRIPTION = (
    "A quiet cottage on the shore of Lake Bunyonyi with sweeping views of the terraced hills, "
    "a private jetty and a wood-fired hot tub for chilly evenings."
)

EXPERIENCE_OVERVIEW = (
    "Start before dawn with an experienced ranger, track the resident pride across the savannah, "
    "then stop for a bush breakfast overlooking the Kazinga Channel before returning to camp."
)


# ---------------------------------------------------------------------------
# Application & database
# ---------------------------------------------------------------------------


@pytest.fixture()
def app():
    """Application bound to a fresh in-memory database."""
    app = create_app("testing")

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db(app):
    return _db


# ---------------------------------------------------------------------------
# Users & auth
# ---------------------------------------------------------------------------


def _make_user(email: str, role: str, first_name: str, last_name: str) -> User:
    user = User()
    user.email = email
    user.first_name = first_name
    user.last_name = last_name
    user.role = role
    user.is_active = True
    user.set_password("correct-horse-battery")

    _db.session.add(user)
    _db.session.commit()
    return user


@pytest.fixture()
def owner(app) -> User:
    return _make_user("amani@example.com", "host", "Amani", "Okello")


@pytest.fixture()
def other_owner(app) -> User:
    return _make_user("wanjiru@example.com", "host", "Wanjiru", "Kamau")


@pytest.fixture()
def admin(app) -> User:
    return _make_user("admin@example.com", "admin", "Ada", "Admin")


def bearer(user: User) -> dict[str, str]:
    token = create_access_token(identity=user.id, additional_claims={"role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def owner_headers(owner) -> dict[str, str]:
    return bearer(owner)


@pytest.fixture()
def admin_headers(admin) -> dict[str, str]:
    return bearer(admin)


# ---------------------------------------------------------------------------
# Submission payloads
# ---------------------------------------------------------------------------


@pytest.fixture()
def accommodation_data() -> Callable[..., dict[str, Any]]:
    """Factory for a valid accommodation payload."""

    def factory(**overrides: Any) -> dict[str, Any]:
        data = {
            "name": "Lake View Cottage",
            "type": "Cottage",
            "description": LONG_DESCRIPTION,
            "location": "Kabale",
            "region": "Uganda",
            "address": {"city": "Kabale", "country": "Uganda"},
            "latitude": -1.25,
            "longitude": 29.98,
            "price_per_night": 120.0,
            "currency": "USD",
            "max_guests": 4,
            "bedrooms": 2,
            "amenities": ["WiFi", "Lake View", "Hot Tub"],
            "images": [{"url": "https://cdn.example.com/cottage.jpg", "is_primary": True}],
            "house_rules": ["No smoking indoors"],
            "cancellation_policy": "Moderate",
            "features": {"instant_book": True},
            "contact_info": {"phone": "+256700000000", "email": "Host@Example.com"},
        }
        data.update(overrides)
        return data

    return factory


@pytest.fixture()
def experience_data() -> Callable[..., dict[str, Any]]:
    """Factory for a valid experience payload."""

    def factory(**overrides: Any) -> dict[str, Any]:
        data = {
            "title": "Dawn Lion Tracking Safari",
            "location": "Queen Elizabeth National Park",
            "region": "Uganda",
            "category": "Wildlife Safari",
            "duration": "6 hours",
            "difficulty": "Moderate",
            "price": 250.0,
            "description": "Track lions at first light with an experienced ranger guide.",
            "overview": EXPERIENCE_OVERVIEW,
            "highlights": ["Tree-climbing lions", "Bush breakfast"],
            "itinerary": [
                {"time": "05:30", "title": "Pickup", "description": "Collected from your lodge"},
            ],
            "additional_info": {
                "cancellation_policy": "Free cancellation up to 24 hours before",
                "meeting_point": "Mweya Visitor Centre",
                "max_group_size": 6,
                "min_age": 12,
            },
            "availability": {"days_available": ["Daily"]},
            "eco_friendly": True,
        }
        data.update(overrides)
        return data

    return factory


@pytest.fixture()
def submit_accommodation(owner, accommodation_data):
    """Create an accommodation through the service layer."""

    def submit(owner_id: str | None = None, **overrides: Any) -> UserAccommodation:
        return create_submission(
            model=UserAccommodation,
            owner_id=owner_id or owner.id,
            data=accommodation_data(**overrides),
        )

    return submit


@pytest.fixture()
def submit_experience(owner, experience_data):
    """Create an experience through the service layer."""

    def submit(owner_id: str | None = None, **overrides: Any) -> UserExperience:
        return create_submission(
            model=UserExperience,
            owner_id=owner_id or owner.id,
            data=experience_data(**overrides),
        )

    return submit


@pytest.fixture()
def headers_for(app) -> Callable[[User], dict[str, str]]:
    """Bearer headers for an arbitrary user."""
    return bearer
