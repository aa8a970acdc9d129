"""Owner write path: updates, the field lock and soft deletes."""

from __future__ import annotations

import pytest

from shakes.application.moderation.approve_submission import approve_submission
from shakes.application.moderation.delete_submission import delete_submission
from shakes.application.moderation.queries import list_by_owner
from shakes.application.moderation.update_submission import update_submission
from shakes.domain.exceptions import ImmutableFieldError, NotFoundError, ValidationError
from shakes.extensions import db
from shakes.models.audit_log import AuditLog
from shakes.models.user_accommodation import UserAccommodation
from shakes.models.user_experience import UserExperience


def _update(record, owner_id, data):
    return update_submission(
        model=type(record),
        record_id=record.id,
        owner_id=owner_id,
        data=data,
    )


class TestUpdate:
    def test_updates_editable_fields(self, owner, submit_accommodation) -> None:
        record = submit_accommodation()

        updated = _update(record, owner.id, {"price_per_night": 150.0, "max_guests": 6})

        assert updated.price_per_night == 150.0
        assert updated.max_guests == 6
        assert updated.status == "pending"

        log = AuditLog.query.filter_by(entity_id=record.id, action="accommodation.update").one()
        assert sorted(log.payload["fields"]) == ["max_guests", "price_per_night"]

    @pytest.mark.parametrize(
        "field, value",
        [
            ("status", "approved"),
            ("slug", "better-slug"),
            ("public_id", 9999),
            ("owner_id", "someone-else"),
            ("reviewed_by", "me"),
            ("admin_notes", "self approved"),
            ("is_active", False),
            ("rating", 5),
        ],
    )
    def test_protected_fields_are_read_only(self, owner, submit_accommodation, field, value) -> None:
        record = submit_accommodation()

        with pytest.raises(ValidationError) as excinfo:
            _update(record, owner.id, {field: value, "max_guests": 6})

        assert excinfo.value.field == field
        assert excinfo.value.constraint == "read_only"

        db.session.refresh(record)
        assert record.max_guests == 4

    def test_unchanged_payload_is_rejected(self, owner, submit_accommodation) -> None:
        record = submit_accommodation()

        with pytest.raises(ValidationError) as excinfo:
            _update(record, owner.id, {"name": "Lake View Cottage"})

        assert excinfo.value.constraint == "no_changes"

    def test_unknown_keys_are_rejected(self, owner, submit_experience) -> None:
        record = submit_experience()

        with pytest.raises(ValidationError) as excinfo:
            _update(record, owner.id, {"price": 300.0, "prise": 275.0})

        assert (excinfo.value.field, excinfo.value.constraint) == ("prise", "unknown")

        db.session.refresh(record)
        assert record.price == 250.0

    def test_unknown_keys_are_rejected_on_create(self, owner, submit_accommodation) -> None:
        with pytest.raises(ValidationError) as excinfo:
            submit_accommodation(pets_allowed=True)

        assert excinfo.value.field == "pets_allowed"
        assert excinfo.value.constraint == "unknown"
        assert UserAccommodation.query.count() == 0

    def test_null_for_required_field(self, owner, submit_accommodation) -> None:
        record = submit_accommodation()

        with pytest.raises(ValidationError) as excinfo:
            _update(record, owner.id, {"name": None})

        assert (excinfo.value.field, excinfo.value.constraint) == ("name", "required")

    def test_invalid_update_is_not_persisted(self, owner, submit_accommodation) -> None:
        record = submit_accommodation()

        with pytest.raises(ValidationError) as excinfo:
            _update(record, owner.id, {"max_guests": 500})

        assert excinfo.value.field == "max_guests"

        db.session.refresh(record)
        assert record.max_guests == 4

    def test_foreign_record_looks_missing(self, other_owner, submit_accommodation) -> None:
        record = submit_accommodation()

        with pytest.raises(NotFoundError):
            _update(record, other_owner.id, {"max_guests": 6})

    def test_approved_record_keeps_status_and_public_id(
        self, owner, admin, submit_experience
    ) -> None:
        record = submit_experience()
        approve_submission(model=UserExperience, record_id=record.id, actor_id=admin.id)

        updated = _update(record, owner.id, {"price": 275.0})

        assert updated.price == 275.0
        assert updated.status == "approved"
        assert updated.public_id == 1000
        assert updated.slug == "dawn-lion-tracking-safari"


class TestStoreLevelGuard:
    def test_slug_cannot_change_once_set(self, submit_accommodation) -> None:
        record = submit_accommodation()
        record.slug = "something-else"

        with pytest.raises(ImmutableFieldError) as excinfo:
            db.session.flush()

        assert excinfo.value.field == "slug"
        db.session.rollback()

    def test_slug_cannot_be_cleared(self, submit_accommodation) -> None:
        record = submit_accommodation()
        record.slug = None

        with pytest.raises(ImmutableFieldError):
            db.session.flush()

        db.session.rollback()

    def test_public_id_cannot_change_once_set(self, admin, submit_experience) -> None:
        record = submit_experience()
        approve_submission(model=UserExperience, record_id=record.id, actor_id=admin.id)

        record.public_id = 1500

        with pytest.raises(ImmutableFieldError) as excinfo:
            db.session.flush()

        assert excinfo.value.field == "public_id"
        db.session.rollback()

    def test_owner_cannot_change(self, other_owner, submit_accommodation) -> None:
        record = submit_accommodation()
        record.owner_id = other_owner.id

        with pytest.raises(ImmutableFieldError) as excinfo:
            db.session.flush()

        assert excinfo.value.field == "owner_id"
        db.session.rollback()

    def test_unset_public_id_can_be_assigned(self, submit_accommodation) -> None:
        record = submit_accommodation()
        record.public_id = 2100
        db.session.commit()

        db.session.refresh(record)
        assert record.public_id == 2100


class TestDelete:
    def test_soft_delete_hides_record(self, owner, submit_accommodation) -> None:
        kept = submit_accommodation()
        removed = submit_accommodation()

        delete_submission(model=UserAccommodation, record_id=removed.id, owner_id=owner.id)

        db.session.refresh(removed)
        assert removed.is_active is False
        assert removed.is_deleted
        assert UserAccommodation.query.count() == 2

        page = list_by_owner(UserAccommodation, owner.id)
        assert [item.id for item in page.items] == [kept.id]

    def test_delete_twice_is_not_found(self, owner, submit_accommodation) -> None:
        record = submit_accommodation()
        delete_submission(model=UserAccommodation, record_id=record.id, owner_id=owner.id)

        with pytest.raises(NotFoundError):
            delete_submission(model=UserAccommodation, record_id=record.id, owner_id=owner.id)

    def test_other_owner_cannot_delete(self, other_owner, submit_accommodation) -> None:
        record = submit_accommodation()

        with pytest.raises(NotFoundError):
            delete_submission(model=UserAccommodation, record_id=record.id, owner_id=other_owner.id)

        db.session.refresh(record)
        assert record.is_active is True
