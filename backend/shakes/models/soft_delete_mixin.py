# shakes/models/soft_delete_mixin.py
from shakes.extensions import db


class SoftDeleteMixin:
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)

    def soft_delete(self):
        self.is_active = False

    @property
    def is_deleted(self):
        return self.is_active is False
