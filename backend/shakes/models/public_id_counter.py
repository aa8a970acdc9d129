from shakes.extensions import db


class PublicIdCounter(db.Model):
    """
    One row per content kind holding the last public id handed out.
    Allocation is a compare-and-swap on last_value (see utils.public_id).
    """
    __tablename__ = "public_id_counters"

    kind = db.Column(db.String(50), primary_key=True)
    last_value = db.Column(db.Integer, nullable=False)
