from contextlib import contextmanager
from flask import current_app
from shakes.extensions import db

@contextmanager
def transactional():
    """
    Commit on success, roll back and re-raise on any failure.
    Services open exactly one of these per unit of work.
    """
    try:
        yield db.session
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        current_app.logger.debug("Transaction rolled back: %s", exc.__class__.__name__)
        raise
