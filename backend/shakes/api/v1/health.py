from flask import current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from shakes.extensions import db
from . import v1_bp

@v1_bp.route('/health', methods=['GET'])
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as exc:
        current_app.logger.error("Health check could not reach the database: %s", exc)
        db.session.rollback()
        database = "unavailable"

    status_code = 200 if database == "ok" else 503
    return jsonify({
        "status": "ok" if status_code == 200 else "degraded",
        "service": "shakes-moderation",
        "database": database,
    }), status_code
