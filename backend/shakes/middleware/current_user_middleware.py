from flask import g
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from shakes.extensions import db
from shakes.models.user import User

def current_user_middleware(app):
    @app.before_request
    def load_current_user():
        g.current_user = None

        if not verify_jwt_in_request(optional=True):
            return

        identity = get_jwt_identity()
        if identity is not None:
            g.current_user = db.session.get(User, identity)
