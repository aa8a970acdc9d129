from functools import wraps
from flask import g
from flask_jwt_extended import get_jwt
from shakes.domain.exceptions import PermissionDenied

def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            claims = get_jwt()

            if claims.get("role") not in allowed_roles:
                raise PermissionDenied("Insufficient permissions")

            return fn(*args, **kwargs)
        return wrapper
    return decorator

def active_user_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        user = getattr(g, "current_user", None)
        if user is None or not user.is_active:
            raise PermissionDenied("User account missing or disabled")

        return fn(*args, **kwargs)
    return wrapper
