from typing import Optional


class ModerationError(Exception):
    """Base class for every error raised by the moderation subsystem."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
        }


class ValidationError(ModerationError):
    """A field constraint was violated (length, range, enum membership...)."""

    status_code = 400

    def __init__(self, field: str, constraint: str, message: Optional[str] = None):
        super().__init__(message or f"{field} violates constraint '{constraint}'")
        self.field = field
        self.constraint = constraint

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["field"] = self.field
        data["constraint"] = self.constraint
        return data


class ImmutableFieldError(ValidationError):
    def __init__(self, field: str):
        super().__init__(field, "immutable", f"{field} cannot be changed once set")


class NotFoundError(ModerationError):
    status_code = 404


class PermissionDenied(ModerationError):
    status_code = 403


class InvalidStateTransition(ModerationError):
    status_code = 409

    def __init__(self, from_status: str, action: str):
        super().__init__(f"Cannot {action} a submission in status '{from_status}'")
        self.from_status = from_status
        self.action = action


class UniquenessConflict(ModerationError):
    status_code = 409

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"Could not allocate a unique {field}")
        self.field = field


class StaleRecordError(ModerationError):
    status_code = 409
