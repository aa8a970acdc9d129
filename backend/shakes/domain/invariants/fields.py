import re
from numbers import Real
from typing import Any, Iterable, Optional

from ..exceptions import ValidationError

TIME_OF_DAY = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def assert_required(field: str, value: Any) -> None:
    if is_blank(value):
        raise ValidationError(field, "required", f"{field} is required")


def assert_string(field: str, value: Any) -> None:
    if value is not None and not isinstance(value, str):
        raise ValidationError(field, "type", f"{field} must be a string")


def assert_length(
    field: str,
    value: Optional[str],
    *,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> None:
    if value is None:
        return
    assert_string(field, value)

    length = len(value.strip())
    if min_length is not None and length < min_length:
        raise ValidationError(
            field, "min_length", f"{field} must be at least {min_length} characters"
        )
    if max_length is not None and length > max_length:
        raise ValidationError(
            field, "max_length", f"{field} cannot exceed {max_length} characters"
        )


def assert_range(
    field: str,
    value: Any,
    *,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
) -> None:
    if value is None:
        return

    # bool is an int subclass; never accept it as a number
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(field, "type", f"{field} must be a number")
    if minimum is not None and value < minimum:
        raise ValidationError(field, "min", f"{field} must be at least {minimum}")
    if maximum is not None and value > maximum:
        raise ValidationError(field, "max", f"{field} cannot exceed {maximum}")


def assert_integer(field: str, value: Any, **bounds) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "type", f"{field} must be an integer")
    assert_range(field, value, **bounds)


def assert_choice(field: str, value: Any, choices: Iterable[str]) -> None:
    if value is None:
        return
    if value not in choices:
        raise ValidationError(field, "enum", f"{value} is not a valid {field}")


def assert_list(field: str, value: Any) -> None:
    if value is not None and not isinstance(value, list):
        raise ValidationError(field, "type", f"{field} must be a list")


def assert_string_list(field: str, value: Any) -> None:
    assert_list(field, value)
    for index, item in enumerate(value or []):
        assert_string(f"{field}[{index}]", item)


def assert_choice_list(field: str, value: Any, choices: Iterable[str]) -> None:
    assert_list(field, value)
    for index, item in enumerate(value or []):
        assert_choice(f"{field}[{index}]", item, choices)


def assert_mapping(field: str, value: Any) -> None:
    if value is not None and not isinstance(value, dict):
        raise ValidationError(field, "type", f"{field} must be an object")


def assert_boolean(field: str, value: Any) -> None:
    if value is not None and not isinstance(value, bool):
        raise ValidationError(field, "type", f"{field} must be true or false")


def assert_time_of_day(field: str, value: Any) -> None:
    if value is None:
        return
    if not isinstance(value, str) or not TIME_OF_DAY.match(value):
        raise ValidationError(field, "format", f"{field} must use HH:MM")


def assert_email(field: str, value: Any) -> None:
    if is_blank(value):
        return
    if not isinstance(value, str) or not EMAIL.match(value):
        raise ValidationError(field, "format", f"{field} must be a valid email address")
