from .accommodation import REGIONS
from .fields import (
    assert_boolean,
    assert_choice,
    assert_choice_list,
    assert_email,
    assert_integer,
    assert_length,
    assert_list,
    assert_mapping,
    assert_range,
    assert_required,
    assert_string_list,
)

CATEGORIES = (
    "Wildlife Safari",
    "Cultural Experience",
    "Adventure Sports",
    "Nature & Hiking",
    "City Tours",
    "Food & Dining",
    "Water Activities",
    "Photography Tours",
    "Eco-Tourism",
    "Historical Sites",
)

DIFFICULTIES = ("Easy", "Moderate", "Challenging", "Extreme")

DAYS_AVAILABLE = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
    "Daily",
)


def assert_experience(experience) -> None:
    assert_required("title", experience.title)
    assert_length("title", experience.title, min_length=10, max_length=200)

    assert_required("location", experience.location)
    assert_length("location", experience.location)

    assert_required("region", experience.region)
    assert_choice("region", experience.region, REGIONS)

    assert_required("category", experience.category)
    assert_choice("category", experience.category, CATEGORIES)

    assert_required("duration", experience.duration)
    assert_length("duration", experience.duration)

    assert_required("difficulty", experience.difficulty)
    assert_choice("difficulty", experience.difficulty, DIFFICULTIES)

    assert_required("price", experience.price)
    assert_range("price", experience.price, minimum=0)
    assert_range("original_price", experience.original_price, minimum=0)

    assert_required("description", experience.description)
    assert_length("description", experience.description, min_length=50, max_length=500)

    assert_required("overview", experience.overview)
    assert_length("overview", experience.overview, min_length=100, max_length=2000)

    for field in ("highlights", "included", "images"):
        assert_string_list(field, getattr(experience, field))

    _assert_itinerary(experience.itinerary)
    _assert_additional_info(experience.additional_info)
    _assert_availability(experience.availability)

    for flag in ("eco_friendly", "instant_booking", "free_cancel", "pickup_included"):
        assert_boolean(flag, getattr(experience, flag))

    _assert_contact_info(experience.contact_info)


def _assert_itinerary(itinerary) -> None:
    assert_list("itinerary", itinerary)
    for index, item in enumerate(itinerary or []):
        field = f"itinerary[{index}]"
        assert_mapping(field, item)
        assert_length(f"{field}.time", item.get("time"))
        assert_required(f"{field}.title", item.get("title"))
        assert_required(f"{field}.description", item.get("description"))


def _assert_additional_info(info) -> None:
    assert_required("additional_info", info)
    assert_mapping("additional_info", info)

    assert_required("additional_info.cancellation_policy", info.get("cancellation_policy"))
    assert_length("additional_info.cancellation_policy", info.get("cancellation_policy"))
    assert_required("additional_info.meeting_point", info.get("meeting_point"))
    assert_length("additional_info.meeting_point", info.get("meeting_point"))

    assert_integer("additional_info.min_age", info.get("min_age"), minimum=0, maximum=100)
    assert_required("additional_info.max_group_size", info.get("max_group_size"))
    assert_integer(
        "additional_info.max_group_size", info.get("max_group_size"), minimum=1, maximum=100
    )

    assert_string_list("additional_info.what_to_bring", info.get("what_to_bring"))
    assert_string_list("additional_info.languages", info.get("languages"))
    assert_length("additional_info.accessibility", info.get("accessibility"))


def _assert_availability(availability) -> None:
    if availability is None:
        return
    assert_mapping("availability", availability)
    assert_string_list("availability.times", availability.get("times"))
    assert_choice_list("availability.days_available", availability.get("days_available"), DAYS_AVAILABLE)
    assert_length("availability.seasonality", availability.get("seasonality"))


def _assert_contact_info(contact_info) -> None:
    if contact_info is None:
        return
    assert_mapping("contact_info", contact_info)
    assert_email("contact_info.email", contact_info.get("email"))
    for part in ("phone", "whatsapp"):
        assert_length(f"contact_info.{part}", contact_info.get(part))
