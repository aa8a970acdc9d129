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
    assert_time_of_day,
)

ACCOMMODATION_TYPES = (
    "Hotel",
    "Resort",
    "Lodge",
    "Guesthouse",
    "Hostel",
    "Apartment",
    "Villa",
    "Cottage",
    "Tented Camp",
    "Eco-Lodge",
    "Boutique Hotel",
    "Bed & Breakfast",
)

REGIONS = ("Uganda", "Kenya", "Tanzania", "Rwanda", "East Africa")

CURRENCIES = ("USD", "UGX", "KES", "TZS", "RWF")

CANCELLATION_POLICIES = ("Flexible", "Moderate", "Strict", "Super Strict")

BUSINESS_TYPES = ("Individual", "Company", "Partnership")

FEATURE_FLAGS = ("instant_book", "superhost", "free_cancel", "eco_friendly")

AMENITIES = (
    "WiFi",
    "Parking",
    "Pool",
    "Air Conditioning",
    "Heating",
    "Kitchen",
    "Breakfast Included",
    "Pet Friendly",
    "Gym",
    "Spa",
    "Restaurant",
    "Bar",
    "Room Service",
    "Laundry",
    "Airport Shuttle",
    "Wheelchair Accessible",
    "Family Friendly",
    "Smoking Allowed",
    "Non-Smoking",
    "Beach Access",
    "Mountain View",
    "Lake View",
    "Garden",
    "Balcony",
    "Hot Tub",
    "Fireplace",
    "TV",
    "Workspace",
    "24-Hour Front Desk",
    "Security",
    "Conference Room",
    "Eco-Friendly",
)


def assert_accommodation(accommodation) -> None:
    """
    Validates every owner-supplied field of a UserAccommodation.
    Raises ValidationError naming the first offending field.
    """
    assert_required("name", accommodation.name)
    assert_length("name", accommodation.name, min_length=5, max_length=200)

    assert_required("type", accommodation.type)
    assert_choice("type", accommodation.type, ACCOMMODATION_TYPES)

    assert_required("description", accommodation.description)
    assert_length("description", accommodation.description, min_length=100, max_length=2000)

    assert_required("location", accommodation.location)
    assert_length("location", accommodation.location)

    assert_required("region", accommodation.region)
    assert_choice("region", accommodation.region, REGIONS)

    _assert_address(accommodation.address)

    assert_range("latitude", accommodation.latitude, minimum=-90, maximum=90)
    assert_range("longitude", accommodation.longitude, minimum=-180, maximum=180)

    assert_required("price_per_night", accommodation.price_per_night)
    assert_range("price_per_night", accommodation.price_per_night, minimum=0)
    assert_choice("currency", accommodation.currency, CURRENCIES)

    assert_required("max_guests", accommodation.max_guests)
    assert_integer("max_guests", accommodation.max_guests, minimum=1, maximum=100)
    for field in ("bedrooms", "bathrooms", "beds"):
        assert_integer(field, getattr(accommodation, field), minimum=0)

    assert_choice_list("amenities", accommodation.amenities, AMENITIES)
    _assert_images(accommodation.images)
    assert_string_list("house_rules", accommodation.house_rules)

    assert_required("cancellation_policy", accommodation.cancellation_policy)
    assert_choice("cancellation_policy", accommodation.cancellation_policy, CANCELLATION_POLICIES)

    assert_time_of_day("check_in_time", accommodation.check_in_time)
    assert_time_of_day("check_out_time", accommodation.check_out_time)
    assert_integer("min_night_stay", accommodation.min_night_stay, minimum=1)

    assert_mapping("features", accommodation.features)
    for flag in FEATURE_FLAGS:
        assert_boolean(f"features.{flag}", (accommodation.features or {}).get(flag))

    _assert_contact_info(accommodation.contact_info)
    _assert_business_info(accommodation.business_info)


def _assert_address(address) -> None:
    assert_required("address", address)
    assert_mapping("address", address)
    assert_required("address.country", address.get("country"))
    for part in ("street", "city", "state", "postal_code", "country"):
        assert_length(f"address.{part}", address.get(part))


def _assert_images(images) -> None:
    assert_list("images", images)
    for index, image in enumerate(images or []):
        field = f"images[{index}]"
        assert_mapping(field, image)
        assert_required(f"{field}.url", image.get("url"))
        assert_length(f"{field}.url", image.get("url"))
        assert_length(f"{field}.caption", image.get("caption"))
        assert_boolean(f"{field}.is_primary", image.get("is_primary"))


def _assert_contact_info(contact_info) -> None:
    assert_required("contact_info", contact_info)
    assert_mapping("contact_info", contact_info)
    assert_required("contact_info.phone", contact_info.get("phone"))
    assert_required("contact_info.email", contact_info.get("email"))
    assert_email("contact_info.email", contact_info.get("email"))
    for part in ("phone", "website", "whatsapp"):
        assert_length(f"contact_info.{part}", contact_info.get(part))


def _assert_business_info(business_info) -> None:
    if business_info is None:
        return
    assert_mapping("business_info", business_info)
    assert_choice("business_info.business_type", business_info.get("business_type"), BUSINESS_TYPES)
