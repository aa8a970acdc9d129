from typing import Dict, Type

from shakes.domain.exceptions import NotFoundError
from shakes.models.user_accommodation import UserAccommodation
from shakes.models.user_experience import UserExperience

# URL segment -> model
SUBMISSION_MODELS: Dict[str, Type] = {
    "accommodations": UserAccommodation,
    "experiences": UserExperience,
}


def resolve_kind(segment: str) -> Type:
    model = SUBMISSION_MODELS.get(segment)
    if model is None:
        raise NotFoundError(f"Unknown content kind: {segment}")
    return model
