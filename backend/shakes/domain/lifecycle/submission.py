from enum import Enum
from typing import Dict

from ..exceptions import InvalidStateTransition


class ModerationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    REVISION_REQUESTED = "revision_requested"


class ModerationAction(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"
    REQUEST_REVISION = "request_revision"


STATUS_VALUES = tuple(status.value for status in ModerationStatus)

# Explicit allowed transitions: source status -> {action: target status}.
# approved and rejected are terminal; nothing leaves them.
ALLOWED_SUBMISSION_TRANSITIONS: Dict[ModerationStatus, Dict[ModerationAction, ModerationStatus]] = {
    ModerationStatus.PENDING: {
        ModerationAction.APPROVE: ModerationStatus.APPROVED,
        ModerationAction.REJECT: ModerationStatus.REJECTED,
        ModerationAction.REQUEST_REVISION: ModerationStatus.REVISION_REQUESTED,
    },
    ModerationStatus.REVISION_REQUESTED: {
        ModerationAction.APPROVE: ModerationStatus.APPROVED,
        ModerationAction.REJECT: ModerationStatus.REJECTED,
    },
    ModerationStatus.APPROVED: {},
    ModerationStatus.REJECTED: {},
}


def assert_submission_transition(*, from_status: str, action: ModerationAction) -> ModerationStatus:
    """
    Guards moderation transitions and returns the target status.
    Single source of truth for status changes.
    """
    try:
        source = ModerationStatus(from_status)
    except ValueError:
        raise InvalidStateTransition(str(from_status), action.value)

    target = ALLOWED_SUBMISSION_TRANSITIONS[source].get(action)
    if target is None:
        raise InvalidStateTransition(source.value, action.value)

    return target
