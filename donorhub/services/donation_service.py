import logging
from enum import Enum

from sqlalchemy.orm import Session

from donorhub.config import settings
from donorhub.models.donation_request import DonationRequest
from donorhub.schemas.donation_request import DonationStatusEnum
from donorhub.utils.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


class StatusGuard(str, Enum):
    permissive = "permissive"
    strict = "strict"


# target statuses each guard accepts
ALLOWED_TARGETS = {
    StatusGuard.permissive: set(DonationStatusEnum),
    StatusGuard.strict: {DonationStatusEnum.done, DonationStatusEnum.canceled},
}

# current statuses a request must be in before the update applies; None means any
REQUIRED_CURRENT = {
    StatusGuard.permissive: None,
    StatusGuard.strict: {DonationStatusEnum.inprogress},
}


def get_status_guard() -> StatusGuard:
    """Dependency returning the configured guard strength."""
    try:
        return StatusGuard(settings.DONATION_STATUS_GUARD)
    except ValueError:
        logger.warning(
            "Unknown DONATION_STATUS_GUARD=%r, falling back to permissive",
            settings.DONATION_STATUS_GUARD,
        )
        return StatusGuard.permissive


def update_donation_status(
    db: Session,
    request_id: str,
    target: DonationStatusEnum,
    guard: StatusGuard = StatusGuard.permissive,
) -> None:
    """Move a donation request to ``target`` in a single conditional UPDATE.

    Raises NotFoundError when the id does not exist and BadRequestError when
    the guard rejects the target or the current status.
    """
    target = DonationStatusEnum(target)
    if target not in ALLOWED_TARGETS[guard]:
        raise BadRequestError("Invalid status update", error_code="INVALID_STATUS_TRANSITION")

    query = db.query(DonationRequest).filter(DonationRequest.id == request_id)
    required = REQUIRED_CURRENT[guard]
    if required:
        query = query.filter(DonationRequest.donation_status.in_([value.value for value in required]))

    matched = query.update({DonationRequest.donation_status: target.value}, synchronize_session=False)
    db.commit()

    if matched:
        logger.info("Donation request %s status set to %s (guard=%s)", request_id, target.value, guard.value)
        return

    current = (
        db.query(DonationRequest.donation_status)
        .filter(DonationRequest.id == request_id)
        .scalar()
    )
    if current is None:
        raise NotFoundError("Donation request not found")
    logger.info(
        "Rejected status change for donation request %s: %s -> %s (guard=%s)",
        request_id,
        current,
        target.value,
        guard.value,
    )
    raise BadRequestError(
        "Cannot update donation request in current status",
        error_code="INVALID_STATUS_TRANSITION",
    )
