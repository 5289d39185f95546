import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from donorhub.models.donation_request import DonationRequest
from donorhub.models.funding import Funding
from donorhub.models.user import User

logger = logging.getLogger(__name__)


def get_dashboard_statistics(db: Session) -> dict:
    total_users = db.query(func.count(User.id)).scalar() or 0
    total_requests = db.query(func.count(DonationRequest.id)).scalar() or 0
    total_funding = db.query(func.coalesce(func.sum(Funding.amount), 0)).scalar() or 0

    logger.debug(
        "Dashboard totals users=%s requests=%s funding=%s",
        total_users,
        total_requests,
        total_funding,
    )
    return {
        "total_users": total_users,
        "total_requests": total_requests,
        "total_funding": float(total_funding),
    }
