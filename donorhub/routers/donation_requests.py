import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from donorhub.config import settings
from donorhub.database import get_db
from donorhub.models.donation_request import DonationRequest
from donorhub.models.user import User
from donorhub.schemas.donation_request import (
    DonationRequestCreate,
    DonationRequestResponse,
    DonationStatusEnum,
    DonationStatusUpdate,
)
from donorhub.services.donation_service import StatusGuard, get_status_guard, update_donation_status
from donorhub.utils.errors import ForbiddenError, NotFoundError
from donorhub.utils.identifiers import normalize_email, parse_id
from donorhub.utils.pagination import paginate
from donorhub.utils.response import create_response, handle_exception

router = APIRouter(tags=["Donation Requests"])
logger = logging.getLogger(__name__)
RECENT_LIMIT = 3


def _request_payload(request: DonationRequest) -> dict:
    return DonationRequestResponse.model_validate(request).model_dump(mode="json", by_alias=True)


def _newest_first(query):
    return query.order_by(DonationRequest.created_at.desc(), DonationRequest.id.asc())


def _paged_requests(query, status_filter: DonationStatusEnum | None, page: int, limit: int) -> dict:
    if status_filter:
        query = query.filter(DonationRequest.donation_status == status_filter.value)
    requests, meta = paginate(_newest_first(query), page, limit)
    return {**meta, "count": len(requests), "requests": [_request_payload(item) for item in requests]}


@router.post("/donation-requests", status_code=status.HTTP_201_CREATED)
def create_donation_request(body: DonationRequestCreate, db: Session = Depends(get_db)):
    try:
        requester_email = normalize_email(body.requester_email)
        requester = db.query(User).filter(User.email == requester_email).first()
        if not requester or requester.status == "blocked":
            logger.info(
                "Rejected donation request from %s (%s)",
                requester_email,
                "unknown" if not requester else "blocked",
            )
            raise ForbiddenError("Blocked users cannot create donation requests.")

        request = DonationRequest(
            requester_name=body.requester_name,
            requester_email=requester_email,
            recipient_name=body.recipient_name,
            recipient_district=body.recipient_district,
            recipient_upazila=body.recipient_upazila,
            hospital_name=body.hospital_name,
            full_address=body.full_address,
            blood_group=body.blood_group.value,
            donation_date=body.donation_date,
            donation_time=body.donation_time,
            request_message=body.request_message,
            donation_status=DonationStatusEnum.pending.value,
        )
        db.add(request)
        db.commit()
        db.refresh(request)
        logger.info("Donation request %s created by %s", request.id, requester_email)
        return create_response(
            message="Donation request created successfully!",
            data={"requestId": request.id},
            status_code=status.HTTP_201_CREATED,
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to create donation request")


@router.get("/donation-requests/{request_id}")
def get_donation_request(request_id: str, db: Session = Depends(get_db)):
    try:
        request_id = parse_id(request_id, "donation request id")
        request = db.query(DonationRequest).filter(DonationRequest.id == request_id).first()
        if not request:
            raise NotFoundError("Donation request not found")
        return create_response(message="Donation request fetched", data=_request_payload(request))
    except Exception as exc:
        return handle_exception(exc, "Failed to fetch the donation request.")


@router.get("/recent-donation-requests")
def recent_donation_requests(email: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    try:
        email = normalize_email(email)
        user = db.query(User).filter(User.email == email).first()
        if not user or user.role != "donor":
            raise ForbiddenError("Unauthorized access")

        requests = (
            _newest_first(db.query(DonationRequest).filter(DonationRequest.requester_email == email))
            .limit(RECENT_LIMIT)
            .all()
        )
        return create_response(
            message="Recent donation requests fetched",
            data={"count": len(requests), "requests": [_request_payload(item) for item in requests]},
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to fetch donation requests")


@router.get("/my-donation-requests")
def my_donation_requests(
    email: str = Query(..., min_length=1),
    status_filter: DonationStatusEnum | None = Query(None, alias="status"),
    page: int = Query(1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    try:
        query = db.query(DonationRequest).filter(DonationRequest.requester_email == normalize_email(email))
        return create_response(
            message="Donation requests fetched",
            data=_paged_requests(query, status_filter, page, limit),
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to fetch donation requests")


@router.get("/all-donation-requests")
def all_donation_requests(
    status_filter: DonationStatusEnum | None = Query(None, alias="status"),
    page: int = Query(1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    try:
        return create_response(
            message="Donation requests fetched",
            data=_paged_requests(db.query(DonationRequest), status_filter, page, limit),
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to fetch donation requests")


@router.get("/pending")
def pending_donation_requests(db: Session = Depends(get_db)):
    try:
        requests = _newest_first(
            db.query(DonationRequest).filter(
                DonationRequest.donation_status == DonationStatusEnum.pending.value
            )
        ).all()
        return create_response(
            message="Pending donation requests fetched",
            data={"count": len(requests), "requests": [_request_payload(item) for item in requests]},
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to fetch donation requests")


@router.patch("/donation-requests/{request_id}/status")
def update_donation_request_status(
    request_id: str,
    body: DonationStatusUpdate,
    db: Session = Depends(get_db),
    guard: StatusGuard = Depends(get_status_guard),
):
    try:
        request_id = parse_id(request_id, "donation request id")
        update_donation_status(db, request_id, body.status, guard)
        return create_response(
            message="Donation request status updated successfully",
            data={"id": request_id, "donationStatus": body.status.value},
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to update donation request status")


@router.delete("/donation-requests/{request_id}")
def delete_donation_request(request_id: str, db: Session = Depends(get_db)):
    try:
        request_id = parse_id(request_id, "donation request id")
        deleted = (
            db.query(DonationRequest)
            .filter(DonationRequest.id == request_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        if not deleted:
            raise NotFoundError("Donation request not found")
        logger.info("Donation request %s deleted", request_id)
        return create_response(message="Donation request deleted successfully", data=None)
    except Exception as exc:
        return handle_exception(exc, "Failed to delete donation request")
