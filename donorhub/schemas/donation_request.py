from datetime import datetime
from enum import Enum

from pydantic import EmailStr, Field

from donorhub.schemas.common import ApiModel, BloodGroupEnum


class DonationStatusEnum(str, Enum):
    pending = "pending"
    inprogress = "inprogress"
    done = "done"
    canceled = "canceled"


class DonationRequestCreate(ApiModel):
    requester_name: str = Field(..., min_length=1)
    requester_email: EmailStr
    recipient_name: str = Field(..., min_length=1)
    recipient_district: str = Field(..., min_length=1)
    recipient_upazila: str = Field(..., min_length=1)
    hospital_name: str = Field(..., min_length=1)
    full_address: str = Field(..., min_length=1)
    blood_group: BloodGroupEnum
    donation_date: str = Field(..., min_length=1)
    donation_time: str = Field(..., min_length=1)
    request_message: str | None = None


class DonationStatusUpdate(ApiModel):
    status: DonationStatusEnum


class DonationRequestResponse(ApiModel):
    id: str
    requester_name: str
    requester_email: str
    recipient_name: str
    recipient_district: str
    recipient_upazila: str
    hospital_name: str
    full_address: str
    blood_group: str
    donation_date: str
    donation_time: str
    request_message: str | None
    donation_status: DonationStatusEnum
    created_at: datetime
