from datetime import datetime
from enum import Enum

from pydantic import EmailStr, Field

from donorhub.schemas.common import ApiModel, BloodGroupEnum


class UserRoleEnum(str, Enum):
    donor = "donor"
    volunteer = "volunteer"
    admin = "admin"


class UserStatusEnum(str, Enum):
    active = "active"
    blocked = "blocked"


class UserRegister(ApiModel):
    email: EmailStr
    name: str = Field(..., min_length=1)
    avatar: str | None = None
    blood_group: BloodGroupEnum
    district: str = Field(..., min_length=1)
    upazila: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserStatusUpdate(ApiModel):
    status: UserStatusEnum


class UserRoleUpdate(ApiModel):
    role: UserRoleEnum


class UserResponse(ApiModel):
    id: str
    email: EmailStr
    name: str
    avatar: str | None
    blood_group: str
    district: str
    upazila: str
    role: UserRoleEnum
    status: UserStatusEnum
    created_at: datetime | None = None
