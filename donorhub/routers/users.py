import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from donorhub.config import settings
from donorhub.database import get_db
from donorhub.models.user import User
from donorhub.schemas.user import (
    UserRegister,
    UserResponse,
    UserRoleUpdate,
    UserStatusEnum,
    UserStatusUpdate,
)
from donorhub.services.password_service import hash_password
from donorhub.utils.errors import ConflictError, NotFoundError
from donorhub.utils.identifiers import normalize_email, parse_id
from donorhub.utils.pagination import paginate
from donorhub.utils.response import create_response, handle_exception

router = APIRouter(tags=["Users"])
logger = logging.getLogger(__name__)


def _user_payload(user: User) -> dict:
    return UserResponse.model_validate(user).model_dump(mode="json", by_alias=True)


def _get_user_by_email(db: Session, email: str) -> User:
    user = db.query(User).filter(User.email == normalize_email(email)).first()
    if not user:
        raise NotFoundError("User not found")
    return user


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register_user(body: UserRegister, db: Session = Depends(get_db)):
    try:
        email = normalize_email(body.email)
        if db.query(User.id).filter(User.email == email).first():
            raise ConflictError("User already exists!", error_code="USER_EXISTS")

        user = User(
            email=email,
            name=body.name,
            avatar=body.avatar,
            blood_group=body.blood_group.value,
            district=body.district,
            upazila=body.upazila,
            password_hash=hash_password(body.password),
            role="donor",
            status="active",
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # a concurrent registration won the unique constraint
            db.rollback()
            raise ConflictError("User already exists!", error_code="USER_EXISTS")
        db.refresh(user)
        logger.info("User registered id=%s email=%s", user.id, user.email)
        return create_response(
            message="User registered successfully!",
            data={"userId": user.id},
            status_code=status.HTTP_201_CREATED,
        )
    except Exception as exc:
        return handle_exception(exc, "An error occurred while registering the user.")


@router.get("/users")
def list_users(
    status_filter: UserStatusEnum | None = Query(None, alias="status"),
    page: int = Query(1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    try:
        query = db.query(User)
        if status_filter:
            query = query.filter(User.status == status_filter.value)
        users, meta = paginate(query.order_by(User.created_at.desc(), User.id.asc()), page, limit)
        return create_response(
            message="Users fetched successfully",
            data={**meta, "count": len(users), "users": [_user_payload(user) for user in users]},
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to fetch users")


@router.get("/user/{email}")
def get_user(email: str, db: Session = Depends(get_db)):
    try:
        user = _get_user_by_email(db, email)
        return create_response(message="get user success", data=_user_payload(user))
    except Exception as exc:
        return handle_exception(exc, "Failed to get user")


@router.get("/user-profile")
def get_user_profile(email: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    try:
        user = _get_user_by_email(db, email)
        return create_response(message="User profile fetched", data=_user_payload(user))
    except Exception as exc:
        return handle_exception(exc, "Failed to get user")


@router.patch("/users/{user_id}/status")
def update_user_status(user_id: str, body: UserStatusUpdate, db: Session = Depends(get_db)):
    try:
        user_id = parse_id(user_id, "user id")
        matched = (
            db.query(User)
            .filter(User.id == user_id)
            .update({User.status: body.status.value}, synchronize_session=False)
        )
        db.commit()
        if not matched:
            raise NotFoundError("User not found")
        logger.info("User %s status set to %s", user_id, body.status.value)
        return create_response(
            message=f"User status updated to {body.status.value}",
            data={"id": user_id, "status": body.status.value},
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to update user status")


@router.patch("/users/{user_id}/role")
def update_user_role(user_id: str, body: UserRoleUpdate, db: Session = Depends(get_db)):
    try:
        user_id = parse_id(user_id, "user id")
        matched = (
            db.query(User)
            .filter(User.id == user_id)
            .update({User.role: body.role.value}, synchronize_session=False)
        )
        db.commit()
        if not matched:
            raise NotFoundError("User not found")
        logger.info("User %s role set to %s", user_id, body.role.value)
        return create_response(
            message=f"User role updated to {body.role.value}",
            data={"id": user_id, "role": body.role.value},
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to update user role")
