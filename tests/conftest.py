import os
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure predictable environment variables for tests before importing the app.
BASE_DIR = Path(__file__).resolve().parents[1]
TEST_DB_PATH = BASE_DIR / "test.db"

if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

os.environ.setdefault("DATABASE_URL", f"sqlite:///{TEST_DB_PATH}")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DONATION_STATUS_GUARD", "permissive")

import donorhub.main as main  # noqa: E402  (import after env vars are set)
from donorhub.database import Base, SessionLocal, engine  # noqa: E402
from donorhub.models.donation_request import DonationRequest  # noqa: E402
from donorhub.models.user import User  # noqa: E402
from donorhub.services.password_service import hash_password  # noqa: E402


@pytest.fixture(autouse=True)
def clean_tables():
    """Start every test from empty tables."""
    with engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())
    yield


@pytest.fixture()
def client(monkeypatch):
    """Provide a TestClient with startup tasks patched out for isolation."""
    monkeypatch.setattr(main, "run_seed", lambda: None)

    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()


@pytest.fixture()
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def registration_payload(email: str = "donor@bloodbank.org", **overrides) -> dict:
    payload = {
        "email": email,
        "name": "Rahim Uddin",
        "avatar": "https://i.ibb.co/avatar.png",
        "bloodGroup": "O+",
        "district": "Dhaka",
        "upazila": "Savar",
        "password": "secret-pass",
    }
    payload.update(overrides)
    return payload


def request_payload(requester_email: str = "donor@bloodbank.org", **overrides) -> dict:
    payload = {
        "requesterName": "Rahim Uddin",
        "requesterEmail": requester_email,
        "recipientName": "Karim",
        "recipientDistrict": "Dhaka",
        "recipientUpazila": "Dhanmondi",
        "hospitalName": "Dhaka Medical College Hospital",
        "fullAddress": "Zahir Raihan Rd, Dhaka 1000",
        "bloodGroup": "A+",
        "donationDate": "2024-12-30",
        "donationTime": "10:30",
        "requestMessage": "Urgent need after surgery",
    }
    payload.update(overrides)
    return payload


def make_user(session, email: str = "donor@bloodbank.org", role: str = "donor", status: str = "active") -> User:
    user = User(
        email=email,
        name="Seeded User",
        blood_group="B+",
        district="Chattogram",
        upazila="Patiya",
        password_hash=hash_password("secret-pass"),
        role=role,
        status=status,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def make_requests(session, requester_email: str, count: int, status: str = "pending", start: datetime | None = None):
    """Insert ``count`` requests one minute apart, oldest first."""
    start = start or datetime(2024, 1, 1, 8, 0)
    created = []
    for index in range(count):
        request = DonationRequest(
            requester_name="Rahim Uddin",
            requester_email=requester_email,
            recipient_name=f"Recipient {index}",
            recipient_district="Dhaka",
            recipient_upazila="Mirpur",
            hospital_name="Square Hospital",
            full_address="18/F West Panthapath",
            blood_group="AB-",
            donation_date="2024-02-01",
            donation_time="09:00",
            donation_status=status,
            created_at=start + timedelta(minutes=index),
        )
        session.add(request)
        created.append(request)
    session.commit()
    for request in created:
        session.refresh(request)
    return created
