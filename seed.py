import logging

from donorhub.config import settings
from donorhub.database import SessionLocal
from donorhub.models.user import User
from donorhub.services.password_service import hash_password
from donorhub.utils.identifiers import normalize_email

logger = logging.getLogger(__name__)


def seed_admin(db) -> User | None:
    """Create the configured admin account once; existing accounts are left alone."""
    email = normalize_email(settings.SEED_ADMIN_EMAIL or "")
    password = settings.SEED_ADMIN_PASSWORD
    if not email or not password:
        logger.info("SEED_ADMIN_EMAIL/SEED_ADMIN_PASSWORD not set. Skipping admin seed.")
        return None

    existing = db.query(User).filter(User.email == email).first()
    if existing:
        logger.info("Admin seed skipped, %s already registered as %s", email, existing.role)
        return existing

    admin = User(
        email=email,
        name=settings.SEED_ADMIN_NAME,
        blood_group=settings.SEED_ADMIN_BLOOD_GROUP,
        district="N/A",
        upazila="N/A",
        password_hash=hash_password(password),
        role="admin",
        status="active",
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Seeded admin user %s", email)
    return admin


def run_seed():
    db = SessionLocal()
    try:
        seed_admin(db)
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    run_seed()
