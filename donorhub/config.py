import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent  # -> project root

# Load .env explicitly from project root
load_dotenv(BASE_DIR / ".env")


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    user = os.getenv("DB_USER")
    password = os.getenv("DB_PASS")
    if user and password:
        host = os.getenv("DB_HOST", "localhost")
        name = os.getenv("DB_NAME", "bloodDb")
        return f"postgresql://{user}:{password}@{host}/{name}"
    return f"sqlite:///{BASE_DIR / 'donorhub.db'}"


class Settings:
    PROJECT_NAME = "DonorHub Backend"

    DATABASE_URL = _database_url()

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 5000))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", 10))
    MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", 100))

    # "permissive" sets any known status, "strict" only closes in-progress requests
    DONATION_STATUS_GUARD = os.getenv("DONATION_STATUS_GUARD", "permissive").lower()

    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 12))

    SEED_ADMIN_EMAIL = os.getenv("SEED_ADMIN_EMAIL")
    SEED_ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD")
    SEED_ADMIN_NAME = os.getenv("SEED_ADMIN_NAME", "Administrator")
    SEED_ADMIN_BLOOD_GROUP = os.getenv("SEED_ADMIN_BLOOD_GROUP", "O+")

    cors_origins = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]


settings = Settings()
