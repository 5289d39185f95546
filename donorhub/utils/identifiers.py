import uuid

from donorhub.utils.errors import BadRequestError


def new_id() -> str:
    return uuid.uuid4().hex


def parse_id(value: str, label: str = "id") -> str:
    """Normalize a path identifier into the stored hex form.

    Anything that is not a UUID (hex, with or without dashes) is rejected
    before it reaches the database.
    """
    try:
        return uuid.UUID(str(value).strip()).hex
    except (TypeError, ValueError):
        raise BadRequestError(f"Invalid {label}: {value}", error_code="INVALID_ID")


def normalize_email(value: str) -> str:
    """Stored and looked-up form of an email address: trimmed and lowercased."""
    return str(value).strip().lower()
