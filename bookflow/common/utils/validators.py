import re
from decimal import Decimal, InvalidOperation
from typing import Optional


# one "@", no whitespace, a dotted domain without empty labels
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s.]+(\.[^@\s.]+)+$")

MIN_PASSWORD_LENGTH = 6


def normalize_email(value: Optional[str]) -> str:
    email = (value or "").strip().lower()
    if not email:
        raise ValueError("email is required")
    if len(email) > 254 or not _EMAIL_RE.match(email):
        raise ValueError("email address is malformed")
    local_part = email.split("@", 1)[0]
    if local_part.startswith(".") or local_part.endswith(".") or ".." in local_part:
        raise ValueError("email address is malformed")
    return email


def ensure_password(value: Optional[str]) -> str:
    if not value:
        raise ValueError("password is required")
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"password must be at least {MIN_PASSWORD_LENGTH} characters")
    return value


def ensure_price(value, field: str = "price") -> Decimal:
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValueError(f"{field} must be a number") from None
    if not price.is_finite() or price < 0:
        raise ValueError(f"{field} must be >= 0")
    return price.quantize(Decimal("0.01"))


# sqlite and most databases store integer keys as signed 64-bit
MAX_ROW_ID = 2**63 - 1


def is_storable_id(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 < value <= MAX_ROW_ID


def ensure_item_id(value) -> int:
    if isinstance(value, bool):
        raise ValueError(f"id must be an integer, got {value!r}")
    try:
        item_id = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"id must be an integer, got {value!r}") from None
    if isinstance(value, float) and value != item_id:
        raise ValueError(f"id must be an integer, got {value!r}")
    if not is_storable_id(item_id):
        raise ValueError(f"id out of range: {value!r}")
    return item_id
