"""URL shortening utilities module.

This module handles the generation and validation of short codes, URL
checks and the small amount of time arithmetic links need.
"""

import math
import re
import secrets
import string
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

# Characters allowed in generated short codes (URL-safe)
ALPHABET = string.ascii_letters + string.digits + "_-"

DEFAULT_SHORT_CODE_LENGTH = 6
DEFAULT_VALIDITY_MINUTES = 30
MAX_VALIDITY_MINUTES = timedelta.max // timedelta(minutes=1)
LATEST_EXPIRY = datetime.max.replace(tzinfo=timezone.utc)

_URL_RE = re.compile(r"https?://.+")
_LEADING_INT_RE = re.compile(r"\s*([+-]?)(\d+)")


def generate_short_code(length: int = DEFAULT_SHORT_CODE_LENGTH) -> str:
    """Generate a random short code.

    Args:
        length: Length of the generated code.

    Returns:
        Random short code string.
    """
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def validate_short_code(code: str, min_length: int = 4, max_length: int = 20) -> bool:
    """Validate custom short code format.

    Args:
        code: Short code to validate.
        min_length: Shortest accepted code.
        max_length: Longest accepted code.

    Returns:
        True if valid, False otherwise.
    """
    if not code:
        return False
    pattern = rf"[a-zA-Z0-9_-]{{{min_length},{max_length}}}"
    return re.fullmatch(pattern, code) is not None


def is_valid_url(url: str) -> bool:
    """Check that a URL starts with http:// or https:// and has something after it."""
    return bool(url) and _URL_RE.match(url) is not None


def parse_validity(
    value: Optional[Union[int, float, str]], default: int = DEFAULT_VALIDITY_MINUTES
) -> int:
    """Parse a validity period in minutes.

    Leading digits are taken the way a lenient integer parse reads them
    ("15min" is 15, "1.5" is 1). Anything unparseable or not positive
    becomes the default; huge values are capped at MAX_VALIDITY_MINUTES.

    Args:
        value: Raw validity from a form or request body.
        default: Minutes used when value is unusable.

    Returns:
        Validity in whole minutes.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        minutes = value
    else:
        match = _LEADING_INT_RE.match(str(value))
        if not match:
            return default
        sign, digits = match.groups()
        if sign == "-":
            return default
        digits = digits.lstrip("0") or "0"
        # int() refuses very long digit strings
        if len(digits) > len(str(MAX_VALIDITY_MINUTES)):
            return MAX_VALIDITY_MINUTES
        minutes = int(digits)
    if minutes <= 0:
        return default
    return min(minutes, MAX_VALIDITY_MINUTES)


def expiry_from(now: datetime, minutes: int) -> datetime:
    """Instant a link made at now expires, clamped to the latest representable one."""
    try:
        return now + timedelta(minutes=minutes)
    except OverflowError:
        return LATEST_EXPIRY


def remaining_minutes(expires_at: datetime, now: datetime) -> int:
    """Whole minutes left before expiry, never negative."""
    seconds = (expires_at - now).total_seconds()
    return max(0, math.floor(seconds / 60))


def create_short_url(base_url: str, short_code: str) -> str:
    """Create full short URL from base URL and short code.

    Args:
        base_url: Base URL of the service.
        short_code: Short code.

    Returns:
        Full short URL string.
    """
    return f"{base_url.rstrip('/')}/{short_code}"
