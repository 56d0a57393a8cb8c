"""Utils package for the URL shortener."""

from .shortener import (
    ALPHABET,
    generate_short_code,
    validate_short_code,
    is_valid_url,
    parse_validity,
    expiry_from,
    remaining_minutes,
    create_short_url,
)

__all__ = [
    "ALPHABET",
    "generate_short_code",
    "validate_short_code",
    "is_valid_url",
    "parse_validity",
    "expiry_from",
    "remaining_minutes",
    "create_short_url",
]
