"""Core package - configuration, registry and errors."""

from .config import Settings, get_settings
from .exceptions import (
    ShortenerError,
    InvalidUrl,
    InvalidShortcode,
    DuplicateShortcode,
    ShortcodeGenerationFailed,
)
from .registry import Clock, Registry, utc_now

__all__ = [
    "Settings",
    "get_settings",
    "ShortenerError",
    "InvalidUrl",
    "InvalidShortcode",
    "DuplicateShortcode",
    "ShortcodeGenerationFailed",
    "Clock",
    "Registry",
    "utc_now",
]
