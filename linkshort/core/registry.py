"""In-memory link registry for the URL shortener.

This module holds the shortcode-to-link table owned by the application
and the clock used to judge expiry.
"""

import logging
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional

from ..models.link import ShortLink

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Registry:
    """Mapping from shortcode to the link it resolves to.

    Callers check uniqueness before inserting; the registry itself never
    refuses a write.
    """

    def __init__(self) -> None:
        self._links: dict[str, ShortLink] = {}

    def __contains__(self, short_code: object) -> bool:
        return short_code in self._links

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[str]:
        return iter(self._links)

    def get(self, short_code: str) -> Optional[ShortLink]:
        """Get the link stored under a short code.

        Args:
            short_code: The short URL code.

        Returns:
            The stored link or None if not found.
        """
        return self._links.get(short_code)

    def insert(self, short_code: str, link: ShortLink) -> None:
        """Store a link under a short code.

        Args:
            short_code: The short URL code.
            link: Link to store.
        """
        self._links[short_code] = link
        logger.debug(f"Inserted short code: {short_code}")

    def remove_expired(self, short_code: str) -> None:
        """Drop a short code; unknown codes are ignored.

        Args:
            short_code: The short URL code.
        """
        if self._links.pop(short_code, None) is not None:
            logger.info(f"Removed expired short code: {short_code}")

    def snapshot(self) -> Mapping[str, ShortLink]:
        """Read-only copy of the current table."""
        return MappingProxyType(dict(self._links))
