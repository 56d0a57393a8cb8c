"""Link service for the URL shortener.

Ties the registry to the three things callers do with it:
- Shorten a URL (validate, pick a short code, store)
- Resolve a short code (redirect, not found or expired)
- List every stored link with the minutes it has left
"""

import logging
from typing import Callable, Iterable, Optional, Union

from fastapi import Request

from ..core.config import Settings
from ..core.exceptions import (
    DuplicateShortcode,
    InvalidShortcode,
    InvalidUrl,
    ShortcodeGenerationFailed,
)
from ..core.registry import Clock, Registry, utc_now
from ..models.link import (
    CreatedLink,
    LinkStats,
    Resolution,
    ResolutionState,
    ShortLink,
)
from ..utils.shortener import (
    create_short_url,
    expiry_from,
    generate_short_code,
    is_valid_url,
    parse_validity,
    remaining_minutes,
    validate_short_code,
)

logger = logging.getLogger(__name__)


class LinkService:
    """Service layer owning the registry and every change made to it."""

    def __init__(
        self,
        settings: Settings,
        registry: Optional[Registry] = None,
        clock: Optional[Clock] = None,
        code_generator: Optional[Callable[[int], str]] = None,
        reserved_codes: Iterable[str] = (),
    ):
        """Initialize the link service.

        Args:
            settings: Application settings.
            registry: Registry to store links in, a fresh one if omitted.
            clock: Source of the current instant.
            code_generator: Produces a random short code of a given length.
            reserved_codes: Path segments served by other routes, never issued.
        """
        self.settings = settings
        self.registry = registry if registry is not None else Registry()
        self.clock = clock or utc_now
        self.code_generator = code_generator or generate_short_code
        self.reserved_codes = frozenset(reserved_codes)

    def shorten(
        self,
        original_url: str,
        custom_code: Optional[str] = None,
        validity: Optional[Union[int, float, str]] = None,
        base_url: str = "",
    ) -> CreatedLink:
        """Create a short URL for a long URL.

        Args:
            original_url: The original long URL.
            custom_code: Optional custom short code; empty means none.
            validity: Validity in minutes; bad values fall back to the default.
            base_url: Origin the short URL is built on.

        Returns:
            The stored link and its short URL.

        Raises:
            InvalidUrl: If the URL is not http(s).
            InvalidShortcode: If the custom code is malformed or reserved.
            DuplicateShortcode: If the custom code is taken.
            ShortcodeGenerationFailed: If no free code could be drawn.
        """
        if not is_valid_url(original_url):
            logger.error(f"Invalid URL format submitted: {original_url!r}")
            raise InvalidUrl()

        if custom_code and not validate_short_code(
            custom_code,
            self.settings.min_custom_code_length,
            self.settings.max_custom_code_length,
        ):
            logger.error(f"Invalid custom shortcode: {custom_code!r}")
            raise InvalidShortcode()

        minutes = parse_validity(validity, self.settings.default_validity_minutes)
        short_code = self._resolve_short_code(custom_code)

        link = ShortLink(
            destination_url=original_url,
            expires_at=expiry_from(self.clock(), minutes),
        )
        self.registry.insert(short_code, link)
        logger.info(
            f"Short URL created: {short_code} -> {original_url} "
            f"(valid for {minutes} min)"
        )

        public_base = self.settings.public_base_url or base_url
        return CreatedLink(
            short_code=short_code,
            short_url=create_short_url(public_base, short_code),
            link=link,
        )

    def _resolve_short_code(self, custom_code: Optional[str]) -> str:
        if custom_code:
            if custom_code in self.reserved_codes:
                logger.error(f"Custom shortcode is reserved: {custom_code}")
                raise InvalidShortcode("Custom shortcode is reserved")
            if custom_code in self.registry:
                logger.error(f"Custom shortcode already exists: {custom_code}")
                raise DuplicateShortcode()
            return custom_code

        for _ in range(self.settings.max_generation_attempts):
            short_code = self.code_generator(self.settings.short_code_length)
            if short_code not in self.registry and short_code not in self.reserved_codes:
                return short_code

        logger.error(
            f"No free short code after {self.settings.max_generation_attempts} attempts"
        )
        raise ShortcodeGenerationFailed()

    def resolve(self, short_code: str) -> Resolution:
        """Look up a short code and decide where it leads.

        Expired links are removed from the registry as they are found.

        Args:
            short_code: The short URL code.

        Returns:
            Resolution describing the outcome.
        """
        link = self.registry.get(short_code)
        if link is None:
            logger.error(f"Redirect failed: code not found: {short_code}")
            return Resolution(short_code=short_code, state=ResolutionState.NOT_FOUND)

        if link.is_expired(self.clock()):
            logger.info(f"Redirect failed: link expired: {short_code}")
            self.registry.remove_expired(short_code)
            return Resolution(short_code=short_code, state=ResolutionState.EXPIRED)

        logger.info(f"Redirecting {short_code} to {link.destination_url}")
        return Resolution(
            short_code=short_code,
            state=ResolutionState.REDIRECTING,
            destination_url=link.destination_url,
            redirect_delay_ms=self.settings.redirect_delay_ms,
        )

    def list_links(self) -> list[LinkStats]:
        """List every stored link, expired ones included."""
        now = self.clock()
        return [
            LinkStats(
                short_code=short_code,
                destination_url=link.destination_url,
                expires_at=link.expires_at,
                remaining_minutes=remaining_minutes(link.expires_at, now),
            )
            for short_code, link in self.registry.snapshot().items()
        ]


def get_service(request: Request) -> LinkService:
    """Get the application's link service for dependency injection.

    Args:
        request: FastAPI request object.

    Returns:
        LinkService instance.
    """
    return request.app.state.service
