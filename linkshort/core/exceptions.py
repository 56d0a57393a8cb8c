"""Errors raised while creating short URLs."""


class ShortenerError(Exception):
    """Base class for failures reported back to the person shortening a URL."""

    error_code = "shortener_error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidUrl(ShortenerError):
    """Raised when the long URL is not an http(s) URL."""

    error_code = "invalid_url"

    def __init__(self, message: str = "URL must start with http:// or https://"):
        super().__init__(message)


class InvalidShortcode(ShortenerError):
    """Raised when a custom shortcode has the wrong length or characters."""

    error_code = "invalid_shortcode"

    def __init__(
        self, message: str = "Custom shortcode must be 4-20 chars alphanumeric/_/-"
    ):
        super().__init__(message)


class DuplicateShortcode(ShortenerError):
    """Raised when a custom shortcode is already taken."""

    error_code = "duplicate_shortcode"
    status_code = 409

    def __init__(self, message: str = "Custom shortcode already exists"):
        super().__init__(message)


class ShortcodeGenerationFailed(ShortenerError):
    """Raised when no free shortcode was drawn within the attempt limit."""

    error_code = "shortcode_generation_failed"
    status_code = 500

    def __init__(self, message: str = "Failed to generate unique short code"):
        super().__init__(message)
