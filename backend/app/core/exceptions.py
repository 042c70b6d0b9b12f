"""
Error taxonomy for deck generation.

Every error carries the HTTP status it maps to at the API boundary; the
exception handler in ``app.main`` turns any ``DeckError`` into a
``{"error": <message>}`` JSON body.
"""

FALLBACK_MESSAGE = "Failed to generate pitch deck"


class DeckError(Exception):
    """Base class for every failure surfaced to the caller."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DeckError):
    """A required pitch field is absent or empty."""

    status_code = 400

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class ConfigurationError(DeckError):
    """Google credentials are not configured."""


class RemoteServiceError(DeckError):
    """Google rejected a call. ``message`` is Google's reason, verbatim."""

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)


class AuthenticationError(RemoteServiceError):
    """Google rejected the stored credentials."""


class DeckGenerationError(DeckError):
    """Wraps an unexpected failure raised while building a deck."""

    def __init__(self, message: str | None = None):
        super().__init__(message or FALLBACK_MESSAGE)
