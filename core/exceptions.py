"""Application exception hierarchy.

The parser itself never raises for user input; these cover construction-time
configuration problems and failures of injected collaborators.
"""

# Default user-facing messages (English UI)
_DEFAULT_USER_MSG = "Something went wrong"
_KEYWORD_MAPPING_MSG = "Order assistant is misconfigured"
_CATALOG_UNAVAILABLE_MSG = "Service catalog is unavailable. Try again later"


class AppError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str = "Internal error",
        user_message: str = _DEFAULT_USER_MSG,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.user_message = user_message


class KeywordMappingError(AppError):
    """Raised when a keyword or display-name dictionary is malformed."""

    def __init__(
        self,
        message: str = "Invalid keyword mapping",
        user_message: str = _KEYWORD_MAPPING_MSG,
    ) -> None:
        super().__init__(message=message, user_message=user_message)


class CatalogUnavailableError(AppError):
    """Raised when the injected catalog lookup fails."""

    def __init__(
        self,
        message: str = "Catalog lookup failed",
        user_message: str = _CATALOG_UNAVAILABLE_MSG,
    ) -> None:
        super().__init__(message=message, user_message=user_message)
