"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every error the CLI can report derives from ApplicationError and is
rendered once, at the top of command execution.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when credentials or settings are missing or invalid."""

    def __init__(
        self,
        message: str = "Buttondown API key is required. Set BUTTONDOWN_API_KEY environment variable.",
        code: str = "CFG_MISSING_API_KEY",
    ) -> None:
        super().__init__(message, code=code)


class UsageError(ApplicationError):
    """Raised when CLI arguments are missing or invalid. No request is made."""

    def __init__(self, message: str = "Invalid usage") -> None:
        super().__init__(message, code="CLI_USAGE_ERROR")


class RemoteError(ApplicationError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(message, code="API_REMOTE_ERROR")


class TransportError(ApplicationError):
    """Raised when the request fails before any HTTP response arrives."""

    def __init__(self, message: str = "Could not reach the Buttondown API") -> None:
        super().__init__(message, code="API_TRANSPORT_ERROR")


class DecodeError(ApplicationError):
    """Raised when a response body does not match the expected resource shape."""

    def __init__(self, message: str = "Unexpected response from the Buttondown API") -> None:
        super().__init__(message, code="API_DECODE_ERROR")
