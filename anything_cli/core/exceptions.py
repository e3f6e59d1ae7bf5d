"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Raised below the CLI entry point; only the entry point turns them into
a process exit code.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigError(ApplicationError):
    """Raised when the client config cannot be loaded or saved."""

    def __init__(self, message: str = "Configuration error") -> None:
        super().__init__(message, code="CFG_ERROR")


class UsageError(ApplicationError):
    """Raised when an internal command is invoked with missing arguments."""

    def __init__(self, message: str = "Invalid usage") -> None:
        super().__init__(message, code="CLI_USAGE")


class TransportError(ApplicationError):
    """Raised when the HTTP request cannot be completed."""

    def __init__(self, message: str = "Request failed") -> None:
        super().__init__(message, code="HTTP_TRANSPORT_ERROR")


class ResponseDecodeError(ApplicationError):
    """Raised when the response body cannot be decoded as text."""

    def __init__(self, message: str = "Failed to read response.") -> None:
        super().__init__(message, code="HTTP_DECODE_ERROR")


class UpdateError(ApplicationError):
    """Raised when self-update cannot complete."""

    def __init__(self, message: str = "Update failed") -> None:
        super().__init__(message, code="SYS_UPDATE_ERROR")
